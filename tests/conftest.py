# Shared fixtures for the termprompt pytest suite.

import pytest

from termprompt import configure, reset_settings, reset_theme
from termprompt.errors import TerminalError
from termprompt.keys import Char


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    """Plain, unicode frames so tests can compare text directly."""
    for var in ("NO_COLOR", "FORCE_COLOR", "TERMPROMPT_COLORS", "TERMPROMPT_UNICODE",
                "TERMPROMPT_ESC_DELAY", "TERMPROMPT_LOG_LEVEL", "TERMPROMPT_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    configure(colors=False, unicode=True)
    yield
    reset_theme()
    reset_settings()


class FakeSession:
    """Stands in for TerminalSession: scripted keys in, frames out."""

    def __init__(self, events):
        self.events = list(events)
        self.frames = []
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc):
        self.exited = True
        return False

    def read_key(self):
        if not self.events:
            raise TerminalError("keyboard input closed")
        return self.events.pop(0)

    def draw(self, frame):
        self.frames.append(frame)


@pytest.fixture
def session():
    return FakeSession


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def typed(text):
    """Char events for every codepoint of `text`."""
    return [Char(c) for c in text]
