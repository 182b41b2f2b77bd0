"""Progress spinner, animated by a rich Live display."""

from __future__ import annotations

import time
from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .logging_setup import get_logger
from .theme import locked_theme


logger = get_logger("spinner")

FRAMES_PER_SECOND = 10


class Spinner:
    '''
        spinner = Spinner()
        spinner.start("Installing")
        ...
        spinner.stop("Installed")

    The animated line is transient: `stop` and `error` replace it with a
    final line from the theme.
    '''

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
        self.message = ""
        self._live: Optional[Live] = None
        self._started = 0.0

    def _frame(self) -> Text:
        with locked_theme() as theme:
            chars = theme.spinner_chars()
            tick = int((time.monotonic() - self._started) * FRAMES_PER_SECOND)
            return Text.from_ansi(theme.format_spinner_start(chars[tick % len(chars)], self.message))

    def is_running(self) -> bool:
        return self._live is not None

    def start(self, message):
        if self._live is not None:
            raise RuntimeError("spinner already started")
        self.message = str(message)
        self._started = time.monotonic()
        self._live = Live(get_renderable=self._frame, console=self.console,
                          refresh_per_second=FRAMES_PER_SECOND, transient=True)
        self._live.start()
        logger.debug("spinner started", extra={"event": "spinner_started"})

    def set_message(self, message):
        self.message = str(message)

    def _finish(self, line: str):
        live, self._live = self._live, None
        if live is not None:
            live.stop()
        self.console.file.write(line + "\n")
        self.console.file.flush()

    def stop(self, message):
        with locked_theme() as theme:
            line = theme.format_spinner_stop(str(message))
        self._finish(line)
        logger.debug("spinner stopped", extra={"event": "spinner_stopped"})

    def error(self, message):
        with locked_theme() as theme:
            line = theme.format_spinner_error(str(message))
        self._finish(line)
        logger.debug("spinner failed", extra={"event": "spinner_error"})
