# Settings, validation helpers and diagnostic logging.

import json
import logging

import pytest

from termprompt import Password, configure, configure_logging, get_logger, get_settings, load_settings
from termprompt.keys import Char, Key
from termprompt.validation import check, required


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def test_no_color_disables_colors():
    assert load_settings({"NO_COLOR": "1"}).colors is False


def test_explicit_flag_wins_over_no_color():
    assert load_settings({"NO_COLOR": "1", "TERMPROMPT_COLORS": "yes"}).colors is True


def test_force_color_and_dumb_term():
    assert load_settings({"FORCE_COLOR": "1"}).colors is True
    assert load_settings({"TERM": "dumb"}).colors is False


def test_unicode_flag():
    assert load_settings({"TERMPROMPT_UNICODE": "0"}).unicode is False
    assert load_settings({"TERMPROMPT_UNICODE": "on"}).unicode is True
    assert load_settings({"TERM": "linux"}).unicode is False


def test_values_are_normalized():
    settings = load_settings({"TERMPROMPT_ESC_DELAY": "9", "TERMPROMPT_LOG_LEVEL": "chatty"})
    assert settings.esc_delay == 2.0
    assert settings.log_level == "WARNING"
    assert load_settings({"TERMPROMPT_ESC_DELAY": "soon"}).esc_delay == 0.35
    assert load_settings({"TERMPROMPT_LOG_LEVEL": "debug"}).log_level == "DEBUG"


def test_configure_overrides_fields():
    configure(esc_delay=0.1)
    assert get_settings().esc_delay == 0.1
    assert get_settings().colors is False


def test_configure_rejects_unknown_fields():
    with pytest.raises(TypeError):
        configure(colour=True)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def test_check_without_validator_accepts():
    assert check(None, "") is None


def test_check_return_conventions():
    assert check(lambda t: None, "x") is None
    assert check(lambda t: True, "x") is None
    assert check(lambda t: "nope", "x") == "nope"
    assert check(lambda t: False, "x") == "Invalid value"


def test_check_value_error():
    assert check(lambda t: int(t) and None, "12") is None
    assert check(lambda t: int(t) and None, "twelve").startswith("invalid literal")


def test_required_validator():
    assert check(required(), "") == "Input required"
    assert check(required("Say something"), "") == "Say something"
    assert check(required(), "x") is None


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture
def _restore_logger():
    logger = get_logger()
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_child_logger_names():
    assert get_logger().name == "termprompt"
    assert get_logger("theme").name == "termprompt.theme"


def test_logging_without_file_adds_no_handler(_restore_logger):
    before = list(_restore_logger.handlers)
    configure_logging()
    assert _restore_logger.handlers == before


def test_logging_writes_json_lines(tmp_path, _restore_logger):
    path = tmp_path / "termprompt.log"
    configure_logging(level="DEBUG", path=path)
    configure_logging(level="DEBUG", path=path)
    get_logger("test").debug("hello", extra={"event": "test_event"})
    for handler in _restore_logger.handlers:
        handler.flush()

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert records[0]["event"] == "logging_configured"
    assert records[-1]["msg"] == "hello"
    assert records[-1]["logger"] == "termprompt.test"
    assert records[-1]["event"] == "test_event"
    assert sum(isinstance(h, logging.FileHandler) for h in _restore_logger.handlers) == 1


def test_unknown_level_argument_falls_back(_restore_logger):
    configure_logging(level="verbose")
    assert _restore_logger.level == logging.WARNING
    configure_logging(level="info")
    assert _restore_logger.level == logging.INFO


def test_records_name_the_prompt(tmp_path, session, _restore_logger):
    path = tmp_path / "termprompt.log"
    configure_logging(level="DEBUG", path=path)
    Password("Secret").interact(session([Char("x"), Key.ENTER]))
    for handler in _restore_logger.handlers:
        handler.flush()

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    submitted = [r for r in records if r.get("event") == "prompt_submitted"]
    assert submitted and submitted[0]["prompt"] == "Password"
    assert "prompt" not in records[0]
