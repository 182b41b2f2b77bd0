"""Validators: plain functions of the submitted text.

    def min_len(text):
        if len(text) < 3:
            return "too short"

A validator returns None to accept and an error message to refuse. Raising
ValueError counts as refusing, with the exception text as the message.
Validators only ever see the text, never the prompt.
"""

from __future__ import annotations

from typing import Callable, Optional

from .logging_setup import get_logger


Validator = Callable[[str], Optional[str]]

logger = get_logger("validation")


def check(validator: Optional[Validator], text: str) -> Optional[str]:
    '''Returns the error message, or None when `text` is accepted.'''
    if validator is None:
        return None
    try:
        result = validator(text)
    except ValueError as e:
        result = str(e) or "Invalid value"
    if result is None or result is True:
        return None
    if result is False:
        result = "Invalid value"
    logger.debug("validation refused input: %s", result, extra={"event": "validation_failed"})
    return str(result)


def required(message: str = "Input required") -> Validator:
    def validate(text: str) -> Optional[str]:
        return message if not text else None
    return validate
