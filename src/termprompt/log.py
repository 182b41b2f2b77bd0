"""One-off messages in the prompt column:

    log.info("Using cached dependencies")
    log.warning("No lockfile found")
"""

from __future__ import annotations

from .outputs import emit
from .theme import locked_theme


def _log(text, symbol_for):
    with locked_theme() as theme:
        emit(theme.format_log(str(text), symbol_for(theme)))


def remark(text): _log(text, lambda t: t.remark_symbol())
def info(text): _log(text, lambda t: t.info_symbol())
def warning(text): _log(text, lambda t: t.warning_symbol())
def error(text): _log(text, lambda t: t.error_symbol())
def success(text): _log(text, lambda t: t.submit_symbol())
def step(text): _log(text, lambda t: t.active_symbol())
