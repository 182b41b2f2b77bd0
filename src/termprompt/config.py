"""Process-wide settings, read from the environment."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    colors: bool = True
    unicode: bool = True
    esc_delay: float = 0.35  # seconds blessed waits to tell a lone ESC from a sequence
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _flag(raw: Optional[str]) -> Optional[bool]:
    if raw is None: return None
    raw = raw.strip().lower()
    if raw in _TRUE: return True
    if raw in _FALSE: return False
    return None


def _detect_colors(environ: Mapping[str, str]) -> bool:
    forced = _flag(environ.get("TERMPROMPT_COLORS"))
    if forced is not None:
        return forced
    if "NO_COLOR" in environ:
        return False
    if environ.get("FORCE_COLOR"):
        return True
    if environ.get("TERM") == "dumb":
        return False
    return sys.stdout.isatty()


def _detect_unicode(environ: Mapping[str, str]) -> bool:
    forced = _flag(environ.get("TERMPROMPT_UNICODE"))
    if forced is not None:
        return forced
    if environ.get("TERM") == "linux":  # the bare VT font lacks the box glyphs
        return False
    encoding = getattr(sys.stdout, "encoding", None) or ""
    return encoding.lower().replace("-", "").startswith("utf")


def normalize_level(level) -> str:
    level = str(level).upper()
    return level if level in _LOG_LEVELS else Settings.log_level


def _normalize(settings: Settings) -> Settings:
    level = normalize_level(settings.log_level)
    try:
        delay = float(settings.esc_delay)
    except (TypeError, ValueError):
        delay = Settings.esc_delay
    delay = max(0.0, min(2.0, delay))
    return replace(settings, log_level=level, esc_delay=delay, log_file=settings.log_file or None)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    environ = os.environ if environ is None else environ
    return _normalize(Settings(
        colors=_detect_colors(environ),
        unicode=_detect_unicode(environ),
        esc_delay=environ.get("TERMPROMPT_ESC_DELAY", Settings.esc_delay),
        log_level=environ.get("TERMPROMPT_LOG_LEVEL", Settings.log_level),
        log_file=environ.get("TERMPROMPT_LOG_FILE"),
    ))


_lock = threading.Lock()
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    with _lock:
        if _settings is None:
            _settings = load_settings()
        return _settings


def configure(**overrides) -> Settings:
    '''
    Replaces individual settings for the rest of the process:

        configure(colors=False, unicode=False)
    '''
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown settings: {', '.join(sorted(unknown))}")
    current = get_settings()
    with _lock:
        _settings = _normalize(replace(current, **overrides))
        return _settings


def reset_settings() -> None:
    global _settings
    with _lock:
        _settings = None
