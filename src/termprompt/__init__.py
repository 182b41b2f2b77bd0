"""termprompt - interactive terminal prompts in the @clack/prompts style."""

__version__ = "0.1.0"

from . import log
from .config import Settings, configure, get_settings, load_settings, reset_settings
from .cursor import StringCursor
from .errors import PromptConfigError, TerminalError, TermpromptError
from .interaction import PromptInteraction
from .keys import Char, Event, Key
from .logging_setup import configure_logging, get_logger
from .outputs import clear_screen, intro, note, outro, outro_cancel
from .prompts import Confirm, Input, Item, MultiSelect, Password, Select
from .spinner import Spinner
from .state import CANCELLED, Active, Cancel, Error, State, Submit, ThemeState, is_cancelled
from .terminal import TerminalSession
from .theme import ClackTheme, Theme, get_theme, reset_theme, set_theme

__all__ = [
    "log",
    "Settings", "configure", "get_settings", "load_settings", "reset_settings",
    "StringCursor",
    "PromptConfigError", "TerminalError", "TermpromptError",
    "PromptInteraction",
    "Char", "Event", "Key",
    "configure_logging", "get_logger",
    "clear_screen", "intro", "note", "outro", "outro_cancel",
    "Confirm", "Input", "Item", "MultiSelect", "Password", "Select",
    "Spinner",
    "CANCELLED", "Active", "Cancel", "Error", "State", "Submit", "ThemeState", "is_cancelled",
    "TerminalSession",
    "ClackTheme", "Theme", "get_theme", "reset_theme", "set_theme",
]
