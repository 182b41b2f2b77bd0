"""Key events fed to prompts, and their translation from blessed keystrokes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Char:
    char: str

    def is_ascii_control(self) -> bool:
        return len(self.char) == 1 and (ord(self.char) < 0x20 or ord(self.char) == 0x7f)


class Key(enum.Enum):
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESCAPE = "escape"
    INTERRUPT = "interrupt"
    TAB = "tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    CTRL_LEFT = "ctrl_left"
    CTRL_RIGHT = "ctrl_right"
    DELETE_WORD = "delete_word"
    UNKNOWN = "unknown"


Event = Union[Char, Key]


# blessed key names -> events
KEY_NAMES = {
    'KEY_ENTER': Key.ENTER,
    'KEY_BACKSPACE': Key.BACKSPACE,
    'KEY_DELETE': Key.DELETE,
    'KEY_ESCAPE': Key.ESCAPE,
    'KEY_TAB': Key.TAB,
    'KEY_LEFT': Key.LEFT,
    'KEY_RIGHT': Key.RIGHT,
    'KEY_UP': Key.UP,
    'KEY_DOWN': Key.DOWN,
    'KEY_HOME': Key.HOME,
    'KEY_END': Key.END,
    'KEY_CTRL_LEFT': Key.CTRL_LEFT,
    'KEY_CTRL_RIGHT': Key.CTRL_RIGHT,
}

# raw codepoints blessed doesn't name
KEY_ALIASES = {
    '\x03': Key.INTERRUPT,
    '\x04': Key.INTERRUPT,
    '\x17': Key.DELETE_WORD,
    '\x01': Key.HOME,
    '\x05': Key.END,
}


def from_keystroke(keystroke) -> Event:
    '''Translates a `blessed.keyboard.Keystroke` into an Event.'''
    text = str(keystroke)
    if keystroke.is_sequence:
        return KEY_NAMES.get(keystroke.name, Key.UNKNOWN)
    if text in KEY_ALIASES:
        return KEY_ALIASES[text]
    if len(text) == 1:
        return Char(text)
    return Key.UNKNOWN
