"""The terminal a prompt runs in: key input and frame output, through blessed."""

from __future__ import annotations

import math
import sys
from contextlib import ExitStack
from typing import Optional

from blessed import Terminal

from .config import get_settings
from .errors import TerminalError
from .keys import Event, Key, from_keystroke
from .logging_setup import get_logger


logger = get_logger("terminal")


class TerminalSession:
    '''
    Owns the terminal for one prompt. Used as a context manager: entering
    switches to cbreak mode and hides the cursor, leaving restores both, also
    when leaving on an exception.

    Frames are redrawn whole: `draw` moves back over the rows the previous
    frame took, erases to the end of the screen and writes the new one.
    '''

    def __init__(self, term: Optional[Terminal] = None):
        self.term = term or Terminal()
        self._rows = 0
        self._stack: Optional[ExitStack] = None

    def __enter__(self):
        if not self.term.is_a_tty or not sys.stdin.isatty():
            raise TerminalError("prompts need an interactive terminal")
        with ExitStack() as stack:
            stack.enter_context(self.term.cbreak())
            stack.enter_context(self.term.hidden_cursor())
            self._stack = stack.pop_all()
        self._rows = 0
        return self

    def __exit__(self, *exc):
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()
        return False

    def read_key(self) -> Event:
        '''Blocks until one key arrives.'''
        try:
            keystroke = self.term.inkey(esc_delay=get_settings().esc_delay)
        except KeyboardInterrupt:
            return Key.INTERRUPT
        if not keystroke:
            raise TerminalError("keyboard input closed")
        return from_keystroke(keystroke)

    def _height(self, frame: str) -> int:
        width = self.term.width or 0
        rows = 0
        for line in frame.split("\n")[:-1]:
            if width <= 0:
                rows += 1
            else:
                rows += max(1, math.ceil(self.term.length(line) / width))
        return rows

    def draw(self, frame: str):
        out = ""
        if self._rows:
            out += self.term.move_up * self._rows + "\r"
        out += self.term.clear_eos + frame
        self.write(out)
        self._rows = self._height(frame)

    def write(self, text: str):
        try:
            self.term.stream.write(text)
            self.term.stream.flush()
        except (OSError, ValueError) as e:
            raise TerminalError(f"can't write to terminal: {e}") from e
