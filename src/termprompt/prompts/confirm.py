from __future__ import annotations

from ..interaction import PromptInteraction
from ..keys import Char, Event, Key
from ..state import Active, State, Submit, ThemeState
from ..theme import locked_theme


_TOGGLE_KEYS = (Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN, Key.TAB)
_TOGGLE_CHARS = ("h", "j", "k", "l")


class Confirm(PromptInteraction):
    '''Yes / No question. `y` and `n` answer immediately, Enter takes the highlighted one.'''

    def __init__(self, prompt):
        self._prompt = str(prompt)
        self._value = False

    def initial_value(self, value: bool):
        self._value = bool(value)
        return self

    def on(self, event: Event) -> State:
        if event is Key.ENTER:
            return Submit(self._value)
        if event in _TOGGLE_KEYS:
            self._value = not self._value
        elif isinstance(event, Char):
            char = event.char.lower()
            if char in _TOGGLE_CHARS:
                self._value = not self._value
            elif char == "y":
                self._value = True
                return Submit(True)
            elif char == "n":
                self._value = False
                return Submit(False)
        return Active()

    def render(self, state: State) -> str:
        theme_state = ThemeState.of(state)
        with locked_theme() as theme:
            return (theme.format_header(theme_state, self._prompt)
                    + theme.format_confirm(theme_state, self._value)
                    + theme.format_footer(theme_state))

    def interact(self, session=None) -> bool:
        return self.run(session)
