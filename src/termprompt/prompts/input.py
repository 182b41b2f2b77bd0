from __future__ import annotations

from typing import Optional

from ..cursor import StringCursor
from ..state import State, ThemeState
from ..theme import locked_theme
from ..validation import check, required as required_validator
from .text import TextPrompt


class Input(TextPrompt):
    '''
    Plain text input:

        name = Input("Project name").placeholder("my-app").interact()

    Empty input is refused unless `.required(False)`.
    '''

    def __init__(self, prompt):
        super().__init__(prompt)
        self._placeholder = StringCursor()
        self._required = True

    def placeholder(self, text):
        self._placeholder = StringCursor(str(text))
        self._placeholder.move_home()
        return self

    def default_input(self, text):
        '''Starts the prompt with `text` already typed.'''
        self._input = StringCursor(str(text))
        return self

    def required(self, required: bool = True):
        self._required = required
        return self

    def _submit_check(self, text: str) -> Optional[str]:
        if self._required:
            error = check(required_validator(), text)
            if error is not None:
                return error
        elif not text:
            return None
        return super()._submit_check(text)

    def render(self, state: State) -> str:
        theme_state = ThemeState.of(state)
        with locked_theme() as theme:
            if self._input.is_empty() and not self._placeholder.is_empty():
                body = theme.format_placeholder(theme_state, self._placeholder)
            else:
                body = theme.format_input(theme_state, self._input)
            return theme.format_header(theme_state, self._prompt) + body + theme.format_footer(theme_state)
