from __future__ import annotations

from ..state import State, ThemeState
from ..theme import get_theme, locked_theme
from .text import TextPrompt


class Password(TextPrompt):
    '''
    Masked text input:

        secret = Password("Passphrase").mask("*").validate(min_len).interact()
    '''

    def __init__(self, prompt):
        super().__init__(prompt)
        self._mask = get_theme().password_mask()

    def mask(self, mask):
        self._mask = str(mask)
        return self

    def render(self, state: State) -> str:
        theme_state = ThemeState.of(state)
        with locked_theme() as theme:
            return (theme.format_header(theme_state, self._prompt)
                    + theme.format_password(theme_state, self._input, self._mask)
                    + theme.format_footer(theme_state))
