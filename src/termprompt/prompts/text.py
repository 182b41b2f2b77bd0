"""Editing and validation shared by the single-line text prompts."""

from __future__ import annotations

from typing import Optional

from ..cursor import StringCursor
from ..interaction import PromptInteraction, submit_or_error
from ..keys import Char, Event, Key
from ..state import Active, Error, State
from ..validation import Validator, check


def apply_edit(cursor: StringCursor, event: Event) -> bool:
    '''Applies an editing key to `cursor`. Returns False for keys that aren't edits.'''
    if isinstance(event, Char):
        if event.is_ascii_control():
            return False
        cursor.insert(event.char)
    elif event is Key.BACKSPACE: cursor.delete_left()
    elif event is Key.DELETE: cursor.delete_right()
    elif event is Key.DELETE_WORD: cursor.delete_word_left()
    elif event is Key.LEFT: cursor.move_left()
    elif event is Key.RIGHT: cursor.move_right()
    elif event is Key.HOME: cursor.move_home()
    elif event is Key.END: cursor.move_end()
    elif event is Key.CTRL_LEFT: cursor.move_left_by_word()
    elif event is Key.CTRL_RIGHT: cursor.move_right_by_word()
    else:
        return False
    return True


class TextPrompt(PromptInteraction):
    def __init__(self, prompt):
        self._prompt = str(prompt)
        self._input = StringCursor()
        self._validate: Optional[Validator] = None
        self._validate_interactively: Optional[Validator] = None

    def validate(self, validator: Validator):
        '''Checked once per Enter; a refusal keeps the prompt open with the text intact.'''
        self._validate = validator
        return self

    def validate_interactively(self, validator: Validator):
        '''Checked after every edit, so problems show up while typing.'''
        self._validate_interactively = validator
        return self

    def _submit_check(self, text: str) -> Optional[str]:
        error = check(self._validate_interactively, text)
        return error if error is not None else check(self._validate, text)

    def _submit(self) -> State:
        text = self._input.to_text()
        return submit_or_error(text, self._submit_check(text))

    def on(self, event: Event) -> State:
        if event is Key.ENTER:
            return self._submit()
        if apply_edit(self._input, event) and self._validate_interactively is not None:
            error = check(self._validate_interactively, self._input.to_text())
            if error is not None:
                return Error(error)
        return Active()

    def interact(self, session=None) -> str:
        return self.run(session)
