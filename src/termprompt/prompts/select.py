"""Single and multiple choice lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from ..errors import PromptConfigError
from ..interaction import PromptInteraction
from ..keys import Char, Event, Key
from ..state import Active, Error, State, Submit, ThemeState
from ..theme import locked_theme


_UP_KEYS = (Key.UP, Key.LEFT)
_DOWN_KEYS = (Key.DOWN, Key.RIGHT)
_UP_CHARS = ("k", "h")
_DOWN_CHARS = ("j", "l")


@dataclass
class Item:
    value: Any
    label: str
    hint: str = ""


def _as_item(entry) -> Item:
    if isinstance(entry, Item):
        return entry
    if isinstance(entry, tuple) and 2 <= len(entry) <= 3:
        return Item(entry[0], str(entry[1]), str(entry[2]) if len(entry) == 3 else "")
    raise TypeError(f"Expected Item or (value, label[, hint]) tuple, got {entry!r}")


def _movement(event: Event) -> int:
    if event in _UP_KEYS or (isinstance(event, Char) and event.char in _UP_CHARS):
        return -1
    if event in _DOWN_KEYS or (isinstance(event, Char) and event.char in _DOWN_CHARS):
        return 1
    return 0


class _ListPrompt(PromptInteraction):
    def __init__(self, prompt):
        self._prompt = str(prompt)
        self._items: List[Item] = []
        self._cursor = 0

    def item(self, value, label, hint=""):
        self._items.append(Item(value, str(label), str(hint)))
        return self

    def items(self, items: Iterable):
        '''Adds Items or (value, label[, hint]) tuples.'''
        self._items.extend(_as_item(entry) for entry in items)
        return self

    def _index_of(self, value) -> int:
        for i, item in enumerate(self._items):
            if item.value == value:
                return i
        raise PromptConfigError(f"{value!r} is not one of the items")

    def _move(self, event: Event) -> bool:
        step = _movement(event)
        if step == 0:
            return False
        self._cursor = max(0, min(len(self._items) - 1, self._cursor + step))
        return True

    def _check_items(self):
        if not self._items:
            raise PromptConfigError(f"{type(self).__name__} needs at least one item")


class Select(_ListPrompt):
    '''
    Pick one value:

        kind = Select("Project type").item("ts", "TypeScript").item("py", "Python", "recommended").interact()
    '''

    def __init__(self, prompt):
        super().__init__(prompt)
        self._initial_value: Optional[Any] = None
        self._has_initial = False

    def initial_value(self, value):
        self._initial_value = value
        self._has_initial = True
        return self

    def on(self, event: Event) -> State:
        if event is Key.ENTER:
            return Submit(self._items[self._cursor].value)
        self._move(event)
        return Active()

    def render(self, state: State) -> str:
        theme_state = ThemeState.of(state)
        with locked_theme() as theme:
            rows = "".join(
                theme.format_select_item(theme_state, i == self._cursor, item.label, item.hint)
                for i, item in enumerate(self._items)
            )
            return theme.format_header(theme_state, self._prompt) + rows + theme.format_footer(theme_state)

    def interact(self, session=None):
        self._check_items()
        if self._has_initial:
            self._cursor = self._index_of(self._initial_value)
        return self.run(session)


class MultiSelect(_ListPrompt):
    '''
    Pick any number of values. Space toggles the highlighted item, `a` toggles
    all of them. Submits a list in item order.
    '''

    def __init__(self, prompt):
        super().__init__(prompt)
        self._selected: List[bool] = []
        self._initial_values: Sequence = ()
        self._required = True

    def initial_values(self, values: Iterable):
        self._initial_values = list(values)
        return self

    def required(self, required: bool = True):
        self._required = required
        return self

    def _sync_selection(self):
        if len(self._selected) < len(self._items):
            self._selected.extend([False] * (len(self._items) - len(self._selected)))

    def on(self, event: Event) -> State:
        self._sync_selection()
        if event is Key.ENTER:
            values = [item.value for item, on in zip(self._items, self._selected) if on]
            if self._required and not values:
                return Error("Please select at least one option")
            return Submit(values)
        if self._move(event):
            return Active()
        if isinstance(event, Char):
            if event.char == " ":
                self._selected[self._cursor] = not self._selected[self._cursor]
            elif event.char == "a":
                everything = not all(self._selected)
                self._selected = [everything] * len(self._items)
        return Active()

    def render(self, state: State) -> str:
        self._sync_selection()
        theme_state = ThemeState.of(state)
        with locked_theme() as theme:
            rows = "".join(
                theme.format_multiselect_item(theme_state, self._selected[i], i == self._cursor, item.label, item.hint)
                for i, item in enumerate(self._items)
            )
            return theme.format_header(theme_state, self._prompt) + rows + theme.format_footer(theme_state)

    def interact(self, session=None) -> list:
        self._check_items()
        self._selected = [False] * len(self._items)
        for value in self._initial_values:
            self._selected[self._index_of(value)] = True
        return self.run(session)
