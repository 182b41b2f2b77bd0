"""Render states a prompt moves through, and the payload-free view themes see."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Active:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Submit(Generic[T]):
    value: T


@dataclass(frozen=True)
class Error:
    message: str


State = Union[Active, Cancel, Submit, Error]


def is_terminal(state: State) -> bool:
    return isinstance(state, (Submit, Cancel))


@dataclass(frozen=True)
class ThemeState:
    kind: Literal["active", "cancel", "submit", "error"]
    message: str = ""

    @classmethod
    def of(cls, state: State) -> 'ThemeState':
        if isinstance(state, Active): return ACTIVE
        if isinstance(state, Cancel): return CANCEL
        if isinstance(state, Submit): return SUBMIT
        if isinstance(state, Error): return cls("error", state.message)
        raise TypeError(f"not a prompt state: {state!r}")

    @property
    def is_active(self): return self.kind == "active"
    @property
    def is_cancel(self): return self.kind == "cancel"
    @property
    def is_submit(self): return self.kind == "submit"
    @property
    def is_error(self): return self.kind == "error"

    @property
    def is_editing(self):
        '''Active or error: the input is still live.'''
        return self.kind in ("active", "error")


ACTIVE = ThemeState("active")
CANCEL = ThemeState("cancel")
SUBMIT = ThemeState("submit")


class _Cancelled:
    '''Returned by `interact()` when the user cancels (Esc / Ctrl-C).'''
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self): return False
    def __repr__(self): return "CANCELLED"


CANCELLED = _Cancelled()


def is_cancelled(result: Any) -> bool:
    return result is CANCELLED
