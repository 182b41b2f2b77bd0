"""Static output framing the prompts: intro, outro, notes."""

from __future__ import annotations

from blessed import Terminal

from .theme import locked_theme


def emit(text: str):
    print(text, end='', flush=True)


def intro(title):
    '''`┌  title`, opening a group of prompts.'''
    with locked_theme() as theme:
        emit(theme.format_intro(str(title)))


def outro(message):
    '''`└  message`, closing a group of prompts.'''
    with locked_theme() as theme:
        emit(theme.format_outro(str(message)))


def outro_cancel(message):
    with locked_theme() as theme:
        emit(theme.format_outro_cancel(str(message)))


def note(prompt, message):
    '''A boxed, multi-line message with a title.'''
    with locked_theme() as theme:
        emit(theme.format_note(str(prompt), str(message)))


def clear_screen(term=None):
    term = term or Terminal()
    emit(term.home + term.clear)
