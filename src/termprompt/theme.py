"""Visual theme: every string a prompt draws is composed here.

The default `ClackTheme` reproduces the @clack/prompts look. To restyle, subclass
`Theme`, override what you need and install it process-wide:

    class MagentaTheme(Theme):
        def state_symbol_color(self, state):
            return Style(color="magenta")

    set_theme(MagentaTheme())

Themes are looked up when a frame is rendered, so a swap applies to the next
frame of every prompt and never to frames already written.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, NamedTuple

from rich.color import ColorSystem
from rich.style import Style

from .config import get_settings
from .cursor import StringCursor
from .logging_setup import get_logger
from .state import SUBMIT, ThemeState


logger = get_logger("theme")


class Glyph(NamedTuple):
    unicode: str
    ascii: str

    def __str__(self):
        return self.unicode if get_settings().unicode else self.ascii


S_STEP_ACTIVE = Glyph("◆", "*")
S_STEP_CANCEL = Glyph("■", "x")
S_STEP_ERROR = Glyph("▲", "x")
S_STEP_SUBMIT = Glyph("◇", "o")

S_BAR_START = Glyph("┌", "T")
S_BAR = Glyph("│", "|")
S_BAR_END = Glyph("└", "—")

S_RADIO_ACTIVE = Glyph("●", ">")
S_RADIO_INACTIVE = Glyph("○", " ")
S_CHECKBOX_ACTIVE = Glyph("◻", "[•]")
S_CHECKBOX_SELECTED = Glyph("◼", "[+]")
S_CHECKBOX_INACTIVE = Glyph("◻", "[ ]")
S_PASSWORD_MASK = Glyph("▪", "•")

S_BAR_H = Glyph("─", "-")
S_CORNER_TOP_RIGHT = Glyph("╮", "+")
S_CONNECT_LEFT = Glyph("├", "+")
S_CORNER_BOTTOM_RIGHT = Glyph("╯", "+")

S_INFO = Glyph("●", "•")
S_WARN = Glyph("▲", "!")
S_ERROR = Glyph("■", "x")

S_SPINNER = Glyph("◒◐◓◑", "•oO0")


PLAIN = Style()
DIM = Style(dim=True)
STRUCK = Style(dim=True, strike=True)
HIDDEN = Style(conceal=True)
REVERSE = Style(reverse=True)


def paint(style: Style, text) -> str:
    '''Applies `style` to `text` as ANSI escapes; plain text when colors are off.'''
    text = str(text)
    if not get_settings().colors:
        return text
    return style.render(text, color_system=ColorSystem.STANDARD)


def _fg(color: str) -> Style:
    return Style(color=color)


class Theme:
    '''
    Base theme. Methods are grouped as colors/styles, symbols, and `format_*`
    methods that return complete lines (ending in a newline) ready to be
    concatenated into a frame.
    '''

    # --- colors & styles ---

    def bar_color(self, state: ThemeState) -> Style:
        if state.is_active: return _fg("cyan")
        if state.is_cancel: return _fg("red")
        if state.is_submit: return _fg("bright_black")
        return _fg("yellow")

    def state_symbol_color(self, state: ThemeState) -> Style:
        if state.is_submit:
            return _fg("green")
        return self.bar_color(state)

    def checkbox_style(self, state: ThemeState, selected: bool, active: bool) -> Style:
        if state.is_cancel and selected: return STRUCK
        if state.is_submit and selected: return DIM
        if not active: return DIM
        return PLAIN

    def input_style(self, state: ThemeState) -> Style:
        if state.is_cancel: return STRUCK
        if state.is_submit: return DIM
        return PLAIN

    def placeholder_style(self, state: ThemeState) -> Style:
        if state.is_cancel: return HIDDEN
        return DIM

    # --- symbols ---

    def state_symbol(self, state: ThemeState) -> str:
        glyph = {
            "active": S_STEP_ACTIVE,
            "cancel": S_STEP_CANCEL,
            "submit": S_STEP_SUBMIT,
            "error": S_STEP_ERROR,
        }[state.kind]
        return paint(self.state_symbol_color(state), glyph)

    def radio_symbol(self, state: ThemeState, selected: bool) -> str:
        if not state.is_active:
            return ""
        if selected:
            return paint(_fg("green"), S_RADIO_ACTIVE)
        return paint(DIM, S_RADIO_INACTIVE)

    def checkbox_symbol(self, state: ThemeState, selected: bool, active: bool) -> str:
        if not state.is_editing:
            return ""
        if selected:
            return paint(_fg("green"), S_CHECKBOX_SELECTED)
        if active:
            return paint(_fg("cyan"), S_CHECKBOX_ACTIVE)
        return paint(DIM, S_CHECKBOX_INACTIVE)

    def remark_symbol(self) -> str:
        return paint(self.bar_color(SUBMIT), S_CONNECT_LEFT)

    def info_symbol(self) -> str:
        return paint(_fg("blue"), S_INFO)

    def warning_symbol(self) -> str:
        return paint(_fg("yellow"), S_WARN)

    def error_symbol(self) -> str:
        return paint(_fg("red"), S_ERROR)

    def active_symbol(self) -> str:
        return paint(_fg("green"), S_STEP_ACTIVE)

    def submit_symbol(self) -> str:
        return paint(_fg("green"), S_STEP_SUBMIT)

    def password_mask(self) -> str:
        return str(S_PASSWORD_MASK)

    def spinner_chars(self) -> str:
        return str(S_SPINNER)

    def cursor_with_style(self, cursor: StringCursor, style: Style) -> str:
        '''Draws the text in `style` with the caret codepoint reversed.'''
        left, caret, right = cursor.split()
        return paint(style, left) + paint(REVERSE, caret or " ") + paint(style, right)

    # --- framing ---

    def format_intro(self, title: str) -> str:
        color = self.bar_color(SUBMIT)
        return f"{paint(color, S_BAR_START)}  {title}\n{paint(color, S_BAR)}\n"

    def format_outro(self, message: str) -> str:
        return f"{paint(self.bar_color(SUBMIT), S_BAR_END)}  {message}\n"

    def format_outro_cancel(self, message: str) -> str:
        return f"{paint(self.bar_color(SUBMIT), S_BAR_END)}  {paint(_fg('red'), message)}\n"

    def format_header(self, state: ThemeState, prompt: str) -> str:
        return f"{self.state_symbol(state)}  {prompt}\n"

    def format_footer(self, state: ThemeState) -> str:
        if state.is_active: text = f"{S_BAR_END}"
        elif state.is_cancel: text = f"{S_BAR_END}  Operation cancelled."
        elif state.is_submit: text = f"{S_BAR}"
        else: text = f"{S_BAR_END}  {state.message}"
        # newline stays outside the styled span
        return paint(self.bar_color(state), text) + "\n"

    # --- text input ---

    def format_input(self, state: ThemeState, cursor: StringCursor) -> str:
        '''Input line; the caret is only drawn while the input is live.'''
        style = self.input_style(state)
        if state.is_editing:
            text = self.cursor_with_style(cursor, style)
        else:
            text = paint(style, cursor)
        return f"{paint(self.bar_color(state), S_BAR)}  {text}\n"

    def format_placeholder(self, state: ThemeState, cursor: StringCursor) -> str:
        '''
        Placeholder line, dimmed. Fully hidden once cancelled; drawn without
        the caret once submitted.
        '''
        style = self.placeholder_style(state)
        if state.is_editing:
            text = self.cursor_with_style(cursor, style)
        elif state.is_cancel:
            text = ""
        else:
            text = paint(style, cursor)
        return f"{paint(self.bar_color(state), S_BAR)}  {text}\n"

    def format_password(self, state: ThemeState, cursor: StringCursor, mask: str) -> str:
        masked = StringCursor()
        masked.content = [mask] * len(cursor)  # one mask per codepoint, however wide the mask is
        masked.position = cursor.position
        return self.format_input(state, masked)

    # --- selection lists ---

    def radio_item(self, state: ThemeState, selected: bool, label: str, hint: str) -> str:
        '''Radio item without the frame bar. Unselected items vanish once the prompt ends.'''
        if (state.is_cancel or state.is_submit) and not selected:
            return ""

        radio = self.radio_symbol(state, selected)
        style = self.input_style(state) if selected else self.placeholder_style(state)
        label = paint(style, label)

        if state.is_editing and hint and selected:
            hint = paint(self.placeholder_style(state), f"({hint})")
        else:
            hint = ""

        space1 = " " if radio else ""
        space2 = " " if label and hint else ""
        return f"{radio}{space1}{label}{space2}{hint}"

    def format_select_item(self, state: ThemeState, selected: bool, label: str, hint: str) -> str:
        if (state.is_cancel or state.is_submit) and not selected:
            return ""
        item = self.radio_item(state, selected, label, hint)
        return f"{paint(self.bar_color(state), S_BAR)}  {item}\n"

    def checkbox_item(self, state: ThemeState, selected: bool, active: bool, label: str, hint: str) -> str:
        '''`selected`: checked; `active`: under the cursor.'''
        if (state.is_cancel or state.is_submit) and not selected:
            return ""

        checkbox = self.checkbox_symbol(state, selected, active)
        label = paint(self.checkbox_style(state, selected, active), label)

        if state.is_editing and hint and active:
            hint = paint(self.placeholder_style(state), f"({hint})")
        else:
            hint = ""

        space1 = " " if checkbox else ""
        space2 = " " if label and hint else ""
        return f"{checkbox}{space1}{label}{space2}{hint}"

    def format_multiselect_item(self, state: ThemeState, selected: bool, active: bool, label: str, hint: str) -> str:
        if (state.is_cancel or state.is_submit) and not selected:
            return ""
        item = self.checkbox_item(state, selected, active, label, hint)
        return f"{paint(self.bar_color(state), S_BAR)}  {item}\n"

    def format_confirm(self, state: ThemeState, confirm: bool) -> str:
        yes = self.radio_item(state, confirm, "Yes", "")
        no = self.radio_item(state, not confirm, "No", "")
        divider = paint(self.placeholder_style(state), " / ") if state.is_active else ""
        return f"{paint(self.bar_color(state), S_BAR)}  {yes}{divider}{no}\n"

    # --- spinner ---

    def format_spinner_start(self, frame: str, message: str) -> str:
        return f"{paint(_fg('magenta'), frame)}  {message}"

    def format_spinner_stop(self, message: str) -> str:
        return f"{self.state_symbol(SUBMIT)}  {message}\n{paint(self.bar_color(SUBMIT), S_BAR)}"

    def format_spinner_error(self, message: str) -> str:
        error = ThemeState("error", message)
        return f"{self.state_symbol(error)}  {message}\n{paint(self.bar_color(SUBMIT), S_BAR)}"

    # --- notes & logs ---

    def format_note(self, prompt: str, message: str) -> str:
        '''A boxed, multi-line note:

        ◇  prompt ───────╮
        │                │
        │  message       │
        ├────────────────╯
        '''
        message = f"\n{message}\n"
        lines = message.split("\n")
        width = 2 + max(max(len(line) for line in lines), len(prompt))

        symbol = self.state_symbol(SUBMIT)
        bar_color = self.bar_color(SUBMIT)
        text_style = self.input_style(SUBMIT)
        bar = paint(bar_color, S_BAR)

        header = (f"{symbol}  {prompt} "
                  f"{paint(bar_color, str(S_BAR_H) * (width - len(prompt)))}"
                  f"{paint(bar_color, S_CORNER_TOP_RIGHT)}\n")
        body = "".join(
            f"{bar}  {paint(text_style, line)}{' ' * (width - len(line) + 1)}{bar}\n"
            for line in message.splitlines()
        )
        footer = (paint(bar_color, f"{S_CONNECT_LEFT}{str(S_BAR_H) * (width + 3)}{S_CORNER_BOTTOM_RIGHT}")
                  + f"\n{bar}\n")
        return header + body + footer

    def format_log(self, text: str, symbol: str) -> str:
        '''First line gets `symbol`, the rest and a trailing spacer line get the bar.'''
        bar = paint(self.bar_color(SUBMIT), S_BAR)
        lines = text.splitlines() + [""]
        parts = [f"{symbol}  {lines[0]}"]
        parts.extend(f"{bar}  {line}" for line in lines[1:])
        return "\n".join(parts) + "\n"


class ClackTheme(Theme):
    '''The default @clack/prompts theme: `Theme` as is.'''


#====================================
# process-wide theme
#====================================


class _ThemeSlot:
    def __init__(self, theme: Theme):
        self._theme = theme
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[Theme]:
        with self._lock:
            yield self._theme

    def get(self) -> Theme:
        with self._lock:
            return self._theme

    def put(self, theme: Theme):
        with self._lock:
            self._theme = theme


_slot = _ThemeSlot(ClackTheme())


def get_theme() -> Theme:
    return _slot.get()


def locked_theme():
    '''
    Holds the theme for a whole render, so a concurrent `set_theme` can't
    land between the header and the footer of one frame.
    '''
    return _slot.locked()


def set_theme(theme: Theme):
    if not isinstance(theme, Theme):
        raise TypeError(f"expected a Theme, got {type(theme).__name__}")
    _slot.put(theme)
    logger.info("theme set to %s", type(theme).__name__, extra={"event": "theme_set", "theme": type(theme).__name__})


def reset_theme():
    _slot.put(ClackTheme())
    logger.info("theme reset", extra={"event": "theme_reset", "theme": "ClackTheme"})


__all__ = [
    "Glyph", "Theme", "ClackTheme", "paint",
    "get_theme", "locked_theme", "set_theme", "reset_theme",
]
