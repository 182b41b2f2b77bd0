"""Single-line text buffer with an edit position, indexed by codepoint."""

from __future__ import annotations

from typing import List, Tuple


def _prev_word(chars: List[str], i: int) -> int:
    while i > 0 and not chars[i-1].isalnum(): i -= 1
    while i > 0 and chars[i-1].isalnum(): i -= 1
    return i


def _next_word(chars: List[str], i: int) -> int:
    while i < len(chars) and chars[i].isalnum(): i += 1
    while i < len(chars) and not chars[i].isalnum(): i += 1
    return i


class StringCursor:
    '''
    Text being typed into a prompt. `position` counts codepoints, not bytes,
    and always stays within 0..len(content).
    '''

    def __init__(self, text: str = ""):
        self.content: List[str] = list(text)
        self.position = len(self.content)

    def __str__(self): return self.to_text()
    def __len__(self): return len(self.content)

    def __repr__(self):
        return f"StringCursor({self.to_text()!r}, position={self.position})"

    def to_text(self) -> str:
        return "".join(self.content)

    def is_empty(self) -> bool:
        return not self.content

    def split(self) -> Tuple[str, str, str]:
        '''Returns (left, caret, right); caret is "" when the position is at the end.'''
        left = "".join(self.content[:self.position])
        caret = self.content[self.position] if self.position < len(self.content) else ""
        right = "".join(self.content[self.position + 1:])
        return left, caret, right

    def insert(self, char: str):
        self.content.insert(self.position, char)
        self.position += 1

    def extend(self, text: str):
        for char in text:
            self.insert(char)

    def delete_left(self):
        if self.position > 0:
            del self.content[self.position - 1]
            self.position -= 1

    def delete_right(self):
        if self.position < len(self.content):
            del self.content[self.position]

    def delete_word_left(self):
        start = _prev_word(self.content, self.position)
        del self.content[start:self.position]
        self.position = start

    def move_left(self):
        if self.position > 0: self.position -= 1

    def move_right(self):
        if self.position < len(self.content): self.position += 1

    def move_home(self): self.position = 0
    def move_end(self): self.position = len(self.content)

    def move_left_by_word(self):
        self.position = _prev_word(self.content, self.position)

    def move_right_by_word(self):
        self.position = _next_word(self.content, self.position)

    def clear(self):
        self.content.clear()
        self.position = 0
