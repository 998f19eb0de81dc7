"""Peekable, mark-able character cursor over a buffered template string."""

from __future__ import annotations


class CharCursor:
    """Walk a template one code point at a time.

    The whole input is buffered up front and the cursor state is kept as plain
    indices: ``current`` is the next unread position, ``peeked`` caches a
    lookahead that has not been consumed yet and ``marked`` records where the
    current placeholder attempt started.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._current = 0
        self._peeked: int | None = None
        self._marked: int | None = None

    @property
    def position(self) -> int:
        return self._current

    @property
    def marked_position(self) -> int | None:
        return self._marked

    def peek(self) -> str | None:
        """Return the next character without consuming it."""

        if self._peeked is None:
            self._peeked = self._current
        if self._peeked < len(self._text):
            return self._text[self._peeked]
        return None

    def next(self) -> str | None:
        """Consume and return the next character, honouring a pending peek."""

        index = self._current
        if self._peeked is not None:
            index = self._peeked
            self._peeked = None
        if index >= len(self._text):
            self._current = len(self._text)
            return None
        self._current = index + 1
        return self._text[index]

    def mark(self) -> None:
        self._marked = self._current

    def slice_from_mark(self) -> str | None:
        """Return text from the mark (inclusive) to the cursor (exclusive)."""

        if self._marked is None:
            return None
        return self._text[self._marked : self._current]

    def __iter__(self) -> CharCursor:
        return self

    def __next__(self) -> str:
        char = self.next()
        if char is None:
            raise StopIteration
        return char
