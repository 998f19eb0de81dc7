"""Recursive-descent engine for ``%``-introduced template placeholders.

Grammar:

- ``%n``              newline
- ``%%``              literal percent sign
- ``%(key)``          value of ``key``
- ``%<(width)``       left-align the next key placeholder
- ``%<(width,trunc)`` left-align, truncate on the right with an ellipsis
- ``%>(width)``       right-align the next key placeholder
- ``%>(width,trunc)`` right-align, truncate on the right with an ellipsis
- ``%>(width,ltrunc)`` right-align, truncate on the left with an ellipsis

Spaces inside the directive parentheses and around the comma are ignored.
Nothing here raises for malformed input: every grammar error is handed to the
active task's ``error`` hook, which sees the text consumed since the ``%``
that started the failed placeholder.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Mapping
from typing import TypeVar

from percentfmt.tasks.base import ParsingTask
from percentfmt.templates.cursor import CharCursor
from percentfmt.templates.models import FormatKind, OutputFormat, ParsingContext

logger = logging.getLogger("percentfmt.engine")

ItemT = TypeVar("ItemT")
OutputT = TypeVar("OutputT")

KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_+*/äöüß?")
MAX_WIDTH = 2**32 - 1

_LEFT_KEYWORDS: dict[str, FormatKind] = {"trunc": "left_trunc"}
_RIGHT_KEYWORDS: dict[str, FormatKind] = {"trunc": "right_trunc", "ltrunc": "right_ltrunc"}
_DIGITS = frozenset("0123456789")
_NONZERO_DIGITS = frozenset("123456789")


def parse_template(
    task: ParsingTask[ItemT, OutputT], key_value: Mapping[str, str], text: str
) -> OutputT:
    """Scan *text* once, delegating every event to *task*."""

    logger.debug("scan start task=%s chars=%d", task.name, len(text))
    context = task.init(text, key_value)
    cursor = context.cursor

    while (char := cursor.peek()) is not None:
        if char == "%":
            cursor.mark()
            cursor.next()
            _process_placeholder(task, context)
        else:
            cursor.next()
            task.process_char(context, char)

    return task.done(context)


def _process_placeholder(task: ParsingTask[ItemT, OutputT], context: ParsingContext[ItemT]) -> None:
    char = context.cursor.next()
    if char == "(":
        _process_key_placeholder(task, context)
    elif char == "<":
        _process_align_directive(task, context, "left", _LEFT_KEYWORDS)
    elif char == ">":
        _process_align_directive(task, context, "right", _RIGHT_KEYWORDS)
    elif char == "n":
        task.process_char_placeholder(context, "\n")
    elif char == "%":
        task.process_char_placeholder(context, "%")
    else:
        _recover(task, context)


def _process_key_placeholder(
    task: ParsingTask[ItemT, OutputT], context: ParsingContext[ItemT]
) -> None:
    cursor = context.cursor
    key = _gather(cursor, KEY_CHARS)
    if key is None or not _consume(cursor, ")"):
        _recover(task, context)
    else:
        task.process_str_placeholder(context, key)
    context.reset_format()


def _process_align_directive(
    task: ParsingTask[ItemT, OutputT],
    context: ParsingContext[ItemT],
    plain_kind: FormatKind,
    keywords: Mapping[str, FormatKind],
) -> None:
    cursor = context.cursor
    if not _consume(cursor, "("):
        _recover(task, context)
        return

    _skip_spaces(cursor)
    width = _parse_width(cursor)
    if width is None:
        _recover(task, context)
        return
    _skip_spaces(cursor)

    if not _consume(cursor, ","):
        if not _consume(cursor, ")"):
            _recover(task, context)
            return
        context.format = OutputFormat(plain_kind, width)
        return

    _skip_spaces(cursor)
    keyword = _gather(cursor, KEY_CHARS)
    if keyword is None:
        _recover(task, context)
        return
    _skip_spaces(cursor)
    if not _consume(cursor, ")"):
        _recover(task, context)
        return

    kind = keywords.get(keyword)
    if kind is None:
        _recover(task, context)
        return
    context.format = OutputFormat(kind, width)


def _parse_width(cursor: CharCursor) -> int | None:
    """Parse a positive decimal without leading zero or sign."""

    first = _consume_any(cursor, _NONZERO_DIGITS)
    if first is None:
        return None
    digits = [first]
    while (digit := _consume_any(cursor, _DIGITS)) is not None:
        digits.append(digit)

    width = int("".join(digits))
    if width > MAX_WIDTH:
        return None
    return width


def _gather(cursor: CharCursor, allowed: frozenset[str]) -> str | None:
    """Consume a maximal run of *allowed* characters.

    Returns ``None`` when the input ends before a character outside the set is
    seen; the terminating character itself is left unconsumed.
    """

    chars: list[str] = []
    while (char := cursor.peek()) is not None:
        if char not in allowed:
            return "".join(chars)
        chars.append(char)
        cursor.next()
    return None


def _consume(cursor: CharCursor, expected: str) -> bool:
    if cursor.peek() == expected:
        cursor.next()
        return True
    return False


def _consume_any(cursor: CharCursor, allowed: frozenset[str]) -> str | None:
    char = cursor.peek()
    if char is not None and char in allowed:
        cursor.next()
        return char
    return None


def _skip_spaces(cursor: CharCursor) -> None:
    while cursor.peek() == " ":
        cursor.next()


def _recover(task: ParsingTask[ItemT, OutputT], context: ParsingContext[ItemT]) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "malformed placeholder at %s kept as literal %r",
            context.cursor.marked_position,
            context.cursor.slice_from_mark(),
        )
    task.error(context)
