"""Parsing task that measures rendered lengths without building the text."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from percentfmt.tasks.layout import layout_width
from percentfmt.templates.cursor import CharCursor
from percentfmt.templates.models import ParsingContext

logger = logging.getLogger("percentfmt.tasks")


class MeasureLengthsTask:
    """Count code points of the rendered output.

    Index 0 of the result is the grand total; every resolved key placeholder
    appends its effective rendered width in encounter order.
    """

    name = "measure_lengths"

    def init(self, text: str, key_value: Mapping[str, str]) -> ParsingContext[int]:
        return ParsingContext(key_value=key_value, cursor=CharCursor(text), out=[0])

    def done(self, context: ParsingContext[int]) -> list[int]:
        return context.out

    def error(self, context: ParsingContext[int]) -> None:
        literal = context.cursor.slice_from_mark() or ""
        context.out[0] += len(literal)

    def process_char(self, context: ParsingContext[int], char: str) -> None:
        context.out[0] += 1

    def process_char_placeholder(self, context: ParsingContext[int], char: str) -> None:
        context.out[0] += 1

    def process_str_placeholder(self, context: ParsingContext[int], key: str) -> None:
        value = context.key_value.get(key)
        if value is None:
            logger.debug("unresolved placeholder key %r measured as literal text", key)
            self.error(context)
            return
        width = layout_width(value, context.format)
        context.out.append(width)
        context.out[0] += width
