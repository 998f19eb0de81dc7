"""Parsing task that substitutes key placeholders with mapping values."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from percentfmt.tasks.layout import layout_value
from percentfmt.templates.cursor import CharCursor
from percentfmt.templates.models import ParsingContext

logger = logging.getLogger("percentfmt.tasks")


class ReplacePlaceholdersTask:
    """Build the rendered text; broken placeholders are copied through verbatim."""

    name = "replace_placeholders"

    def init(self, text: str, key_value: Mapping[str, str]) -> ParsingContext[str]:
        return ParsingContext(key_value=key_value, cursor=CharCursor(text))

    def done(self, context: ParsingContext[str]) -> str:
        return "".join(context.out)

    def error(self, context: ParsingContext[str]) -> None:
        literal = context.cursor.slice_from_mark()
        if literal:
            context.out.append(literal)

    def process_char(self, context: ParsingContext[str], char: str) -> None:
        context.out.append(char)

    def process_char_placeholder(self, context: ParsingContext[str], char: str) -> None:
        context.out.append(char)

    def process_str_placeholder(self, context: ParsingContext[str], key: str) -> None:
        value = context.key_value.get(key)
        if value is None:
            logger.debug("unresolved placeholder key %r kept as literal text", key)
            self.error(context)
            return
        context.out.append(layout_value(value, context.format))
