"""Parsing task that lists the keys referenced by a template."""

from __future__ import annotations

from collections.abc import Mapping

from percentfmt.templates.cursor import CharCursor
from percentfmt.templates.models import ParsingContext


class ExtractPlaceholderKeysTask:
    """Collect keys of well-formed ``%(key)`` placeholders in encounter order.

    Keys are collected whether or not the mapping can resolve them, and
    duplicates are preserved. Malformed placeholders contribute nothing.
    """

    name = "extract_placeholder_keys"

    def init(self, text: str, key_value: Mapping[str, str]) -> ParsingContext[str]:
        return ParsingContext(key_value=key_value, cursor=CharCursor(text))

    def done(self, context: ParsingContext[str]) -> list[str]:
        return context.out

    def error(self, context: ParsingContext[str]) -> None:
        return None

    def process_char(self, context: ParsingContext[str], char: str) -> None:
        return None

    def process_char_placeholder(self, context: ParsingContext[str], char: str) -> None:
        return None

    def process_str_placeholder(self, context: ParsingContext[str], key: str) -> None:
        context.out.append(key)
