"""Parsing task interface definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar

from percentfmt.templates.models import ParsingContext

ItemT = TypeVar("ItemT")
OutputT = TypeVar("OutputT", covariant=True)


class ParsingTask(Protocol[ItemT, OutputT]):
    """Protocol for the interpretations plugged into the placeholder scan.

    The grammar engine drives the cursor and reports four kinds of events:
    a literal character, an escaped character placeholder (``%n``, ``%%``),
    a key placeholder and a grammar error. Each task decides what those events
    contribute to its accumulator.
    """

    name: str

    def init(self, text: str, key_value: Mapping[str, str]) -> ParsingContext[ItemT]:
        """Create a fresh context for one scan of *text*."""

    def done(self, context: ParsingContext[ItemT]) -> OutputT:
        """Turn the accumulator into the task result."""

    def error(self, context: ParsingContext[ItemT]) -> None:
        """Recover from a malformed or unresolvable placeholder."""

    def process_char(self, context: ParsingContext[ItemT], char: str) -> None:
        """Handle one literal character."""

    def process_char_placeholder(self, context: ParsingContext[ItemT], char: str) -> None:
        """Handle the character produced by ``%n`` or ``%%``."""

    def process_str_placeholder(self, context: ParsingContext[ItemT], key: str) -> None:
        """Handle a well-formed ``%(key)`` placeholder."""
