"""Data models shared by the placeholder grammar engine and parsing tasks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from percentfmt.templates.cursor import CharCursor

FormatKind = Literal["none", "left", "left_trunc", "right", "right_trunc", "right_ltrunc"]

ItemT = TypeVar("ItemT")

ELLIPSIS = "…"


@dataclass(frozen=True)
class OutputFormat:
    """Alignment directive pending for the next key placeholder."""

    kind: FormatKind = "none"
    width: int = 0

    @property
    def truncates(self) -> bool:
        return self.kind in {"left_trunc", "right_trunc", "right_ltrunc"}

    @property
    def pads_left(self) -> bool:
        return self.kind in {"right", "right_trunc", "right_ltrunc"}


NO_FORMAT = OutputFormat()


@dataclass
class ParsingContext(Generic[ItemT]):
    """Mutable state threaded through one full template scan."""

    key_value: Mapping[str, str]
    cursor: CharCursor
    out: list[ItemT] = field(default_factory=list)
    format: OutputFormat = NO_FORMAT

    def reset_format(self) -> None:
        self.format = NO_FORMAT
