"""Report models for template measurement and key checks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MeasureReport(BaseModel):
    """Rendered length of a template split into total and per-placeholder widths."""

    model_config = ConfigDict(extra="forbid")

    total: int = Field(ge=0)
    placeholders: list[int] = Field(default_factory=list)

    @classmethod
    def from_lengths(cls, lengths: list[int]) -> MeasureReport:
        total, *placeholders = lengths
        return cls(total=total, placeholders=placeholders)


class TemplateSummary(BaseModel):
    """Aggregate view of one template against one key/value mapping."""

    model_config = ConfigDict(extra="forbid")

    total_length: int = Field(ge=0)
    placeholder_widths: list[int] = Field(default_factory=list)
    keys: list[str] = Field(default_factory=list)
    missing_keys: list[str] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing_keys
