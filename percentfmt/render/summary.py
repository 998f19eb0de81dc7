"""Summaries combining measurement and key extraction for one template."""

from __future__ import annotations

from collections.abc import Mapping

from percentfmt.formatter import extract_placeholder_keys, measure_lengths
from percentfmt.render.models import MeasureReport, TemplateSummary


def summarize_template(key_value: Mapping[str, str], text: str) -> TemplateSummary:
    """Measure *text* and list the keys it references and which are missing."""

    report = MeasureReport.from_lengths(measure_lengths(key_value, text))
    keys = extract_placeholder_keys(text, unique=True)
    return TemplateSummary(
        total_length=report.total,
        placeholder_widths=report.placeholders,
        keys=keys,
        missing_keys=[key for key in keys if key not in key_value],
    )
