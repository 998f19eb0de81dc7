"""Shared alignment and truncation arithmetic for key placeholder values.

All widths are counted in code points, so ``"äöü"`` is three columns wide.
"""

from __future__ import annotations

from percentfmt.templates.models import ELLIPSIS, OutputFormat


def layout_value(value: str, output_format: OutputFormat) -> str:
    """Render *value* according to the pending output format."""

    width = output_format.width
    length = len(value)

    if output_format.kind == "none":
        return value

    if output_format.truncates and length > width:
        if output_format.kind == "right_ltrunc":
            return ELLIPSIS + value[length - (width - 1) :]
        return value[: width - 1] + ELLIPSIS

    if length >= width:
        return value

    padding = " " * (width - length)
    if output_format.pads_left:
        return padding + value
    return value + padding


def layout_width(value: str, output_format: OutputFormat) -> int:
    """Return the number of code points :func:`layout_value` would produce."""

    length = len(value)
    if output_format.kind == "none":
        return length
    if output_format.truncates:
        return output_format.width
    return max(length, output_format.width)
