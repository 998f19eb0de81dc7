"""Public entry points for percent-placeholder templates."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from percentfmt.tasks.extract_placeholder_keys import ExtractPlaceholderKeysTask
from percentfmt.tasks.measure_lengths import MeasureLengthsTask
from percentfmt.tasks.replace_placeholders import ReplacePlaceholdersTask
from percentfmt.templates.engine import parse_template

_EMPTY_MAPPING: Mapping[str, str] = MappingProxyType({})


def replace_placeholders(key_value: Mapping[str, str], text: str) -> str:
    """Return *text* with every resolvable placeholder substituted.

    Malformed placeholders and keys missing from *key_value* are copied to the
    output verbatim.
    """

    return parse_template(ReplacePlaceholdersTask(), key_value, text)


def measure_lengths(key_value: Mapping[str, str], text: str) -> list[int]:
    """Measure the output of :func:`replace_placeholders` in code points.

    Returns ``[total, width_1, width_2, ...]`` where each ``width_i`` is the
    rendered width of one resolved key placeholder, in encounter order.
    """

    return parse_template(MeasureLengthsTask(), key_value, text)


def extract_placeholder_keys(text: str, *, unique: bool = False) -> list[str]:
    """Return keys referenced by well-formed ``%(key)`` placeholders.

    Duplicates are kept in encounter order unless *unique* is set, in which
    case only the first occurrence of each key is returned.
    """

    keys = parse_template(ExtractPlaceholderKeysTask(), _EMPTY_MAPPING, text)
    if unique:
        return list(dict.fromkeys(keys))
    return keys


class PlaceholderFormatter:
    """Stateless object form of the module-level functions."""

    def replace_placeholders(self, key_value: Mapping[str, str], text: str) -> str:
        return replace_placeholders(key_value, text)

    def measure_lengths(self, key_value: Mapping[str, str], text: str) -> list[int]:
        return measure_lengths(key_value, text)

    def extract_placeholder_keys(self, text: str, *, unique: bool = False) -> list[str]:
        return extract_placeholder_keys(text, unique=unique)
