"""Key/value mapping loading from JSON or YAML files and inline assignments."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import RootModel, ValidationError

from percentfmt.utils.errors import MappingFileError


class KeyValueMapping(RootModel[dict[str, str]]):
    """Validated placeholder values keyed by placeholder name."""


def load_key_values(path: Path) -> dict[str, str]:
    """Load and validate a key/value mapping file.

    ``.json`` files are parsed as JSON, anything else as YAML. Scalar values
    are converted to strings and lists are joined with ``", "``.
    """

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MappingFileError(f"Mapping file not found: {path}", path=path) from exc

    if path.suffix.lower() == ".json":
        try:
            raw = json.loads(content)
        except json.JSONDecodeError as exc:
            raise MappingFileError(f"Invalid JSON in mapping file: {path}", path=path) from exc
    else:
        try:
            raw = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise MappingFileError(f"Invalid YAML in mapping file: {path}", path=path) from exc

    if not isinstance(raw, dict):
        raise MappingFileError(f"Mapping file must contain a mapping: {path}", path=path)

    try:
        return KeyValueMapping.model_validate(_normalize_values(raw)).root
    except ValidationError as exc:
        raise MappingFileError(f"Invalid mapping schema: {path}", path=path) from exc


def parse_assignments(assignments: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` pairs; the value may itself contain ``=``."""

    values: dict[str, str] = {}
    for assignment in assignments:
        key, separator, value = assignment.partition("=")
        if not separator or not key:
            raise ValueError(f"Invalid assignment (expected KEY=VALUE): {assignment!r}")
        values[key] = value
    return values


def _normalize_values(raw: dict[object, object]) -> dict[object, object]:
    normalized: dict[object, object] = {}
    for key, value in raw.items():
        if isinstance(key, (int, float)) and not isinstance(key, bool):
            key = str(key)
        if isinstance(value, list):
            normalized[key] = ", ".join(str(item) for item in value)
        elif isinstance(value, (bool, int, float)):
            normalized[key] = str(value)
        else:
            normalized[key] = value
    return normalized
