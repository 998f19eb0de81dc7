"""CLI I/O helpers for template input and atomic output writing."""

from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Any

from percentfmt.utils.errors import TemplateTooLargeError

STDIN_MARKER = "-"


def read_template(source: str, *, max_chars: int) -> str:
    """Read a template from a file path or from stdin when *source* is ``-``."""

    if source == STDIN_MARKER:
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    if len(text) > max_chars:
        raise TemplateTooLargeError(
            f"Template has {len(text)} characters, limit is {max_chars}",
            size=len(text),
            limit=max_chars,
        )
    return text


def write_text_atomic(path: Path, text: str) -> None:
    """Write rendered text atomically using a temporary file + replace."""

    path.parent.mkdir(parents=True, exist_ok=True)

    fd, raw_tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f"{path.name}.",
        suffix=".tmp",
    )
    os.close(fd)
    tmp_path = Path(raw_tmp_path)

    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(path)
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
        raise


def write_json_atomic(path: Path, payload: Any) -> None:
    """Write a JSON report atomically."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        prefix=f"{path.name}.",
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        json.dump(payload, tmp, ensure_ascii=False, sort_keys=True, separators=(",", ":"))

    tmp_path.replace(path)


def dump_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
