"""Typer CLI entrypoint for percentfmt."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from apps.cli.io import dump_json, read_template, write_json_atomic, write_text_atomic
from apps.cli.settings import configure_logging, log_level_name, max_template_chars
from percentfmt.formatter import extract_placeholder_keys, measure_lengths, replace_placeholders
from percentfmt.mapping.loader import load_key_values, parse_assignments
from percentfmt.render.models import MeasureReport
from percentfmt.render.summary import summarize_template
from percentfmt.utils.errors import TemplateTooLargeError

app = typer.Typer(help="Percent-placeholder template CLI", rich_markup_mode=None)
logger = logging.getLogger("percentfmt.cli")

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_MISSING_KEYS = 2
EXIT_TOO_LARGE = 3

TemplateArg = Annotated[str, typer.Argument(help="Template file path, or '-' for stdin.")]
ValuesOption = Annotated[
    Path | None,
    typer.Option("--values", dir_okay=False, help="JSON or YAML file with placeholder values."),
]
SetOption = Annotated[
    list[str] | None,
    typer.Option("--set", help="Inline KEY=VALUE pair; overrides --values. Repeatable."),
]
OutOption = Annotated[
    Path | None,
    typer.Option("--out", dir_okay=False, help="Write the result to this file instead of stdout."),
]


@app.callback()
def cli_callback(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL."),
    ] = None,
) -> None:
    """Render, measure and inspect %-placeholder templates."""

    configure_logging(log_level_name(log_level))


@app.command("render")
def render_command(
    template: TemplateArg,
    values: ValuesOption = None,
    assignments: SetOption = None,
    out: OutOption = None,
) -> None:
    """Replace placeholders and print or write the rendered text."""

    started = time.perf_counter()
    text, key_value = _load_inputs("render", template, values, assignments)
    rendered = replace_placeholders(key_value, text)

    if out is None:
        typer.echo(rendered, nl=False)
    else:
        write_text_atomic(out, rendered)

    _log_command("render", EXIT_OK, started, template_chars=len(text))


@app.command("measure")
def measure_command(
    template: TemplateArg,
    values: ValuesOption = None,
    assignments: SetOption = None,
    out: OutOption = None,
) -> None:
    """Print the rendered total length and per-placeholder widths as JSON."""

    started = time.perf_counter()
    text, key_value = _load_inputs("measure", template, values, assignments)
    report = MeasureReport.from_lengths(measure_lengths(key_value, text))

    _emit_json(report.model_dump(mode="json"), out)
    _log_command("measure", EXIT_OK, started, template_chars=len(text))


@app.command("keys")
def keys_command(
    template: TemplateArg,
    unique: Annotated[
        bool, typer.Option("--unique", help="Keep only the first occurrence of each key.")
    ] = False,
    out: OutOption = None,
) -> None:
    """Print the keys referenced by the template as a JSON list."""

    started = time.perf_counter()
    text = _read_template_or_exit("keys", template)
    keys = extract_placeholder_keys(text, unique=unique)

    _emit_json(keys, out)
    _log_command("keys", EXIT_OK, started, template_chars=len(text), key_count=len(keys))


@app.command("check")
def check_command(
    template: TemplateArg,
    values: ValuesOption = None,
    assignments: SetOption = None,
    out: OutOption = None,
) -> None:
    """Summarize the template; exit with code 2 when referenced keys are missing."""

    started = time.perf_counter()
    text, key_value = _load_inputs("check", template, values, assignments)
    summary = summarize_template(key_value, text)

    _emit_json(summary.model_dump(mode="json"), out)

    exit_code = EXIT_OK if summary.complete else EXIT_MISSING_KEYS
    _log_command(
        "check",
        exit_code,
        started,
        template_chars=len(text),
        missing_count=len(summary.missing_keys),
    )
    if exit_code != EXIT_OK:
        typer.echo(f"ERROR: missing keys: {', '.join(summary.missing_keys)}", err=True)
        raise typer.Exit(code=exit_code)


def _load_inputs(
    command: str, template: str, values: Path | None, assignments: list[str] | None
) -> tuple[str, dict[str, str]]:
    text = _read_template_or_exit(command, template)

    key_value: dict[str, str] = {}
    try:
        if values is not None:
            key_value.update(load_key_values(values))
        key_value.update(parse_assignments(assignments or []))
    except ValueError as exc:
        _fail(command, EXIT_INVALID_INPUT, f"ERROR: {exc}")

    return text, key_value


def _read_template_or_exit(command: str, template: str) -> str:
    try:
        return read_template(template, max_chars=max_template_chars())
    except TemplateTooLargeError as exc:
        _fail(command, EXIT_TOO_LARGE, f"ERROR: template too large: {exc}")
    except (OSError, UnicodeDecodeError) as exc:
        _fail(command, EXIT_INVALID_INPUT, f"ERROR: cannot read template: {exc}")


def _emit_json(payload: Any, out: Path | None) -> None:
    if out is None:
        typer.echo(dump_json(payload))
    else:
        write_json_atomic(out, payload)


def _fail(command: str, exit_code: int, message: str) -> NoReturn:
    logger.error(dump_json({"command": command, "exit_code": exit_code, "error": message}))
    typer.echo(message, err=True)
    raise typer.Exit(code=exit_code)


def _log_command(command: str, exit_code: int, started: float, **fields: int) -> None:
    payload: dict[str, Any] = {
        "command": command,
        "exit_code": exit_code,
        "duration_ms": int((time.perf_counter() - started) * 1000),
    }
    payload.update(fields)
    logger.info(dump_json(payload))


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
