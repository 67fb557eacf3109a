"""
Root Typer application for the doccomment CLI.

Usage:
    doccomment parse plugin.sp
    doccomment parse --json include/*.inc
    cat header.h | doccomment parse -
    doccomment config --json
"""

from __future__ import annotations

import json

import typer
from typer import Typer

from doccomment.cli.utils import console, print_error, print_record, read_source
from doccomment.core.errors import ConfigError, DocCommentError
from doccomment.core.logging import LogContext, configure_logging, get_logger
from doccomment.core.parser import parse
from doccomment.core.settings import LOG_LEVELS, get_settings

app = Typer(
    name="doccomment",
    help="doccomment: extract structured data from documentation comments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

logger = get_logger(__name__)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from doccomment import __version__

        typer.echo(f"doccomment {__version__}")
        raise typer.Exit()


def _load_settings():
    try:
        return get_settings()
    except ConfigError as e:
        print_error(e.message)
        raise typer.Exit(code=1) from e


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help=f"Log level: {', '.join(LOG_LEVELS)}."
    ),
    json_logs: bool | None = typer.Option(
        None, "--json-logs/--console-logs", help="Force JSON or console log output."
    ),
) -> None:
    """doccomment CLI: parse documentation comments into structured records."""
    settings = _load_settings()

    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        print_error(f"Unknown log level {log_level!r}")
        raise typer.Exit(code=1)

    configure_logging(
        level=level,
        json_format=json_logs if json_logs is not None else settings.json_logs,
    )


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("parse")
def parse_command(
    paths: list[str] = typer.Argument(..., help="Source files to parse, or - for stdin."),
    json_out: bool = typer.Option(False, "--json", help="Output records as JSON."),
    encoding: str | None = typer.Option(None, "--encoding", "-e", help="Source file encoding."),
) -> None:
    """Parse documentation comments from source files.

    All comments in one file are merged into a single record.
    """
    settings = _load_settings()
    encoding = encoding or settings.encoding
    as_json = json_out or settings.output_format == "json"

    records = {}
    failed = False

    for path in paths:
        with LogContext(source_path=path):
            try:
                text = read_source(path, encoding=encoding)
            except DocCommentError as e:
                logger.warning("source_unreadable", **e.to_dict())
                print_error(e.message)
                failed = True
                continue

            record = parse(text)
            logger.info("source_parsed", entries=len(record.entries))
            records[path] = record

    if as_json:
        if len(paths) == 1:
            payload = records[paths[0]].to_dict() if records else None
        else:
            payload = {path: record.to_dict() for path, record in records.items()}
        if payload is not None:
            console.print_json(json.dumps(payload, ensure_ascii=False))
    else:
        for path, record in records.items():
            print_record(record, title=path if len(paths) > 1 else "")

    if failed:
        raise typer.Exit(code=1)


@app.command("config")
def show_config(
    json_out: bool = typer.Option(False, "--json", help="Output settings as JSON."),
) -> None:
    """Show the active settings (DOCCOMMENT_* environment variables)."""
    settings = _load_settings()

    if json_out:
        console.print_json(settings.model_dump_json())
        return

    for key, value in sorted(settings.model_dump().items()):
        console.print(f"DOCCOMMENT_{key.upper()}={value}", highlight=False)
