"""Command-line interface for wunderlist-backup."""

import json
import os
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from wunderlist_backup.api import WunderlistApi
from wunderlist_backup.config import API_BASE_URL, ConfigurationError, Credentials
from wunderlist_backup.exporter import run_export
from wunderlist_backup.logging_config import configure_logging

app = typer.Typer(help="Export a whole Wunderlist account as one JSON document.")


@app.command()
def main(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the backup to FILE instead of stdout"),
    ] = None,
    indent: Annotated[
        int | None,
        typer.Option("--indent", help="Pretty-print JSON with this indent"),
    ] = None,
    include_extras: bool = typer.Option(
        False,
        "--include-extras",
        "-x",
        help="Also fetch memberships, task comments and webhooks",
    ),
    base_url: str = typer.Option(API_BASE_URL, "--base-url", help="API base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Back up lists, tasks, subtasks, notes, reminders, positions and folders.

    Credentials come from WUNDERLIST_ACCESS_TOKEN and WUNDERLIST_CLIENT_ID.
    """
    configure_logging(verbose=verbose)

    try:
        credentials = Credentials.from_env(os.environ).validate()
    except ConfigurationError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    api = WunderlistApi(credentials, base_url=base_url)
    document = run_export(api, include_extras=include_extras)

    # Written once, after the whole walk succeeded.
    text = json.dumps(document, indent=indent)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Backup written to {}", output)
