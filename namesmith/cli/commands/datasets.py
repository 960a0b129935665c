"""Datasets command: list the given-name and surname tables."""

import typer

from ...config import get_config
from ...core import NameDataError, parse_lines
from ...sources import available_datasets, read_lines
from ..app import app, console, get_json_mode
from ..utils import Output


@app.command("datasets")
def datasets_command():
    """
    List the dataset tables and their keywords.

    Reads from the configured data directory, or the bundled data if none
    is set (see `namesmith config set sources.data_dir`).
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    rows: list[list[str]] = []
    for info in available_datasets(config.data_dir):
        if not info.exists:
            entries = "missing"
        else:
            try:
                entries = str(len(parse_lines(read_lines(info.path))))
            except NameDataError as e:
                entries = "invalid"
                out.warning(f"{info.path}: {e}")
        rows.append([info.kind, info.key, entries, str(info.path)])

    out.table(
        "Datasets",
        ["Kind", "Keyword", "Entries", "Path"],
        rows,
        data_key="datasets",
    )
    raise typer.Exit(out.finish())
