"""Inspect command: show a dataset's distribution at a given bias."""

from pathlib import Path

import typer
from rich.markup import escape

from ...core import DatasetNotFound, NameDataError
from ...rarity import bias_to_rarity, rarity_to_bias
from ...sources import load_dataset_file
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output, format_probability


@app.command("inspect")
def inspect_command(
    path: Path = typer.Argument(..., help="Dataset file (name,count per line)"),
    bias: float | None = typer.Option(
        None, "--bias", "-b", help="Bias exponent (default 1.0)"
    ),
    rarity: float | None = typer.Option(
        None, "--rarity", "-r", help="Rarity on the 0-100 scale"
    ),
    top: int = typer.Option(10, "--top", "-t", min=1, help="Entries to show"),
):
    """
    Show the most probable entries of a dataset.

    Examples:
        namesmith inspect names.csv
        namesmith inspect names.csv --bias 0
        namesmith inspect names.csv -r 100 --top 20
    """
    out = Output(console=console, json_mode=get_json_mode())

    if bias is not None and rarity is not None:
        out.error("Use either --bias or --rarity, not both")
        raise typer.Exit(out.finish())

    if rarity is not None:
        try:
            bias = rarity_to_bias(rarity)
        except ValueError as e:
            out.error(str(e))
            raise typer.Exit(out.finish())
    elif bias is None:
        bias = 1.0

    try:
        dataset = load_dataset_file(path, bias)
    except DatasetNotFound as e:
        out.error(str(e), exit_code=ExitCode.FILE_NOT_FOUND)
        raise typer.Exit(out.finish())
    except NameDataError as e:
        out.error(str(e), exit_code=ExitCode.SAMPLING_ERROR)
        raise typer.Exit(out.finish())
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    summary = (
        f"Loaded [bold]{escape(str(path))}[/bold]: "
        f"{len(dataset)} entries, bias {bias:g}"
    )
    if -1.0 <= bias <= 2.0:
        summary += f" (rarity {bias_to_rarity(bias):g})"
    out.success(summary, path=str(path), entries=len(dataset), bias=bias)

    if len(dataset) == 0:
        out.warning("Dataset has no entries")
        raise typer.Exit(out.finish())

    rows = [
        [str(i), entry.name, str(entry.count), format_probability(entry.probability)]
        for i, entry in enumerate(dataset.most_common(top), start=1)
    ]
    out.blank()
    out.table(
        f"Top {len(rows)} of {len(dataset)}",
        ["#", "Name", "Count", "Probability"],
        rows,
        data_key="entries",
    )
    raise typer.Exit(out.finish())
