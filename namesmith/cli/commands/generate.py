"""Generate command: sample full names from the configured datasets."""

import logging
from pathlib import Path

import typer
from rich.markup import escape

from ...config import get_config
from ...core import DatasetNotFound, NameDataError, NameSampler
from ...rarity import rarity_to_bias
from ...sources import load_dataset_file, resolve_given_path, resolve_surname_path
from ..app import app, console, get_json_mode
from ..tokens import resolve_tokens
from ..utils import ExitCode, Output, title_case

logger = logging.getLogger(__name__)


@app.command(
    "generate",
    context_settings={"ignore_unknown_options": True},
)
def generate_command(
    tokens: list[str] | None = typer.Argument(
        None,
        help="Bias values and keywords in any order: female/male/neutral, "
        "american/asian/black/hispanic/white",
        show_default=False,
    ),
    count: int | None = typer.Option(
        None, "--count", "-n", min=1, help="Number of names (default from config)"
    ),
    rarity: float | None = typer.Option(
        None,
        "--rarity",
        "-r",
        help="0 = common names, 50 = observed frequency, 100 = rare names",
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducibility"
    ),
    given_file: Path | None = typer.Option(
        None, "--given-file", help="Given-name table to use instead of the registry"
    ),
    surname_file: Path | None = typer.Option(
        None, "--surname-file", help="Surname table to use instead of the registry"
    ),
    title: bool | None = typer.Option(
        None,
        "--title-case/--no-title-case",
        help="Title-case output names (default from config)",
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write names to a file, one per line"
    ),
):
    """
    Generate random full names.

    Numeric tokens are bias exponents: the first applies to given names,
    the second to surnames, and a single value applies to both. Higher
    bias favors common names; negative bias favors rare ones. Use --rarity
    instead for the 0-100 scale. Put "--" before negative values if they
    are mistaken for options.

    EXIT CODES:
        0 = Success
        1 = Invalid arguments
        3 = Dataset file not found
        4 = Dataset parse or sampling error

    Examples:
        namesmith generate
        namesmith generate female hispanic -n 5
        namesmith generate 1.5 0.5 --seed 42
        namesmith generate male -r 90
        namesmith generate -- -1 asian
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    selection = resolve_tokens(tokens or [])
    for text in selection.unknown:
        out.warning(
            f"Ignoring unrecognized argument: {text}",
            suggestion="Expected a number or a gender/group keyword",
        )
    if len(selection.biases) > 2:
        out.warning(
            f"Ignoring {len(selection.biases) - 2} extra bias value(s); "
            "only the first two are used"
        )

    if selection.biases and rarity is not None:
        out.error("Use either bias values or --rarity, not both")
        raise typer.Exit(out.finish())

    if selection.biases:
        given_bias = selection.given_bias
        surname_bias = selection.surname_bias
        out.set_data("rarity", None)
    else:
        effective_rarity = rarity if rarity is not None else config.defaults.rarity
        try:
            given_bias = surname_bias = rarity_to_bias(effective_rarity)
        except ValueError as e:
            out.error(str(e))
            raise typer.Exit(out.finish())
        out.set_data("rarity", effective_rarity)

    count = count if count is not None else config.defaults.count
    use_title_case = title if title is not None else config.defaults.title_case

    given_path = given_file or resolve_given_path(selection.gender, config.data_dir)
    surname_path = surname_file or resolve_surname_path(
        selection.group, config.data_dir
    )
    logger.info("Given names: %s (bias=%s)", given_path, given_bias)
    logger.info("Surnames: %s (bias=%s)", surname_path, surname_bias)

    try:
        given = load_dataset_file(given_path, given_bias)
        surname = load_dataset_file(surname_path, surname_bias)
        sampler = NameSampler.seeded(given, surname, seed)
        names = sampler.next_names(count)
    except DatasetNotFound as e:
        out.error(str(e), exit_code=ExitCode.FILE_NOT_FOUND)
        raise typer.Exit(out.finish())
    except NameDataError as e:
        out.error(str(e), exit_code=ExitCode.SAMPLING_ERROR)
        raise typer.Exit(out.finish())
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    if use_title_case:
        names = [title_case(name) for name in names]

    out.set_data("given_bias", given_bias)
    out.set_data("surname_bias", surname_bias)
    out.set_data("given_dataset", str(given_path))
    out.set_data("surname_dataset", str(surname_path))
    out.set_data("names", names)

    if output is not None:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(
                "".join(f"{name}\n" for name in names), encoding="utf-8"
            )
        except OSError as e:
            out.error(
                f"Could not write {output}: {e.strerror or e}",
                exit_code=ExitCode.VALIDATION_ERROR,
            )
            raise typer.Exit(out.finish())
        out.success(
            f"Wrote {len(names)} name(s) to {escape(str(output))}",
            output=str(output),
        )
    elif len(names) == 1:
        out.text(escape(names[0]))
    else:
        width = len(str(len(names)))
        for i, name in enumerate(names, start=1):
            out.text(f"{i:>{width}}. {escape(name)}")

    raise typer.Exit(out.finish())
