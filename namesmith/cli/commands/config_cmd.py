"""Config command for viewing and managing namesmith configuration."""

import typer
from rich.markup import escape

from ..app import app, console
from ...config import (
    get_config,
    reset_config,
    parse_bool,
    CONFIG_FILE,
)
from ...rarity import rarity_to_bias


VALID_KEYS = {
    "sources.data_dir",
    "defaults.rarity",
    "defaults.count",
    "defaults.title_case",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. defaults.rarity, sources.data_dir)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify namesmith configuration.

    Examples:
        namesmith config show
        namesmith config set defaults.rarity 75
        namesmith config set defaults.title_case false
        namesmith config set sources.data_dir ~/name-data
        namesmith config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] namesmith config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {escape(action)}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]Namesmith Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Sources[/bold cyan]")
    data_dir = escape(config.sources.data_dir) or "[dim](bundled data)[/dim]"
    console.print(f"  data_dir   = {data_dir}")

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan]")
    rarity = config.defaults.rarity
    bias = rarity_to_bias(rarity)
    console.print(f"  rarity     = {rarity:g} [dim](bias {bias:g})[/dim]")
    console.print(f"  count      = {config.defaults.count}")
    console.print(f"  title_case = {str(config.defaults.title_case).lower()}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {escape(str(CONFIG_FILE))}")
    else:
        console.print(
            f"Config file: [dim]not created yet[/dim] ({escape(str(CONFIG_FILE))})"
        )
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {escape(key)}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    zone, field_name = key.split(".", 1)
    target = config.sources if zone == "sources" else config.defaults

    # Type coercion
    if field_name == "rarity":
        try:
            parsed = float(value)
            rarity_to_bias(parsed)
        except ValueError:
            console.print(
                f"[red]Invalid rarity value:[/red] {escape(value)} (expected 0-100)"
            )
            raise typer.Exit(1)
        setattr(target, field_name, parsed)
    elif field_name == "count":
        try:
            parsed_count = int(value)
        except ValueError:
            console.print(f"[red]Invalid integer value:[/red] {escape(value)}")
            raise typer.Exit(1)
        if parsed_count < 1:
            console.print(f"[red]Count must be at least 1:[/red] {parsed_count}")
            raise typer.Exit(1)
        setattr(target, field_name, parsed_count)
    elif field_name == "title_case":
        try:
            setattr(target, field_name, parse_bool(value))
        except ValueError:
            console.print(f"[red]Invalid boolean value:[/red] {escape(value)}")
            raise typer.Exit(1)
    else:
        setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {escape(key)} = {escape(value)}")
    console.print(f"  Saved to {escape(str(CONFIG_FILE))}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {escape(str(CONFIG_FILE))}")
    else:
        console.print("Config already at defaults (no config file exists)")
