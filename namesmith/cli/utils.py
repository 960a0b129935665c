"""Shared output helpers for the namesmith commands.

Every command reports through an Output instance. On a terminal the
messages print immediately through rich. Under --json they are gathered
into one document (names, biases, dataset paths, warnings, errors) that
is written to stdout when the command calls finish().

Example:
    out = Output(console=console, json_mode=get_json_mode())
    out.set_data("names", names)
    raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, PrivateAttr, ConfigDict
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class ExitCode:
    """Exit codes shared by the namesmith commands.

        0 = Success
        1 = Invalid arguments or options
        3 = Dataset file not found
        4 = Dataset parse or sampling error
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    FILE_NOT_FOUND = 3
    SAMPLING_ERROR = 4


class Output(BaseModel):
    """Collects a command's messages and result for the terminal or --json.

    The exit code starts at SUCCESS and is overwritten by error(). Keyword
    data passed to success() and set_data() only appears in JSON output.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {
            "status": "success",
            "warnings": [],
            "errors": [],
        }

    @property
    def exit_code(self) -> int:
        return self._exit_code

    def success(self, message: str, **data: Any) -> None:
        """Report a completed step; extra keywords become JSON fields."""
        if self.json_mode:
            self._data.update(data)
        else:
            self.console.print(f"[green]✓[/green] {message}")

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        """Report a recoverable problem such as an ignored token."""
        if self.json_mode:
            warning_obj: dict[str, Any] = {"message": message}
            if suggestion:
                warning_obj["suggestion"] = suggestion
            self._data["warnings"].append(warning_obj)
        else:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
            if suggestion:
                self.console.print(f"  [dim]→ {escape(suggestion)}[/dim]")

    def error(
        self,
        message: str,
        *,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Report a failure and record the exit code finish() will return."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            self.console.print(f"[red]✗[/red] {escape(message)}")
            if suggestion:
                self.console.print(f"  [dim]→ {escape(suggestion)}[/dim]")

    def text(self, message: str) -> None:
        """Print a line on the terminal; ignored under --json."""
        if not self.json_mode:
            self.console.print(message)

    def blank(self) -> None:
        if not self.json_mode:
            self.console.print()

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
    ) -> None:
        """Render rows as a rich table, or as a list of column-keyed dicts.

        The first column is left-aligned and the rest right-aligned. Under
        --json the rows are stored under data_key, or the lower-cased title.
        """
        key = data_key or title.lower().replace(" ", "_")

        if self.json_mode:
            self._data[key] = [dict(zip(columns, row)) for row in rows]
        else:
            table = Table(title=title, show_header=True, header_style="bold")
            for i, col in enumerate(columns):
                justify = "right" if i > 0 else "left"
                table.add_column(col, justify=justify)
            for row in rows:
                table.add_row(*(escape(cell) for cell in row))
            self.console.print(table)

    def set_data(self, key: str, value: Any) -> None:
        """Attach a field to the JSON document."""
        self._data[key] = value

    def finish(self) -> int:
        """Return the exit code, printing the JSON document first under --json."""
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str))

        return self._exit_code


def title_case(name: str) -> str:
    """Lower-case then title-case a name ("MARY SMITH" -> "Mary Smith")."""
    return name.lower().title()


def format_probability(p: float) -> str:
    """Format a probability as a percentage with enough precision for rare names."""
    pct = p * 100
    if pct == 0:
        return "0%"
    if pct < 0.01:
        return f"{pct:.2e}%"
    return f"{pct:.2f}%"
