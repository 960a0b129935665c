"""CLI commands for namesmith."""

from . import (
    generate,
    inspect,
    datasets,
    config_cmd,
)

__all__ = [
    "generate",
    "inspect",
    "datasets",
    "config_cmd",
]
