"""Bundled name tables and keyword-based dataset resolution."""

from .registry import (
    BUNDLED_DATA_DIR,
    DatasetInfo,
    available_datasets,
    load_dataset_file,
    normalize_gender,
    normalize_group,
    read_lines,
    resolve_given_path,
    resolve_surname_path,
)

__all__ = [
    "BUNDLED_DATA_DIR",
    "DatasetInfo",
    "available_datasets",
    "load_dataset_file",
    "normalize_gender",
    "normalize_group",
    "read_lines",
    "resolve_given_path",
    "resolve_surname_path",
]
