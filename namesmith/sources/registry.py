"""Dataset file registry and loading.

Given-name tables are selected by gender, surname tables by group. Both
default to the combined "all" table when the keyword is missing or unknown.
Files live under the bundled data directory unless a data_dir is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..core.dataset import WeightedDataset, load_dataset
from ..core.errors import DatasetNotFound, ParseError

logger = logging.getLogger(__name__)

BUNDLED_DATA_DIR = Path(__file__).parent / "data"

GIVEN_NAMES_DIR = "given_names"
SURNAMES_DIR = "surnames"

GIVEN_NAME_FILES: dict[str, str] = {
    "all": "all.txt",
    "female": "female.txt",
    "male": "male.txt",
    "neutral": "neutral.txt",
}

SURNAME_FILES: dict[str, str] = {
    "all": "all.csv",
    "american": "american.csv",  # Native North American
    "asian": "asian.csv",
    "black": "black.csv",
    "hispanic": "hispanic.csv",
    "white": "white.csv",
}

# Keyword aliases -> canonical keys above
_GENDER_ALIASES: dict[str, str] = {
    "female": "female",
    "f": "female",
    "male": "male",
    "m": "male",
    "neutral": "neutral",
    "n": "neutral",
}

_GROUP_ALIASES: dict[str, str] = {
    "american": "american",
    "asian": "asian",
    "black": "black",
    "hispanic": "hispanic",
    "white": "white",
}


@dataclass(frozen=True)
class DatasetInfo:
    """A dataset file known to the registry."""

    kind: str  # "given" or "surname"
    key: str
    path: Path

    @property
    def exists(self) -> bool:
        return self.path.is_file()


def normalize_gender(gender: str | None) -> str | None:
    """Map a gender keyword to its canonical key, or None if unrecognized."""
    if not gender:
        return None
    return _GENDER_ALIASES.get(gender.strip().lower())


def normalize_group(group: str | None) -> str | None:
    """Map a surname group keyword to its canonical key, or None if unrecognized."""
    if not group:
        return None
    return _GROUP_ALIASES.get(group.strip().lower())


def _data_root(data_dir: str | Path | None) -> Path:
    return Path(data_dir) if data_dir else BUNDLED_DATA_DIR


def resolve_given_path(
    gender: str | None = None, data_dir: str | Path | None = None
) -> Path:
    """Return the given-name table for a gender keyword."""
    key = normalize_gender(gender) or "all"
    return _data_root(data_dir) / GIVEN_NAMES_DIR / GIVEN_NAME_FILES[key]


def resolve_surname_path(
    group: str | None = None, data_dir: str | Path | None = None
) -> Path:
    """Return the surname table for a group keyword."""
    key = normalize_group(group) or "all"
    return _data_root(data_dir) / SURNAMES_DIR / SURNAME_FILES[key]


def available_datasets(data_dir: str | Path | None = None) -> list[DatasetInfo]:
    """List every registry dataset under data_dir, whether or not it exists."""
    root = _data_root(data_dir)
    infos = [
        DatasetInfo("given", key, root / GIVEN_NAMES_DIR / filename)
        for key, filename in GIVEN_NAME_FILES.items()
    ]
    infos.extend(
        DatasetInfo("surname", key, root / SURNAMES_DIR / filename)
        for key, filename in SURNAME_FILES.items()
    )
    return infos


def read_lines(path: str | Path) -> list[str]:
    """Read a dataset file into lines.

    Raises:
        DatasetNotFound: If the file does not exist.
        ParseError: If the file is not valid UTF-8.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetNotFound(f"Dataset file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()
    except UnicodeDecodeError as e:
        raise ParseError(
            f"Dataset file is not valid UTF-8 (byte offset {e.start}): {path}"
        ) from e


def load_dataset_file(path: str | Path, bias: float = 1.0) -> WeightedDataset:
    """Read and load a dataset file with the given bias.

    Raises:
        DatasetNotFound: If the file does not exist.
        ParseError: If the file is not UTF-8 or a count field is invalid.
        DegenerateDistribution: If the bias yields no valid distribution.
    """
    lines = read_lines(path)
    dataset = load_dataset(lines, bias)
    logger.info("Loaded %d entries from %s (bias=%s)", len(dataset), path, bias)
    return dataset
