"""Frequency-weighted name datasets.

A dataset is loaded from ``name,count`` lines, turned into a probability
distribution by raising every count to a bias exponent, and sampled by
inverse-CDF lookup over the entries in their stored order.

Bias semantics:
- bias > 1: common names become more likely than their raw frequency
- bias = 1: sampling proportional to observed frequency
- bias = 0: uniform over all entries
- bias < 0: rare names become more likely than common ones
"""

from __future__ import annotations

import logging
import math
import re
from bisect import bisect_left
from itertools import accumulate
from typing import Iterable

from .errors import DegenerateDistribution, EmptyDataset, NotInitialized, ParseError
from .models import NameEntry, WeightedEntry

logger = logging.getLogger(__name__)

DELIMITER = ","

_COUNT_RE = re.compile(r"[0-9]+")


def parse_count(text: str, line_number: int | None = None, line: str = "") -> int:
    """Parse a count field as a non-negative base-10 integer.

    Surrounding whitespace is ignored. Signs, decimals, digit separators
    and non-ASCII digits are rejected.

    Raises:
        ParseError: If the field is not a non-negative integer.
    """
    token = text.strip()
    if not _COUNT_RE.fullmatch(token):
        where = f" on line {line_number}" if line_number is not None else ""
        raise ParseError(
            f"Invalid count {text!r}{where}: expected a non-negative integer",
            line_number=line_number,
            line=line,
        )
    return int(token)


def parse_lines(lines: Iterable[str]) -> list[NameEntry]:
    """Parse ``name,count`` lines into entries, preserving order.

    Lines that do not split into exactly two fields are skipped. The name
    field is kept verbatim; duplicates are not merged.

    Raises:
        ParseError: On the first line whose count field is invalid.
    """
    entries: list[NameEntry] = []
    skipped = 0
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        fields = line.split(DELIMITER)
        if len(fields) != 2:
            skipped += 1
            continue
        name, count_text = fields
        count = parse_count(count_text, line_number=line_number, line=line)
        entries.append(NameEntry(name=name, count=count))

    if skipped:
        logger.debug("Skipped %d line(s) without exactly two fields", skipped)
    logger.debug("Parsed %d name entries", len(entries))
    return entries


def _transform(count: int, bias: float) -> float:
    if count == 0 and bias < 0:
        raise DegenerateDistribution(
            f"Zero count raised to negative bias {bias} is undefined"
        )
    try:
        value = math.pow(count, bias)
    except OverflowError as e:
        raise DegenerateDistribution(
            f"Count {count} raised to bias {bias} overflows"
        ) from e
    if not math.isfinite(value):
        raise DegenerateDistribution(f"Count {count} raised to bias {bias} overflows")
    return value


class WeightedDataset:
    """An ordered table of name entries with a bias-adjusted distribution.

    Construct with :meth:`from_lines` or :func:`load_dataset`. Probabilities
    live in a tuple parallel to :attr:`entries` and are replaced wholesale
    by :meth:`compute_probabilities`.
    """

    def __init__(self, entries: Iterable[NameEntry] = ()):
        self._entries: tuple[NameEntry, ...] = tuple(entries)
        self._bias: float | None = None
        self._probabilities: tuple[float, ...] | None = None
        # Cumulative sums over entries with nonzero probability only
        self._cumulative: list[float] = []
        self._support: list[int] = []

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WeightedDataset":
        """Parse lines into a dataset without computing probabilities."""
        return cls(parse_lines(lines))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"WeightedDataset(entries={len(self._entries)}, bias={self._bias})"

    @property
    def entries(self) -> tuple[NameEntry, ...]:
        return self._entries

    @property
    def bias(self) -> float | None:
        """Bias of the last probability computation, or None if not computed."""
        return self._bias

    @property
    def is_initialized(self) -> bool:
        return self._probabilities is not None

    @property
    def probabilities(self) -> tuple[float, ...]:
        """Probabilities parallel to :attr:`entries`.

        Raises:
            NotInitialized: If probabilities have not been computed.
        """
        if self._probabilities is None:
            raise NotInitialized("Probabilities have not been computed")
        return self._probabilities

    def compute_probabilities(self, bias: float = 1.0) -> None:
        """Compute every entry's probability as ``count ** bias / total``.

        Each call fully replaces the previous distribution.

        Raises:
            ValueError: If bias is NaN or infinite.
            DegenerateDistribution: If a weight is undefined or overflows,
                or all transformed weights are zero.
        """
        bias = float(bias)
        if not math.isfinite(bias):
            raise ValueError(f"Bias must be a finite number, got {bias}")

        weights = [_transform(entry.count, bias) for entry in self._entries]
        try:
            total = math.fsum(weights)
        except OverflowError as e:
            raise DegenerateDistribution(
                f"Total weight overflows at bias {bias}"
            ) from e
        if not math.isfinite(total):
            raise DegenerateDistribution(f"Total weight overflows at bias {bias}")
        if self._entries and total == 0:
            raise DegenerateDistribution(
                f"All {len(self._entries)} entries have zero weight at bias {bias}"
            )

        probabilities = tuple(w / total for w in weights)
        support = [i for i, p in enumerate(probabilities) if p > 0]

        self._probabilities = probabilities
        self._support = support
        self._cumulative = list(accumulate(probabilities[i] for i in support))
        self._bias = bias

        logger.debug(
            "Computed distribution over %d entries (bias=%s, %d with nonzero weight)",
            len(probabilities),
            bias,
            len(support),
        )

    def pick(self, position: float) -> str:
        """Return the name whose cumulative probability first reaches position.

        Entries are scanned in stored order. Entries with zero probability
        are never returned. If rounding leaves the final cumulative sum below
        position, the last entry with nonzero probability is returned.

        Args:
            position: A point in [0, 1).

        Raises:
            EmptyDataset: If the dataset has no entries.
            NotInitialized: If probabilities have not been computed.
            ValueError: If position is outside [0, 1).
        """
        return self.pick_entry(position).name

    def pick_entry(self, position: float) -> NameEntry:
        """Like :meth:`pick` but returns the whole entry."""
        if not self._entries:
            raise EmptyDataset("Cannot sample from a dataset with no entries")
        if self._probabilities is None:
            raise NotInitialized("Call compute_probabilities() before sampling")
        if not 0.0 <= position < 1.0:
            raise ValueError(f"Position must be in [0, 1), got {position}")

        idx = bisect_left(self._cumulative, position)
        if idx >= len(self._support):
            idx = len(self._support) - 1
        return self._entries[self._support[idx]]

    def distribution(self) -> list[WeightedEntry]:
        """Return entries paired with their probabilities, in stored order."""
        return [
            WeightedEntry(name=entry.name, count=entry.count, probability=p)
            for entry, p in zip(self._entries, self.probabilities)
        ]

    def most_common(self, n: int | None = None) -> list[WeightedEntry]:
        """Return the n most probable entries, ties kept in stored order."""
        ranked = sorted(self.distribution(), key=lambda e: e.probability, reverse=True)
        return ranked if n is None else ranked[:n]


def load_dataset(lines: Iterable[str], bias: float = 1.0) -> WeightedDataset:
    """Parse lines and compute the distribution for the given bias.

    Raises:
        ParseError: If a count field is invalid.
        DegenerateDistribution: If the bias/count combination has no
            valid distribution.
    """
    dataset = WeightedDataset.from_lines(lines)
    dataset.compute_probabilities(bias)
    return dataset
