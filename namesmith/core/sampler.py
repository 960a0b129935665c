"""Full-name sampling from a given-name and a surname dataset."""

from __future__ import annotations

import logging
import random
from typing import Protocol, runtime_checkable

from .dataset import WeightedDataset

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Anything that yields uniform floats in [0, 1). ``random.Random`` fits."""

    def random(self) -> float: ...


class NameSampler:
    """Pairs a given-name dataset with a surname dataset.

    Each sampler owns its uniform source. Samplers that must run
    concurrently need separate sources.

    Example:
        given = load_dataset(["Anna,100", "Maisha,1"])
        surname = load_dataset(["SMITH,50", "OKAFOR,3"])
        sampler = NameSampler.seeded(given, surname, seed=42)
        sampler.next_names(3)
    """

    def __init__(
        self,
        given: WeightedDataset,
        surname: WeightedDataset,
        rng: UniformSource | None = None,
    ):
        self.given = given
        self.surname = surname
        self.rng: UniformSource = rng if rng is not None else random.Random()

    @classmethod
    def seeded(
        cls, given: WeightedDataset, surname: WeightedDataset, seed: int | None
    ) -> "NameSampler":
        return cls(given, surname, random.Random(seed))

    def next_name(self) -> str:
        """Draw one "Given Surname" string, given name first."""
        given = self.given.pick(self.rng.random())
        surname = self.surname.pick(self.rng.random())
        return f"{given} {surname}"

    def next_names(self, count: int) -> list[str]:
        """Draw count independent names. Repeats are expected."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        names = [self.next_name() for _ in range(count)]
        logger.debug("Sampled %d name(s)", len(names))
        return names


def sample_one(
    given: WeightedDataset,
    surname: WeightedDataset,
    rng: UniformSource | None = None,
) -> str:
    """Sample a single full name."""
    return NameSampler(given, surname, rng).next_name()


def sample_many(
    given: WeightedDataset,
    surname: WeightedDataset,
    n: int,
    rng: UniformSource | None = None,
) -> list[str]:
    """Sample n full names from one shared uniform source."""
    return NameSampler(given, surname, rng).next_names(n)
