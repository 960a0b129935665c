"""Weighted name sampling engine.

Loads ``name,count`` tables, turns counts into a bias-adjusted probability
distribution, and samples full names from a given-name and a surname table.
"""

from .dataset import WeightedDataset, load_dataset, parse_count, parse_lines
from .errors import (
    DatasetNotFound,
    DegenerateDistribution,
    EmptyDataset,
    NameDataError,
    NotInitialized,
    ParseError,
)
from .models import NameEntry, WeightedEntry
from .sampler import NameSampler, UniformSource, sample_many, sample_one

__all__ = [
    # Dataset
    "WeightedDataset",
    "load_dataset",
    "parse_count",
    "parse_lines",
    # Models
    "NameEntry",
    "WeightedEntry",
    # Sampling
    "NameSampler",
    "UniformSource",
    "sample_one",
    "sample_many",
    # Errors
    "NameDataError",
    "ParseError",
    "DegenerateDistribution",
    "EmptyDataset",
    "NotInitialized",
    "DatasetNotFound",
]
