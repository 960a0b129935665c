"""namesmith: random full names from frequency-weighted name tables.

Example:
    from namesmith import load_dataset, sample_many

    given = load_dataset(["Anna,100", "Maisha,1"])
    surname = load_dataset(["SMITH,50", "OKAFOR,3"], bias=0.5)
    sample_many(given, surname, 3)
"""

__version__ = "0.1.0"

from .core import (
    DatasetNotFound,
    DegenerateDistribution,
    EmptyDataset,
    NameDataError,
    NameEntry,
    NameSampler,
    NotInitialized,
    ParseError,
    UniformSource,
    WeightedDataset,
    WeightedEntry,
    load_dataset,
    sample_many,
    sample_one,
)
from .rarity import bias_to_rarity, rarity_to_bias

__all__ = [
    "__version__",
    "WeightedDataset",
    "NameEntry",
    "WeightedEntry",
    "NameSampler",
    "UniformSource",
    "load_dataset",
    "sample_one",
    "sample_many",
    "rarity_to_bias",
    "bias_to_rarity",
    "NameDataError",
    "ParseError",
    "DegenerateDistribution",
    "EmptyDataset",
    "NotInitialized",
    "DatasetNotFound",
]
