"""Rarity scale used by front ends, mapped onto the sampling bias exponent.

The 0-100 rarity scale is piecewise linear in bias:

    rarity   0 -> bias  2   (common names strongly favored)
    rarity  50 -> bias  1   (proportional to observed frequency)
    rarity 100 -> bias -1   (rare names favored)
"""

import math

MIN_RARITY = 0.0
MAX_RARITY = 100.0
NEUTRAL_RARITY = 50.0


def rarity_to_bias(rarity: float) -> float:
    """Map a rarity in [0, 100] to a bias exponent."""
    rarity = float(rarity)
    if math.isnan(rarity) or not MIN_RARITY <= rarity <= MAX_RARITY:
        raise ValueError(f"Rarity must be between 0 and 100, got {rarity}")
    if rarity <= NEUTRAL_RARITY:
        return 2.0 - rarity / 50.0
    return 1.0 - (rarity - NEUTRAL_RARITY) / 25.0


def bias_to_rarity(bias: float) -> float:
    """Inverse of rarity_to_bias for biases in [-1, 2]."""
    bias = float(bias)
    if math.isnan(bias) or not -1.0 <= bias <= 2.0:
        raise ValueError(f"Bias must be between -1 and 2, got {bias}")
    if bias >= 1.0:
        return (2.0 - bias) * 50.0
    return NEUTRAL_RARITY + (1.0 - bias) * 25.0
