"""Level conversions and clamping shared by tuners and builders."""

import numpy as np

from .. import config


def db_to_linear(db: float) -> float:
    """Convert decibels to a linear amplitude ratio."""
    return float(np.power(10.0, db / 20.0))


def linear_to_db(linear: float) -> float:
    """
    Convert a linear amplitude ratio to decibels.

    Zero or negative amplitudes map to the silence floor instead of -inf.
    """
    if linear <= 0:
        return config.LINEAR_SILENCE_DB
    return float(20.0 * np.log10(linear))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` to the closed interval [low, high]."""
    return max(low, min(high, value))
