"""Replacement of non-finite tuning results with stage defaults."""

from dataclasses import fields

import numpy as np

from .. import config
from ..logging_utils import get_logger
from .models import FilterChainConfig

logger = get_logger(__name__)


def sanitize_float(value: float, default: float) -> float:
    """Return ``value`` unless it is NaN or infinite, in which case ``default``."""
    if np.isfinite(value):
        return value
    return default


def _sanitize_stage(stage: object) -> None:
    defaults = type(stage)()
    for f in fields(stage):
        value = getattr(stage, f.name)
        if not isinstance(value, float):
            continue
        clean = sanitize_float(value, getattr(defaults, f.name))
        if clean is not value:
            logger.debug(
                f"Replaced non-finite {type(stage).__name__}.{f.name}={value} with {clean}"
            )
            setattr(stage, f.name, clean)


def sanitize_config(chain: FilterChainConfig) -> FilterChainConfig:
    """
    Replace NaN and infinite stage parameters with their defaults.

    Zero and negative values are left alone except for the gate threshold,
    which must be a positive linear amplitude. Applying this twice gives the
    same result as applying it once.

    Args:
        chain: Configuration to sanitize in place

    Returns:
        The same configuration object
    """
    for stage in chain.stages():
        _sanitize_stage(stage)

    expander = chain.multiband_expander
    finite_bands = [
        band
        for band in expander.bands
        if all(np.isfinite(getattr(band, f.name)) for f in fields(band))
    ]
    if len(finite_bands) != len(expander.bands):
        # Bands have no defaults of their own, so a broken band is dropped
        logger.debug(
            f"Dropped {len(expander.bands) - len(finite_bands)} non-finite expander band(s)"
        )
        expander.bands = finite_bands

    if not chain.gate.threshold > 0:
        chain.gate.threshold = config.GATE_DEFAULT_THRESHOLD

    chain.target_i = sanitize_float(chain.target_i, config.DEFAULT_TARGET_I)
    chain.target_tp = sanitize_float(chain.target_tp, config.DEFAULT_TARGET_TP)
    chain.target_lra = sanitize_float(chain.target_lra, config.DEFAULT_TARGET_LRA)

    return chain
