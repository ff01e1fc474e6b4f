"""Adaptive filter chain tuning and filter-graph assembly."""

from .adaptive import adapt_config, calculate_lufs_gap
from .assembler import FilterChainAssembler, build_filter_spec
from .conversions import clamp, db_to_linear, linear_to_db
from .interfaces import FilterEngineInterface
from .models import (
    ANALYSIS_FILTER_ORDER,
    PROCESSING_FILTER_ORDER,
    ContentType,
    FilterChainConfig,
    FilterID,
    StageDescriptor,
    default_filter_config,
)
from .sanitizer import sanitize_config, sanitize_float

__all__ = [
    "ANALYSIS_FILTER_ORDER",
    "PROCESSING_FILTER_ORDER",
    "ContentType",
    "FilterChainAssembler",
    "FilterChainConfig",
    "FilterEngineInterface",
    "FilterID",
    "StageDescriptor",
    "adapt_config",
    "build_filter_spec",
    "calculate_lufs_gap",
    "clamp",
    "db_to_linear",
    "default_filter_config",
    "linear_to_db",
    "sanitize_config",
    "sanitize_float",
]
