"""Cache directory helpers for extracted mastering resources."""

from pathlib import Path


def get_cache_root(cache_name: str | None = None) -> Path:
    """
    Get the root cache directory for speech mastering.

    Args:
        cache_name: Optional subdirectory name within the cache root

    Returns:
        Path to the cache directory (created if missing)
    """
    cache_root = Path.home() / ".cache" / "speech_mastering"

    if cache_name:
        cache_root = cache_root / cache_name

    cache_root.mkdir(parents=True, exist_ok=True)

    return cache_root


def get_models_cache_dir() -> Path:
    """Get the directory neural denoise models are extracted into."""
    return get_cache_root("models")
