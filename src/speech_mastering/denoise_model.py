"""Lazy extraction of the neural denoise model to the cache directory."""

import threading
from collections.abc import Callable
from importlib import resources
from pathlib import Path

from . import config
from .cache_utils import get_models_cache_dir
from .exceptions import DenoiseModelError
from .logging_utils import get_logger

logger = get_logger(__name__)


def load_bundled_model() -> bytes:
    """
    Read the model shipped with the package.

    Returns:
        Raw model file contents

    Raises:
        DenoiseModelError: If the model resource is missing or unreadable
    """
    resource = resources.files("speech_mastering") / "resources" / config.DENOISE_MODEL_FILENAME
    try:
        return resource.read_bytes()
    except OSError as e:
        raise DenoiseModelError(f"Bundled denoise model unavailable: {e}") from e


class DenoiseModelService:
    """
    Provides a filesystem path to the neural denoise model.

    The model is extracted at most once per service, on first use, and the
    outcome (a path or unavailability) is remembered. Safe to share between
    threads.
    """

    def __init__(
        self,
        loader: Callable[[], bytes] | None = None,
        cache_dir: Path | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            loader: Returns the model bytes, defaults to the bundled model
            cache_dir: Extraction directory, defaults to the models cache
        """
        self._loader = loader or load_bundled_model
        self._cache_dir = cache_dir
        self._lock = threading.Lock()
        self._resolved = False
        self._model_path: Path | None = None

    def resolve(self) -> Path | None:
        """
        Get the extracted model path, extracting it on first call.

        Returns:
            Path to the model file, or None when no model is available
        """
        with self._lock:
            if not self._resolved:
                self._model_path = self._extract()
                self._resolved = True
            return self._model_path

    @property
    def is_available(self) -> bool:
        """Whether a model path can be provided."""
        return self.resolve() is not None

    def _extract(self) -> Path | None:
        try:
            data = self._loader()
            cache_dir = self._cache_dir or get_models_cache_dir()
            cache_dir.mkdir(parents=True, exist_ok=True)
            model_path = cache_dir / config.DENOISE_MODEL_FILENAME
            if not model_path.exists() or model_path.stat().st_size != len(data):
                model_path.write_bytes(data)
                logger.debug(f"Extracted denoise model to {model_path}")
            return model_path
        except (DenoiseModelError, OSError) as e:
            logger.warning(f"Neural denoise unavailable: {e}")
            return None
