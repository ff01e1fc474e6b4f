"""Tests for the neural denoise model service."""

import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from speech_mastering.denoise_model import DenoiseModelService, load_bundled_model
from speech_mastering.exceptions import DenoiseModelError

MODEL_BYTES = b"rnnoise-model-v1"


@pytest.mark.unit
class TestDenoiseModelService:
    """Test cases for DenoiseModelService."""

    def test_extracts_model_on_first_resolve(self, tmp_path: Path) -> None:
        """Test the model is written to the cache directory."""
        service = DenoiseModelService(loader=lambda: MODEL_BYTES, cache_dir=tmp_path)

        path = service.resolve()

        assert path == tmp_path / "speech.rnnn"
        assert path.read_bytes() == MODEL_BYTES
        assert service.is_available is True

    def test_extracts_at_most_once(self, tmp_path: Path) -> None:
        """Test repeated resolves reuse the first result."""
        loader = MagicMock(return_value=MODEL_BYTES)
        service = DenoiseModelService(loader=loader, cache_dir=tmp_path)

        first = service.resolve()
        second = service.resolve()

        assert first == second
        loader.assert_called_once()

    def test_concurrent_resolves_extract_once(self, tmp_path: Path) -> None:
        """Test many threads resolving at once trigger a single extraction."""
        loader = MagicMock(return_value=MODEL_BYTES)
        service = DenoiseModelService(loader=loader, cache_dir=tmp_path)
        results: list[Path | None] = []

        threads = [
            threading.Thread(target=lambda: results.append(service.resolve()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert set(results) == {tmp_path / "speech.rnnn"}
        loader.assert_called_once()

    def test_unavailable_model_reports_none(self, tmp_path: Path) -> None:
        """Test a failing loader makes the model unavailable without raising."""
        loader = MagicMock(side_effect=DenoiseModelError("missing"))
        service = DenoiseModelService(loader=loader, cache_dir=tmp_path)

        assert service.resolve() is None
        assert service.resolve() is None
        assert service.is_available is False
        loader.assert_called_once()

    def test_existing_copy_not_rewritten(self, tmp_path: Path) -> None:
        """Test an identical cached copy is reused."""
        cached = tmp_path / "speech.rnnn"
        cached.write_bytes(MODEL_BYTES)
        mtime = cached.stat().st_mtime_ns

        service = DenoiseModelService(loader=lambda: MODEL_BYTES, cache_dir=tmp_path)

        assert service.resolve() == cached
        assert cached.stat().st_mtime_ns == mtime


@pytest.mark.unit
def test_bundled_model_missing_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test a missing bundled resource is reported as DenoiseModelError."""
    missing = MagicMock()
    missing.__truediv__.return_value = missing
    missing.read_bytes.side_effect = FileNotFoundError("speech.rnnn")
    monkeypatch.setattr(
        "speech_mastering.denoise_model.resources.files", lambda package: missing
    )

    with pytest.raises(DenoiseModelError):
        load_bundled_model()
