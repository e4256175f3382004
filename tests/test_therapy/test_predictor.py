"""Tests for the band predictor and its loader."""

import logging
from pathlib import Path

import numpy as np
import pytest

from soundtherapy.therapy import predictor
from soundtherapy.therapy.predictor import (
    LinearBandModel,
    ModelLoader,
    ModelUnavailable,
    get_model_loader,
    read_model,
)


def _write_model(path: Path, weights: np.ndarray, bias: np.ndarray) -> Path:
    np.savez(path, weights=weights, bias=bias)
    return path


def _truncate(path: Path, size: int = 40) -> Path:
    path.write_bytes(path.read_bytes()[:size])
    return path


@pytest.fixture
def model_file(tmp_path: Path) -> Path:
    # low = 0.1 * stress, high = 0.2 * activity + 5
    weights = np.zeros((4, 2))
    weights[1, 0] = 0.1
    weights[3, 1] = 0.2
    return _write_model(tmp_path / "band.npz", weights, np.array([0.0, 5.0]))


class TestLinearBandModel:
    def test_predict(self, model_file: Path) -> None:
        model = read_model(model_file)
        low, high = model.predict([70.0, 80.0, 40.0, 90.0])
        assert low == pytest.approx(8.0)
        assert high == pytest.approx(23.0)

    def test_wrong_feature_count(self, model_file: Path) -> None:
        model = read_model(model_file)
        with pytest.raises(ModelUnavailable, match="Expected 4 features"):
            model.predict([1.0, 2.0])

    def test_non_finite_output(self) -> None:
        model = LinearBandModel(weights=np.full((4, 2), np.inf), bias=np.zeros(2))
        with pytest.raises(ModelUnavailable, match="Non-finite"):
            model.predict([0.0, 0.0, 0.0, 0.0])


class TestReadModel:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ModelUnavailable, match="Cannot read model"):
            read_model(tmp_path / "nope.npz")

    def test_missing_array(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.npz"
        np.savez(path, weights=np.zeros((4, 2)))
        with pytest.raises(ModelUnavailable, match="Cannot read model"):
            read_model(path)

    def test_bad_shapes(self, tmp_path: Path) -> None:
        path = _write_model(tmp_path / "bad.npz", np.zeros((3, 2)), np.zeros(2))
        with pytest.raises(ModelUnavailable, match="Bad model shapes"):
            read_model(path)

    def test_garbage_file(self, tmp_path: Path) -> None:
        path = tmp_path / "garbage.npz"
        path.write_text("not a model")
        with pytest.raises(ModelUnavailable):
            read_model(path)

    def test_truncated_archive(self, model_file: Path) -> None:
        _truncate(model_file)
        with pytest.raises(ModelUnavailable, match="Cannot read model"):
            read_model(model_file)


class TestModelLoader:
    async def test_load_success(self, model_file: Path) -> None:
        loader = ModelLoader(path=model_file)
        assert loader.model is None

        model = await loader.load()

        assert model is not None
        assert loader.loaded is True
        assert loader.status() == {"loaded": True, "path": str(model_file), "error": None}

    async def test_load_failure_is_recorded_not_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        loader = ModelLoader(path=tmp_path / "missing.npz")
        with caplog.at_level(logging.WARNING, logger="soundtherapy.therapy.predictor"):
            assert await loader.load() is None
        assert loader.loaded is False
        assert "Cannot read model" in (loader.error or "")
        assert "Predictor unavailable" in caplog.text

    async def test_no_path_configured(self) -> None:
        loader = ModelLoader(path=None)
        assert await loader.load() is None
        status = loader.status()
        assert status["loaded"] is False
        assert status["path"] is None
        assert status["error"] == "No predictor path configured"

    async def test_reload_after_failure(self, tmp_path: Path) -> None:
        path = tmp_path / "later.npz"
        loader = ModelLoader(path=path)
        await loader.load()
        assert loader.loaded is False

        _write_model(path, np.zeros((4, 2)), np.array([4.0, 8.0]))
        await loader.load()
        assert loader.loaded is True
        assert loader.error is None

    async def test_truncated_archive_is_recorded_not_raised(self, model_file: Path) -> None:
        loader = ModelLoader(path=_truncate(model_file))
        assert await loader.load() is None
        assert loader.loaded is False
        assert "Cannot read model" in (loader.error or "")

    async def test_explicit_none_ignores_settings(
        self, model_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SOUNDTHERAPY_PREDICTOR_PATH", str(model_file))
        loader = ModelLoader(path=None)
        assert await loader.load() is None
        assert loader.status()["path"] is None


def test_get_model_loader_reads_settings(
    model_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SOUNDTHERAPY_PREDICTOR_PATH", str(model_file))
    monkeypatch.setattr(predictor, "_loader", None)
    loader = get_model_loader()
    assert loader.path == model_file
    assert get_model_loader() is loader
