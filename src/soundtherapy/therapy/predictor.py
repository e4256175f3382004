"""Pre-trained frequency-band predictor and its asynchronous loader."""

import asyncio
import zipfile
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import numpy as np

from soundtherapy.config import get_settings

logger = logging.getLogger(__name__)

FEATURE_COUNT = 4  # heart_rate, stress_level, sleep_quality, activity_level
OUTPUT_COUNT = 2  # predicted band low/high in Hz


class ModelUnavailable(RuntimeError):
    """The predictive model could not be loaded or failed during inference."""


class PredictiveModel(Protocol):
    def predict(self, features: Sequence[float]) -> tuple[float, float]: ...


@dataclass(frozen=True)
class LinearBandModel:
    """Linear regression from biometric features to a frequency band."""

    weights: np.ndarray  # (FEATURE_COUNT, OUTPUT_COUNT)
    bias: np.ndarray  # (OUTPUT_COUNT,)

    def predict(self, features: Sequence[float]) -> tuple[float, float]:
        x = np.asarray(features, dtype=np.float64)
        if x.shape != (FEATURE_COUNT,):
            raise ModelUnavailable(
                f"Expected {FEATURE_COUNT} features, got shape {x.shape}"
            )
        y = x @ self.weights + self.bias
        if not np.all(np.isfinite(y)):
            raise ModelUnavailable(f"Non-finite prediction: {y.tolist()}")
        return float(y[0]), float(y[1])


def read_model(path: Path) -> LinearBandModel:
    """Read a model archive from disk.

    Raises:
        ModelUnavailable: If the file is missing, unreadable, or malformed.
    """
    try:
        with np.load(path) as archive:
            weights = np.asarray(archive["weights"], dtype=np.float64)
            bias = np.asarray(archive["bias"], dtype=np.float64)
    except (
        OSError,
        EOFError,
        zipfile.BadZipFile,
        KeyError,
        IndexError,
        TypeError,
        ValueError,
    ) as e:
        raise ModelUnavailable(f"Cannot read model from {path}: {e}") from e

    if weights.shape != (FEATURE_COUNT, OUTPUT_COUNT) or bias.shape != (OUTPUT_COUNT,):
        raise ModelUnavailable(
            f"Bad model shapes in {path}: weights={weights.shape} bias={bias.shape}"
        )
    return LinearBandModel(weights=weights, bias=bias)


class ModelLoader:
    """Loads the predictor once, out of band, and remembers the outcome.

    Until `load()` succeeds, `model` is None and callers recommend without it.
    A `path` of None means no predictor is configured.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self.model: PredictiveModel | None = None
        self.error: str | None = None

    async def load(self) -> PredictiveModel | None:
        if self.path is None:
            self.error = "No predictor path configured"
            logger.info("No predictor configured; recommending from templates only")
            return None

        try:
            self.model = await asyncio.to_thread(read_model, self.path)
        except ModelUnavailable as e:
            self.model = None
            self.error = str(e)
            logger.warning("Predictor unavailable: %s", e)
            return None

        self.error = None
        logger.info("Predictor loaded from %s", self.path)
        return self.model

    @property
    def loaded(self) -> bool:
        return self.model is not None

    def status(self) -> dict[str, object]:
        return {
            "loaded": self.loaded,
            "path": str(self.path) if self.path is not None else None,
            "error": self.error,
        }


_loader: ModelLoader | None = None


def get_model_loader() -> ModelLoader:
    global _loader
    if _loader is None:
        _loader = ModelLoader(path=get_settings().predictor_path)
    return _loader
