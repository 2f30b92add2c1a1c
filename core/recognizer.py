"""Face recognition module wrapping OpenCV's cv2.face recognizers."""

from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from configs.config import (
    EIGEN_NUM_COMPONENTS,
    EIGEN_THRESHOLD,
    RECOGNIZER_EIGEN,
    RECOGNIZER_FISHER,
    RECOGNIZER_LBPH,
)


class RecognizerKind(Enum):
    """The recognizer algorithms the shell can create."""

    EIGEN = RECOGNIZER_EIGEN
    FISHER = RECOGNIZER_FISHER
    LBPH = RECOGNIZER_LBPH

    @classmethod
    def parse(cls, name: str) -> Optional["RecognizerKind"]:
        """Look up a kind by case-insensitive name, or None if unknown."""
        try:
            return cls(name.upper())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return {
            RecognizerKind.EIGEN: "EigenFaceRecognizer",
            RecognizerKind.FISHER: "FisherFaceRecognizer",
            RecognizerKind.LBPH: "LBPHFaceRecognizer",
        }[self]


def _create_model(kind: RecognizerKind):
    if kind is RecognizerKind.EIGEN:
        return cv2.face.EigenFaceRecognizer_create(
            num_components=EIGEN_NUM_COMPONENTS,
            threshold=EIGEN_THRESHOLD
        )
    if kind is RecognizerKind.FISHER:
        return cv2.face.FisherFaceRecognizer_create()
    return cv2.face.LBPHFaceRecognizer_create()


class FaceRecognizer:
    """Handles training, prediction and persistence of one cv2.face model."""

    def __init__(self, kind: RecognizerKind, model=None):
        """
        Initialize the face recognizer.

        Args:
            kind: Which algorithm to use
            model: Pre-built cv2.face model (default: created from kind with
                its fixed hyperparameters)
        """
        self.kind = kind
        self.model = model if model is not None else _create_model(kind)
        self.trained = False

    @property
    def supports_update(self) -> bool:
        """Only LBPH models can be extended without retraining from scratch."""
        return self.kind is RecognizerKind.LBPH

    @staticmethod
    def _labels_array(labels: Sequence[int]) -> np.ndarray:
        return np.asarray(labels, dtype=np.int32)

    def train(self, images: Sequence[np.ndarray], labels: Sequence[int]) -> None:
        """Fit the model from scratch, discarding anything learned before."""
        self.model.train(list(images), self._labels_array(labels))
        self.trained = True

    def update(self, images: Sequence[np.ndarray], labels: Sequence[int]) -> None:
        """
        Extend an already trained model with more samples.

        Raises:
            ValueError: If the algorithm has no incremental update
        """
        if not self.supports_update:
            raise ValueError(f"{self.kind.display_name} cannot be updated incrementally")
        self.model.update(list(images), self._labels_array(labels))
        self.trained = True

    def predict(self, image: np.ndarray) -> Tuple[int, float]:
        """
        Predict the nearest label for a template-sized grayscale image.

        Returns:
            Tuple of (label, distance) exactly as reported by OpenCV
        """
        label, distance = self.model.predict(image)
        return int(label), float(distance)

    def save(self, path: Path) -> None:
        self.model.write(str(path))

    def load(self, path: Path) -> None:
        self.model.read(str(path))
        self.trained = True


def create_recognizer(kind: RecognizerKind) -> FaceRecognizer:
    """Create a recognizer of the given kind with its fixed hyperparameters."""
    return FaceRecognizer(kind)
