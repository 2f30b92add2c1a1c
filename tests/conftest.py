from pathlib import Path

import cv2
import numpy as np
import pytest

from core.recognizer import FaceRecognizer
from core.session import Session

TEST_TEMPLATE_SIZE = (32, 32)


class RecordingModel:
    """Stand-in for a cv2.face model that records every call."""

    def __init__(self, prediction=(7, 12.5)):
        self.calls = []
        self.prediction = prediction

    def train(self, images, labels):
        self.calls.append(("train", [img.shape for img in images], labels.tolist()))

    def update(self, images, labels):
        self.calls.append(("update", [img.shape for img in images], labels.tolist()))

    def predict(self, image):
        self.calls.append(("predict", image.shape))
        return self.prediction

    def write(self, path):
        self.calls.append(("write", path))
        Path(path).write_text("%YAML:1.0\n")

    def read(self, path):
        self.calls.append(("read", path))


def recording_factory(kind):
    return FaceRecognizer(kind, model=RecordingModel())


def write_face(path: Path, value: int = 100, size=(40, 50)) -> Path:
    """Write a synthetic grayscale image of (width, height) size."""
    path.parent.mkdir(parents=True, exist_ok=True)
    w, h = size
    img = np.full((h, w), value, dtype=np.uint8)
    img[::4, :] = 255 - value
    cv2.imwrite(str(path), img)
    return path


@pytest.fixture
def session(tmp_path):
    return Session(template_size=TEST_TEMPLATE_SIZE, recognizer_factory=recording_factory)


@pytest.fixture
def created_session(session, tmp_path):
    session.create("FISHER", str(tmp_path / "db"))
    return session
