"""Training batch accumulator with an explicit commit step."""

from typing import List, Optional

import numpy as np

from core.recognizer import FaceRecognizer


class TrainingBatch:
    """Collects (image, label) pairs and commits them to a recognizer."""

    def __init__(self, recognizer: FaceRecognizer, flush_threshold: Optional[int] = None):
        """
        Initialize the batch.

        Args:
            recognizer: Recognizer the batch is committed to
            flush_threshold: Number of images after which the batch is full,
                or None to collect everything into a single commit
        """
        if flush_threshold is not None and flush_threshold < 1:
            raise ValueError("flush_threshold must be positive")

        self.recognizer = recognizer
        self.flush_threshold = flush_threshold
        self.images: List[np.ndarray] = []
        self.labels: List[int] = []
        self.commits = 0
        self.committed_images = 0

    def __len__(self) -> int:
        return len(self.images)

    def add(self, image: np.ndarray, label: int) -> None:
        self.images.append(image)
        self.labels.append(label)

    @property
    def is_full(self) -> bool:
        return self.flush_threshold is not None and len(self.images) >= self.flush_threshold

    def commit(self) -> int:
        """
        Hand the pending images to the recognizer and clear the batch.

        The first commit trains from scratch; later commits update the
        model in place.

        Returns:
            Number of images committed
        """
        if not self.images:
            return 0

        count = len(self.images)
        if self.commits == 0:
            self.recognizer.train(self.images, self.labels)
        else:
            self.recognizer.update(self.images, self.labels)

        self.commits += 1
        self.committed_images += count
        self.images = []
        self.labels = []
        return count
