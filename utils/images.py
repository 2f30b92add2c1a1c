"""Image helpers built on OpenCV: listing, grayscale loading and resizing."""

import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np

from configs.config import IMAGE_EXTENSIONS, LABEL_PATTERN

_LABEL_RE = re.compile(LABEL_PATTERN)


def list_image_files(
    directory: Path,
    extensions: Iterable[str] = IMAGE_EXTENSIONS
) -> List[Path]:
    """
    Recursively list image files under a directory.

    Args:
        directory: Root directory to walk
        extensions: Accepted suffixes, compared case-insensitively

    Returns:
        Sorted list of matching file paths
    """
    accepted = {ext.lower() for ext in extensions}
    return sorted(
        f for f in Path(directory).rglob("*")
        if f.is_file() and f.suffix.lower() in accepted
    )


def load_grayscale(image_path: Path) -> Optional[np.ndarray]:
    """Load an image as single-channel grayscale, or None if unreadable."""
    return cv2.imread(str(image_path), cv2.IMREAD_GRAYSCALE)


def image_size(img: np.ndarray) -> Tuple[int, int]:
    """Return (width, height) of an image array."""
    h, w = img.shape[:2]
    return w, h


def to_template(img: np.ndarray, template_size: Tuple[int, int]) -> np.ndarray:
    """
    Normalize an image to the template size with bicubic interpolation.

    Images already at the template size are returned unchanged.
    """
    if image_size(img) == tuple(template_size):
        return img
    return cv2.resize(img, tuple(template_size), interpolation=cv2.INTER_CUBIC)


def parse_label(image_path: Path) -> Tuple[Optional[int], str]:
    """
    Parse the trailing "-<digits>" label from a filename.

    Args:
        image_path: Image path, e.g. "faces/alice-7.png"

    Returns:
        Tuple of (label, name). Label is None when the stem carries no
        label, in which case name is the full stem.
    """
    stem = Path(image_path).stem
    match = _LABEL_RE.search(stem)
    if match is None:
        return None, stem
    return int(match.group(1)), stem[:match.start()]
