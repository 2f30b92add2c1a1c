"""Utility for building labeled face templates from a directory of images."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple

import cv2
import numpy as np

from configs.config import (
    LABEL_MODE_FILENAME,
    LABEL_MODE_SEQUENTIAL,
    RESIZED_DIR_NAME,
    TEMPLATE_SIZE,
    UNKNOWN_LABEL,
)
from utils.images import (
    image_size,
    list_image_files,
    load_grayscale,
    parse_label,
    to_template,
)


@dataclass
class Template:
    """One normalized training image."""

    image: np.ndarray
    label: int
    name: str


class TemplateBuilder:
    """Builds grayscale, template-sized images and labels from sample images."""

    def __init__(
        self,
        database: Path,
        template_size: Tuple[int, int] = TEMPLATE_SIZE,
        label_mode: str = LABEL_MODE_FILENAME
    ):
        """
        Initialize the template builder.

        Args:
            database: Database root; resized copies go to <database>/resized/
            template_size: (width, height) every image is resized to
            label_mode: "filename" to parse "-<digits>" from the filename,
                "sequential" to number images in enumeration order
        """
        if label_mode not in (LABEL_MODE_FILENAME, LABEL_MODE_SEQUENTIAL):
            raise ValueError(f"Unknown label mode: {label_mode}")

        self.database = Path(database)
        self.template_size = tuple(template_size)
        self.label_mode = label_mode
        self.resized_dir = self.database / RESIZED_DIR_NAME

    def _assign_label(self, image_path: Path, counter: int) -> Tuple[int, str]:
        if self.label_mode == LABEL_MODE_SEQUENTIAL:
            return counter, image_path.stem

        label, name = parse_label(image_path)
        if label is None:
            print(f"⚠️ No '-<digits>' label in {image_path.name}, using {UNKNOWN_LABEL}")
            return UNKNOWN_LABEL, name
        return label, name

    def _write_resized(self, image_path: Path, template: np.ndarray) -> Optional[Path]:
        self.resized_dir.mkdir(parents=True, exist_ok=True)
        out_file = self.resized_dir / image_path.name
        if not cv2.imwrite(str(out_file), template):
            print(f"⚠️ Failed to write resized copy {out_file}")
            return None
        return out_file

    def build_templates(self, samples_dir: Path) -> Iterator[Template]:
        """
        Yield a template for every readable png/jpg under a directory tree.

        Unreadable files are reported and skipped; they do not consume a
        sequential label.

        Args:
            samples_dir: Directory containing face images

        Yields:
            Template records in sorted path order
        """
        counter = 0

        for img_path in list_image_files(Path(samples_dir)):
            print(f"Processing {img_path.name}")

            gray = load_grayscale(img_path)
            if gray is None:
                print(f"⚠️ Failed to read {img_path}, skipping...")
                continue

            template = to_template(gray, self.template_size)
            src_w, src_h = image_size(gray)
            dst_w, dst_h = image_size(template)
            print(f"   Image size width: {src_w} height: {src_h} scaled to {dst_w} {dst_h}")

            self._write_resized(img_path, template)

            label, name = self._assign_label(img_path, counter)
            counter += 1

            yield Template(image=template, label=label, name=name)
