"""Session state and the command handlers that operate on it."""

import traceback
from pathlib import Path
from typing import Callable, Optional, Tuple

from configs.config import (
    BULK_LOAD_SIZE,
    DEFAULT_LABEL_MODE,
    TEMPLATE_SIZE,
    UNKNOWN_LABEL,
)
from core.batch import TrainingBatch
from core.label_registry import LabelRegistry, sidecar_path
from core.recognizer import FaceRecognizer, RecognizerKind, create_recognizer
from core.results import CommandResult, Status
from utils.images import load_grayscale, to_template
from utils.template_builder import TemplateBuilder


def _library_failure(exc: Exception) -> CommandResult:
    return CommandResult.failure(Status.LIBRARY_ERROR, f"Error: {exc}", traceback.format_exc())


class Session:
    """
    Holds the active recognizer and everything the shell commands share.

    A session starts without a recognizer; `create` must run before
    `train`, `load` or `search` can do anything.
    """

    def __init__(
        self,
        database: Optional[Path] = None,
        template_size: Tuple[int, int] = TEMPLATE_SIZE,
        label_mode: str = DEFAULT_LABEL_MODE,
        batch_size: int = BULK_LOAD_SIZE,
        recognizer_factory: Callable[[RecognizerKind], FaceRecognizer] = create_recognizer,
    ):
        """
        Initialize the session.

        Args:
            database: Database root for resized copies (default: unset until create)
            template_size: (width, height) every image is normalized to
            label_mode: "filename" or "sequential" label assignment for train
            batch_size: Images per incremental training batch
            recognizer_factory: Builds a recognizer for a kind
        """
        self.recognizer: Optional[FaceRecognizer] = None
        self.database = Path(database) if database is not None else None
        self.template_size = tuple(template_size)
        self.label_mode = label_mode
        self.batch_size = batch_size
        self.recognizer_factory = recognizer_factory
        self.registry = LabelRegistry()
        self.model_path: Optional[Path] = None

    def create(self, algorithm: str, output_dir: str) -> CommandResult:
        """
        Replace the recognizer with a new one and set the database root.

        An unknown algorithm name leaves the current recognizer in place.
        """
        directory = Path(output_dir)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return CommandResult.failure(
                Status.MISSING_PATH, f"Cannot create directory {output_dir}: {e}"
            )
        self.database = directory

        message = ""
        kind = RecognizerKind.parse(algorithm)
        if kind is not None:
            try:
                self.recognizer = self.recognizer_factory(kind)
            except Exception as e:
                return _library_failure(e)
            self.registry.clear()
            message = f"{kind.display_name} loaded."

        return CommandResult.success(message)

    def train(self, directory_path: str) -> CommandResult:
        """
        Train the recognizer on every png/jpg under a directory tree.

        Recognizers that support incremental updates are fed in batches of
        `batch_size`; the others are trained once with every image. Batches
        already committed stay applied if a later one fails.
        """
        directory = Path(directory_path)
        if not directory.is_dir():
            return CommandResult.failure(
                Status.MISSING_PATH, f"Directory doesn't exist: {directory_path}"
            )

        if self.recognizer is None:
            return CommandResult.failure(
                Status.MISSING_PREREQUISITE, "Model doesn't exist. Please create a model first."
            )

        if self.database is None:
            return CommandResult.failure(
                Status.MISSING_PREREQUISITE,
                "Database root not set. Run 'create <ALGO> <dir>' or start with --database."
            )

        builder = TemplateBuilder(self.database, self.template_size, self.label_mode)
        threshold = self.batch_size if self.recognizer.supports_update else None
        batch = TrainingBatch(self.recognizer, threshold)
        labels = set()
        registry = LabelRegistry()

        try:
            for template in builder.build_templates(directory):
                batch.add(template.image, template.label)
                labels.add(template.label)
                if template.label != UNKNOWN_LABEL:
                    registry.register(template.label, template.name)

                if batch.is_full:
                    print(f"Training at {batch.committed_images + len(batch)} images...")
                    batch.commit()
                    print("Done training. Continue loading...")

            if batch.commits == 0 and len(batch) == 0:
                return CommandResult.failure(
                    Status.MISSING_PATH, f"No png/jpg images found under {directory_path}"
                )

            batch.commit()
        except Exception as e:
            if batch.commits > 0:
                self.registry = registry
            return _library_failure(e)

        self.registry = registry

        return CommandResult.success(
            f"✅ Trained {self.recognizer.kind.display_name} on "
            f"{batch.committed_images} images ({len(labels)} labels)"
        )

    def search(self, image_path: str) -> CommandResult:
        """Predict the closest label for one image and report its name."""
        path = Path(image_path)
        if not path.is_file():
            return CommandResult.failure(Status.MISSING_PATH, f"Can't find image at {image_path}")

        if self.recognizer is None:
            return CommandResult.failure(
                Status.MISSING_PREREQUISITE, "Model doesn't exist. Please create a model first."
            )

        try:
            gray = load_grayscale(path)
            if gray is None:
                return CommandResult.failure(Status.MISSING_PATH, f"Can't read image at {image_path}")

            if not self.recognizer.trained:
                return CommandResult.failure(
                    Status.MISSING_PREREQUISITE, "Model isn't trained. Please train or load a model first."
                )

            label, distance = self.recognizer.predict(to_template(gray, self.template_size))
        except Exception as e:
            return _library_failure(e)

        name = self.registry.get(label)
        match = name if name is not None else label
        return CommandResult.success(f"Possible match: {match} (label: {label}, distance: {distance:.2f})")

    def load(self, model_path: str) -> CommandResult:
        """Load learned parameters into the current recognizer."""
        if self.recognizer is None:
            return CommandResult.failure(
                Status.MISSING_PREREQUISITE, "Model doesn't exist. Please create a model first."
            )

        print(f"Trying to load {model_path}")

        path = Path(model_path)
        if not path.is_file():
            return CommandResult.failure(Status.MISSING_PATH, f"Cannot find model: {model_path}")

        try:
            self.recognizer.load(path)
            labels_file = sidecar_path(path)
            if labels_file.is_file():
                count = self.registry.load(labels_file)
                return CommandResult.success(f"✅ Model loaded from {path} ({count} labels)")
            self.registry.clear()
        except Exception as e:
            return _library_failure(e)

        return CommandResult.success(f"✅ Model loaded from {path}")

    def save(self, model_path: Optional[str] = None) -> CommandResult:
        """
        Save the recognizer and its label registry.

        Without a path, the path from the previous save is reused.
        """
        if model_path is None:
            if self.model_path is None:
                return CommandResult.failure(Status.USAGE, "Please provide file path to save model.")
            path = self.model_path
        else:
            path = Path(model_path)

        self.model_path = path

        if self.recognizer is None:
            return CommandResult.failure(
                Status.MISSING_PREREQUISITE, "Model doesn't exist. Please load or create a model."
            )

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self.recognizer.save(path)
            self.registry.save(sidecar_path(path))
        except Exception as e:
            return _library_failure(e)

        return CommandResult.success(f"✅ Model saved to {path}")
