"""Core modules for the face recognition shell."""

from .recognizer import FaceRecognizer, RecognizerKind, create_recognizer
from .label_registry import LabelRegistry
from .batch import TrainingBatch
from .results import CommandResult, Status
from .session import Session
from .shell import CommandDispatcher

__all__ = [
    "FaceRecognizer",
    "RecognizerKind",
    "create_recognizer",
    "LabelRegistry",
    "TrainingBatch",
    "CommandResult",
    "Status",
    "Session",
    "CommandDispatcher",
]
