"""Result types returned by shell command handlers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Status(Enum):
    OK = "ok"
    USAGE = "usage"
    MISSING_PATH = "missing_path"
    MISSING_PREREQUISITE = "missing_prerequisite"
    LIBRARY_ERROR = "library_error"


@dataclass
class CommandResult:
    """Outcome of one command: a status, a console message and optional detail."""

    status: Status
    message: str = ""
    detail: Optional[str] = None  # traceback for library errors

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def success(cls, message: str = "") -> "CommandResult":
        return cls(Status.OK, message)

    @classmethod
    def failure(cls, status: Status, message: str, detail: Optional[str] = None) -> "CommandResult":
        return cls(status, message, detail)
