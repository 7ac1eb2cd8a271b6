"""Error kinds raised by the store and the registry operations.

Every error carries a human-readable ``message`` naming the failing
resource, plus the underlying ``cause`` when there is one.  The CLI
prints both and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class NovaError(Exception):
    """Base class for all nova errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class NotFoundError(NovaError):
    """No record matches the given filename or shorthand."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"Unknown config {kind}: {key}")
        self.kind = kind
        self.key = key


class ConflictError(NovaError):
    """An insert would duplicate an existing filename or shorthand."""

    def __init__(
        self, field: str, value: str, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(f"{field.capitalize()} already exists: {value}", cause)
        self.field = field
        self.value = value


class FileIOError(NovaError):
    """Reading, writing or removing a file failed."""

    def __init__(self, stage: str, path: Path, cause: BaseException) -> None:
        super().__init__(f"Unable to {stage}: {path}", cause)
        self.stage = stage
        self.path = path


class EditorError(NovaError):
    """The external editor is misconfigured, failed to start or exited abnormally."""

    def __init__(
        self,
        stage: str,
        command: list[str],
        cause: Optional[BaseException] = None,
        returncode: Optional[int] = None,
    ) -> None:
        if returncode is not None:
            message = f"Editor exited with status {returncode}: {command[0]}"
        elif stage == "resolve editor":
            message = f"Invalid editor command: {command[0]}"
        elif stage == "spawn editor":
            message = f"Failed to run editor: {command[0]}"
        else:
            message = f"Editor did not exit cleanly: {command[0]}"
        super().__init__(message, cause)
        self.stage = stage
        self.command = command
        self.returncode = returncode


class PersistenceError(NovaError):
    """The record store could not be read or written."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"Unable to {operation}", cause)
        self.operation = operation
