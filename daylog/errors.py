"""Error types describing why a single log write was dropped."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class LogError(RuntimeError):
    """Base class for failures absorbed by the logger.

    ``prefix`` is the marker printed in front of the console diagnostic and
    ``cause`` keeps the underlying :class:`OSError` for inspection.
    """

    prefix = "ERROR WRITING TO FILE"

    def __init__(
        self,
        path: Union[str, Path],
        cause: Optional[BaseException] = None,
    ) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self.prefix} {self.path}{detail}")


class DirectoryCreateError(LogError):
    prefix = "ERROR CREATING LOG DIRECTORY"


class FileCreateError(LogError):
    prefix = "ERROR CREATING LOG FILE"


class StreamOpenError(LogError):
    prefix = "ERROR WRITING TO FILE"

    @property
    def missing(self) -> bool:
        """Return ``True`` when the open failed because a path part is absent."""

        return isinstance(self.cause, FileNotFoundError)


class RetryExhaustedError(LogError):
    prefix = "ERROR WRITING TO FILE AGAIN"


class StreamWriteError(LogError):
    prefix = "ERROR WRITING TO FILE"


__all__ = [
    "LogError",
    "DirectoryCreateError",
    "FileCreateError",
    "StreamOpenError",
    "RetryExhaustedError",
    "StreamWriteError",
]
