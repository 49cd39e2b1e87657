"""Date-bucketed append-only file logging."""

from .errors import (
    DirectoryCreateError,
    FileCreateError,
    LogError,
    RetryExhaustedError,
    StreamOpenError,
    StreamWriteError,
)
from .formatting import flatten_template
from .logger import DailyLogger, create_logger
from .paths import LogPath, resolve_log_path
from .stream_cache import LogStreamCache

__all__ = [
    "create_logger",
    "DailyLogger",
    "flatten_template",
    "LogStreamCache",
    "LogPath",
    "resolve_log_path",
    "LogError",
    "DirectoryCreateError",
    "FileCreateError",
    "StreamOpenError",
    "RetryExhaustedError",
    "StreamWriteError",
]
