"""Resolution and lazy creation of the dated log file locations."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from utils.datetime_formatting import month_abbreviation

from .errors import DirectoryCreateError, FileCreateError

logger = logging.getLogger(__name__)

DEFAULT_DIR_NAME = "logs"


@dataclass(frozen=True)
class LogPath:
    """Target of a single write: ``<root>/<dir_name>/<YYYY>_<MON>/<file_name>``."""

    root: Path
    directory: Path
    file_name: str

    @property
    def path(self) -> Path:
        return self.directory / self.file_name


def resolve_log_path(
    when: datetime,
    prefix: str = "",
    *,
    root: Union[str, Path],
    dir_name: str = DEFAULT_DIR_NAME,
) -> LogPath:
    """Return the :class:`LogPath` that receives lines written at *when*.

    The month directory is ``<YYYY>_<MON>``; the file is the unpadded day of
    month, suffixed with ``_<prefix>`` when a prefix is given.
    """

    log_root = Path(root) / dir_name
    directory = log_root / f"{when.year}_{month_abbreviation(when)}"
    file_name = f"{when.day}_{prefix}" if prefix else str(when.day)
    return LogPath(root=log_root, directory=directory, file_name=file_name)


async def ensure_directory(path: Union[str, Path]) -> bool:
    """Create *path*; an existing directory counts as success.

    Other failures are reported and ``False`` is returned, the caller carries
    on regardless.
    """

    target = Path(path)
    try:
        await asyncio.to_thread(target.mkdir)
    except FileExistsError:
        return True
    except OSError as exc:
        logger.error("%s", DirectoryCreateError(target, exc))
        return False
    return True


async def ensure_log_root(root: Union[str, Path]) -> bool:
    """Create the top-level ``logs`` directory when it does not exist yet."""

    target = Path(root)
    if await asyncio.to_thread(target.exists):
        return True
    return await ensure_directory(target)


async def create_log_file(log_path: LogPath) -> Optional[FileCreateError]:
    """Create the month directory and an empty day file for *log_path*.

    A directory failure is non-fatal. A file failure is reported and
    returned; ``None`` means the file is in place.
    """

    await ensure_directory(log_path.directory)
    try:
        await asyncio.to_thread(log_path.path.touch)
    except OSError as exc:
        failure = FileCreateError(log_path.path, exc)
        logger.error("%s", failure)
        return failure
    return None


__all__ = [
    "DEFAULT_DIR_NAME",
    "LogPath",
    "resolve_log_path",
    "ensure_directory",
    "ensure_log_root",
    "create_log_file",
]
