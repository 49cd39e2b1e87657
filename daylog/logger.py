"""Logger factory: dated append-only log files with a cached write handle.

Example::

    log = await create_logger("robot", prefix="robot")
    await log("Starting cycle", 3)
    await log.tagged(["Value is ", ""], 42)

Lines land in ``<root>/logs/<YYYY>_<MON>/<day>_<prefix>``.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, TextIO

from config.config import Settings, settings as default_settings
from utils.datetime_formatting import now_local

from .errors import LogError, RetryExhaustedError, StreamWriteError
from .formatting import bracket_tag, flatten_template, format_line, pad_tag
from .logging_setup import get_diagnostics_logger
from .paths import LogPath, create_log_file, ensure_log_root, resolve_log_path
from .stream_cache import LogStreamCache

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class DailyLogger:
    """Callable that appends formatted lines to today's log file.

    ``await logger(...)`` never raises for filesystem problems: they are
    reported on the ``daylog`` diagnostics logger and the line is dropped.
    Use :meth:`write` to get the error back instead.
    """

    def __init__(
        self,
        tag: str = "",
        prefix: str = "",
        *,
        root: Path,
        settings: Optional[Settings] = None,
        cache: Optional[LogStreamCache] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.settings = settings or default_settings
        self.tag = bracket_tag(tag)
        self.prefix = prefix
        self.root = Path(root)
        self.cache = cache or LogStreamCache(encoding=self.settings.log_encoding)
        self.clock = clock or now_local
        self._padded_tag = pad_tag(self.tag, self.settings.tag_width)

    async def __call__(self, *values: Any) -> None:
        await self.write(*values)

    async def tagged(self, fragments: Sequence[str], *values: Any) -> None:
        """Log a template call given its literal fragments and its values."""

        await self.write(*flatten_template(fragments, values))

    def resolve(self, when: Optional[datetime] = None) -> LogPath:
        return resolve_log_path(
            when or self.clock(),
            self.prefix,
            root=self.root,
            dir_name=self.settings.log_dir_name,
        )

    async def write(self, *values: Any) -> Optional[LogError]:
        """Append one line; return ``None`` or the error that dropped it."""

        when = self.clock()
        log_path = self.resolve(when)
        logger.debug("Writing to %s", log_path.path)

        await ensure_log_root(log_path.root)

        error, stream = await self.cache.get_stream(log_path.path)
        if error is not None:
            if not error.missing:
                logger.error("%s", error)
                return error
            file_error = await create_log_file(log_path)
            if file_error is not None:
                return file_error
            error, stream = await self.cache.get_stream(log_path.path)
            if error is not None:
                failure = RetryExhaustedError(log_path.path, error.cause)
                logger.error("%s", failure)
                return failure

        line = format_line(when, self._padded_tag, values)
        try:
            await asyncio.to_thread(_append, stream, line)
        except (OSError, ValueError) as exc:
            # ValueError: the handle was closed underneath us.
            self.cache.invalidate(stream)
            failure = StreamWriteError(log_path.path, exc)
            logger.error("%s", failure)
            return failure

        if self.settings.mirror_stdout:
            sys.stdout.write(line)
        return None

    def close(self) -> None:
        self.cache.close()


def _append(stream: TextIO, line: str) -> None:
    stream.write(line)
    stream.flush()


async def create_logger(
    tag: str = "",
    prefix: str = "",
    *,
    settings: Optional[Settings] = None,
    cache: Optional[LogStreamCache] = None,
    clock: Optional[Clock] = None,
) -> DailyLogger:
    """Return a :class:`DailyLogger` writing under ``<log_root>/logs``.

    Parameters
    ----------
    tag:
        Optional label; written as ``[tag]`` in front of every line.
    prefix:
        Optional file suffix, giving ``<day>_<prefix>`` instead of ``<day>``.
    settings:
        Overrides the module-level :data:`config.config.settings`.
    cache:
        Stream cache to share between loggers; a private one by default.
    clock:
        Zero-argument callable returning the current ``datetime``.
    """

    active = settings or default_settings
    get_diagnostics_logger(active.diagnostics_level)
    root = await asyncio.to_thread(Path(active.log_root).resolve)
    return DailyLogger(
        tag,
        prefix,
        root=root,
        settings=active,
        cache=cache,
        clock=clock,
    )


__all__ = ["Clock", "DailyLogger", "create_logger"]
