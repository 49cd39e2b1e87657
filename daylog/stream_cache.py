"""Single-slot cache of the append handle for the current log file."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional, TextIO, Tuple, Union

from .errors import StreamOpenError

logger = logging.getLogger(__name__)


class LogStreamCache:
    """Hold at most one open append-mode handle, keyed by its file path.

    Requesting the cached path hands back the same handle without touching
    the filesystem. Requesting another path opens a new handle and replaces
    the slot; the previous handle is dropped, not closed, so a task still
    writing through it can finish.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.path: Optional[Path] = None
        self.stream: Optional[TextIO] = None

    def _open(self, path: Path) -> TextIO:
        return open(path, "a", encoding=self.encoding)

    async def get_stream(
        self, path: Union[str, Path]
    ) -> Tuple[Optional[StreamOpenError], Optional[TextIO]]:
        """Return ``(error, stream)`` for *path*.

        Exactly one element is ``None``. The error is not logged here; the
        writer decides whether it is fatal.
        """

        target = Path(path)
        if self.stream is not None and self.path == target:
            return None, self.stream

        try:
            stream = await asyncio.to_thread(self._open, target)
        except OSError as exc:
            return StreamOpenError(target, exc), None

        self.path = target
        self.stream = stream
        logger.debug("Opened log stream %s", target)
        return None, stream

    def invalidate(self, stream: Optional[TextIO] = None) -> None:
        """Empty the slot, but only if it still holds *stream* (when given)."""

        if stream is None or stream is self.stream:
            self.path = None
            self.stream = None

    def close(self) -> None:
        """Close the cached handle and empty the slot."""

        stream = self.stream
        self.invalidate()
        if stream is not None and not stream.closed:
            stream.close()


__all__ = ["LogStreamCache"]
