"""Line formatting and tagged-template flattening."""

from __future__ import annotations

import re
from datetime import datetime
from itertools import zip_longest
from typing import Any, Iterable, List, Sequence

from utils.datetime_formatting import format_clock

# U+00A0 survives the space collapsing below, so the tag column keeps its width.
TAG_PAD = "\u00a0"
DEFAULT_TAG_WIDTH = 11

_SPACE_RUN = re.compile(r" {2,}")
_MISSING = object()


def bracket_tag(tag: str) -> str:
    return f"[{tag}]" if tag else ""


def pad_tag(tag: str, width: int = DEFAULT_TAG_WIDTH) -> str:
    """Right-pad an already bracketed *tag* to *width* characters."""

    return tag.ljust(width, TAG_PAD)


def flatten_template(fragments: Sequence[str], values: Sequence[Any]) -> List[Any]:
    """Interleave literal *fragments* with *values*.

    Produces ``fragments[0], values[0], fragments[1], ...``. Slots missing
    because one sequence is shorter are skipped. Fragments are stripped and
    dropped when blank, since the joined message already separates parts
    with a space.

    >>> flatten_template(["Value is ", ""], [42])
    ['Value is', 42]
    """

    flat: List[Any] = []
    for fragment, value in zip_longest(fragments, values, fillvalue=_MISSING):
        if fragment is not _MISSING:
            text = str(fragment).strip()
            if text:
                flat.append(text)
        if value is not _MISSING:
            flat.append(value)
    return flat


def join_message(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def collapse_spaces(text: str) -> str:
    return _SPACE_RUN.sub(" ", text)


def format_line(when: datetime, padded_tag: str, values: Iterable[Any]) -> str:
    """Return ``HH:MM:SS <tag> <message>\\n`` with space runs collapsed."""

    line = f"{format_clock(when)} {padded_tag} {join_message(values)}\n"
    return collapse_spaces(line)


__all__ = [
    "TAG_PAD",
    "DEFAULT_TAG_WIDTH",
    "bracket_tag",
    "pad_tag",
    "flatten_template",
    "join_message",
    "collapse_spaces",
    "format_line",
]
