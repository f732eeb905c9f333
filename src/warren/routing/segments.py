"""Path tokenizer — the typed segment model shared by every matcher.

File-table paths (``(shop)/products/[id]/route.py``) and URL paths
(``/products/42``) are both reduced to a tuple of :class:`Segment` values.
The segment kind is derived from the text once, here, so matchers never
re-parse bracket or parenthesis syntax.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

_GROUP_RE = re.compile(r"^\((.+)\)$")
_CATCH_ALL_RE = re.compile(r"^\[\.\.\.([^\]]+)\]$")
_DYNAMIC_RE = re.compile(r"^\[([^\]]+)\]$")


class SegmentKind(Enum):
    LITERAL = "literal"
    GROUP = "group"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-delimited atom of a path.

    Attributes:
        text: The segment exactly as written.
        kind: Structural kind derived from *text*.
        name: Capture name for ``[name]`` / ``[...name]``, folder name for
            ``(name)``, the text itself for literals.
    """

    text: str
    kind: SegmentKind
    name: str

    @classmethod
    def parse(cls, text: str) -> Segment:
        if match := _GROUP_RE.match(text):
            return cls(text, SegmentKind.GROUP, match.group(1))
        if match := _CATCH_ALL_RE.match(text):
            return cls(text, SegmentKind.CATCH_ALL, match.group(1))
        if match := _DYNAMIC_RE.match(text):
            return cls(text, SegmentKind.DYNAMIC, match.group(1))
        return cls(text, SegmentKind.LITERAL, text)

    @property
    def is_group(self) -> bool:
        return self.kind is SegmentKind.GROUP

    @property
    def is_dynamic(self) -> bool:
        return self.kind is SegmentKind.DYNAMIC

    @property
    def is_catch_all(self) -> bool:
        return self.kind is SegmentKind.CATCH_ALL

    def __str__(self) -> str:
        return self.text


def normalize(path: str | Sequence[Segment]) -> tuple[Segment, ...]:
    """Canonicalize a path into segments.

    Backslashes become ``/``, leading ``./`` and ``/`` are stripped, and
    empty or ``.`` segments from repeated separators are dropped.  Bracket
    and parenthesis syntax is left intact.

    Accepts the output of a previous call, so
    ``normalize(normalize(p)) == normalize(p)``.
    """
    if not isinstance(path, str):
        path = join(path)
    parts = path.replace("\\", "/").split("/")
    return tuple(Segment.parse(part) for part in parts if part and part != ".")


def join(segments: Iterable[Segment | str]) -> str:
    """Render segments back into a ``/``-separated relative path."""
    return "/".join(str(segment) for segment in segments)


def strip_groups(segments: Iterable[Segment]) -> tuple[Segment, ...]:
    """Drop route-group folders, which never appear in URLs."""
    return tuple(segment for segment in segments if not segment.is_group)


def texts(segments: Iterable[Segment]) -> tuple[str, ...]:
    """Plain segment texts, for comparing paths as values."""
    return tuple(segment.text for segment in segments)
