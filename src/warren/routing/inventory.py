"""Route inventory — the filesystem snapshot every resolution runs against.

Walks the app directory and records every file as a :class:`RouteEntry`.
The snapshot is an explicit value handed to the resolver and the auditor;
nothing here is global.  A JSON listing of the scan is written next to it
for inspection, but the in-memory snapshot is always authoritative.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from warren.routing.segments import Segment, SegmentKind, join, normalize, strip_groups

logger = logging.getLogger("warren.routing")

# Directories never part of the route table
_SKIP_DIRS = frozenset({"__pycache__"})


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One physical file discovered under the app directory.

    Attributes:
        raw: Path relative to the app root, as discovered (OS separators).
        path: Normalized ``/``-separated relative path.
        segments: Tokenized *path*, filename included.
    """

    raw: str
    path: str
    segments: tuple[Segment, ...]

    @classmethod
    def from_raw(cls, raw: str) -> RouteEntry:
        segments = normalize(raw)
        return cls(raw=raw, path=join(segments), segments=segments)

    @property
    def filename(self) -> str:
        return self.segments[-1].text if self.segments else ""

    @property
    def directory(self) -> tuple[Segment, ...]:
        """Physical directory segments, group folders included."""
        return self.segments[:-1]

    @property
    def logical_segments(self) -> tuple[Segment, ...]:
        """Segments with group folders removed, filename included."""
        return strip_groups(self.segments)

    @property
    def logical_path(self) -> str:
        return join(self.logical_segments)

    @property
    def dynamic_count(self) -> int:
        return sum(1 for s in self.segments if s.kind is SegmentKind.DYNAMIC)

    @property
    def catch_all_count(self) -> int:
        return sum(1 for s in self.segments if s.kind is SegmentKind.CATCH_ALL)

    @property
    def has_catch_all(self) -> bool:
        return self.catch_all_count > 0


@dataclass(frozen=True, slots=True)
class RouteInventory:
    """Immutable snapshot of the app directory.

    Entries are sorted by normalized path so that every platform sees the
    same order regardless of directory enumeration.
    """

    root: Path
    entries: tuple[RouteEntry, ...] = ()

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return self.get(path) is not None if isinstance(path, str) else False

    def get(self, path: str) -> RouteEntry | None:
        """Return the entry at a physical path (normalized), or ``None``."""
        wanted = join(normalize(path))
        for entry in self.entries:
            if entry.path == wanted:
                return entry
        return None

    @classmethod
    def from_paths(cls, root: str | Path, paths: list[str]) -> RouteInventory:
        """Build a snapshot from relative paths without touching the disk."""
        entries = sorted((RouteEntry.from_raw(p) for p in paths), key=lambda e: e.path)
        return cls(root=Path(root), entries=tuple(entries))


def scan(root: str | Path, cache_path: str | Path | None = None) -> RouteInventory:
    """Recursively list every file under *root*.

    An unreadable or missing root yields an empty inventory, which the
    resolver turns into a not-found outcome.

    Args:
        root: The app directory.
        cache_path: Where to write the JSON listing, or ``None`` to skip.

    Returns:
        A fresh :class:`RouteInventory`.
    """
    root_path = Path(root)
    raw_paths: list[str] = []

    if not root_path.is_dir():
        logger.debug("App directory %s does not exist; inventory is empty", root_path)
    else:
        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_log_walk_error):
            dirnames[:] = [d for d in dirnames if d not in _SKIP_DIRS and not d.startswith(".")]
            for filename in filenames:
                if filename.endswith(".pyc"):
                    continue
                full = Path(dirpath) / filename
                raw_paths.append(str(full.relative_to(root_path)))

    inventory = RouteInventory.from_paths(root_path, raw_paths)
    if cache_path is not None:
        write_cache(cache_path, [entry.raw for entry in inventory])
    return inventory


def write_cache(cache_path: str | Path, paths: list[str]) -> bool:
    """Persist the listing atomically (temp file + rename).

    Best-effort: failures are logged and reported through the return
    value, never raised.  Concurrent writers race harmlessly; the last
    rename wins and readers never observe a half-written file.
    """
    target = Path(cache_path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(paths, fh, indent=4)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        logger.warning("Could not write route inventory cache %s: %s", target, exc)
        return False
    return True


def read_cache(cache_path: str | Path) -> list[str] | None:
    """Load a previously written listing, or ``None`` if it is unusable."""
    try:
        data = json.loads(Path(cache_path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("Route inventory cache %s unreadable: %s", cache_path, exc)
        return None
    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        return None
    return data


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Skipping unreadable path during route scan: %s", exc)
