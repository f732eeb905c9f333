"""Accumulating diagnostic buffer for a single render.

Warnings raised by leaf or layout code are recorded here and later
rendered as ``<div class="error">`` regions.  Nothing recorded is ever
dropped: the regions are appended to the page, or they open the body of
the diagnostic document when the render fails.
"""

from __future__ import annotations

import html
import warnings
from collections.abc import Iterator
from contextlib import contextmanager

from kida.template import Markup


class Diagnostics:
    """Error regions collected during one request."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[str] = []

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def add(self, message: str) -> None:
        """Record a plain-text message (escaped on render)."""
        self._entries.append(message)

    def add_warning(self, warning: warnings.WarningMessage) -> None:
        self.add(
            f"Warning: {warning.category.__name__} - {warning.message} "
            f"in {warning.filename} on line {warning.lineno}"
        )

    @contextmanager
    def capture_warnings(self) -> Iterator[None]:
        """Record every warning raised inside the block."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                yield
            finally:
                for warning in caught:
                    self.add_warning(warning)

    def render(self) -> Markup:
        """All entries as escaped ``<div class="error">`` regions."""
        return Markup(
            "".join(f"<div class='error'>{html.escape(entry)}</div>" for entry in self._entries)
        )
