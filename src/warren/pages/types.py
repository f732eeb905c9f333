"""Data models for layout composition.

Immutable frozen dataclasses built fresh for every request from the
resolved route's directory.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LayoutFile:
    """A layout template discovered along the resolved path.

    Attributes:
        template_name: Template name for kida (relative to the app root).
        depth: Nesting depth (0 = root).
        placeholder: The variable this layout must render its child
            into: ``content`` for the root, ``child_content`` below it.
    """

    template_name: str
    depth: int
    placeholder: str

    @property
    def is_root(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True, slots=True)
class LayoutChain:
    """Ordered sequence of layouts from root (outermost) to deepest.

    The root layout is always first.  If no directory below the app root
    has a layout, the chain is just the root.
    """

    layouts: tuple[LayoutFile, ...] = ()

    @property
    def root(self) -> LayoutFile | None:
        if self.layouts and self.layouts[0].is_root:
            return self.layouts[0]
        return None

    @property
    def nested(self) -> tuple[LayoutFile, ...]:
        """Every layout except the root, outermost first."""
        return tuple(layout for layout in self.layouts if not layout.is_root)

    def __len__(self) -> int:
        return len(self.layouts)
