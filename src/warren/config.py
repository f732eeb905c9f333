"""Application configuration.

One frozen dataclass carries every setting; it cannot change once the
app is built.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RouteRoles:
    """File names that give a file its role in the route table."""

    entry_point: str = "route.py"
    document: str = "index.html"
    layout: str = "layout.html"
    not_found: str = "not-found.html"
    metadata: str = "metadata.json"

    @property
    def routable(self) -> frozenset[str]:
        """Names that can answer a URL (entry point or default document)."""
        return frozenset({self.entry_point, self.document})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(app_dir="src/app", debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Route table
    app_dir: str | Path = "app"
    # JSON listing of discovered files; relative paths sit beside app_dir, None disables
    inventory_cache: str | Path | None = ".warren-files.json"
    rescan_routes: bool = True  # Rebuild the inventory on every request

    # File roles
    entry_point_name: str = "route.py"
    document_name: str = "index.html"
    layout_name: str = "layout.html"
    not_found_name: str = "not-found.html"
    metadata_name: str = "metadata.json"

    # Segments starting with this marker are only reachable same-origin
    private_marker: str = "_"

    # URLs
    base_path: str = ""  # Prefix stripped from request paths before resolving
    base_url: str = "/"  # Exposed to templates for building asset links

    # Templates
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    @property
    def inventory_cache_path(self) -> Path | None:
        """Where each scan writes its listing, outside the scanned tree."""
        if self.inventory_cache is None:
            return None
        return Path(self.app_dir).parent / self.inventory_cache

    @property
    def roles(self) -> RouteRoles:
        """The file-role names as a single value for the routing layer."""
        return RouteRoles(
            entry_point=self.entry_point_name,
            document=self.document_name,
            layout=self.layout_name,
            not_found=self.not_found_name,
            metadata=self.metadata_name,
        )
