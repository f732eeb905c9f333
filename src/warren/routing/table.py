"""One refresh of the route table: inventory, audit result, and resolver.

Built from a fresh scan for every request by default.  With
``AppConfig(rescan_routes=False)`` the app builds it once at freeze and
reuses it; the audit still runs exactly once per refresh.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from warren.config import AppConfig
from warren.routing.audit import RouteConflict, audit
from warren.routing.inventory import RouteInventory, scan
from warren.routing.resolver import RouteResolver


@dataclass(frozen=True, slots=True)
class RouteTable:
    inventory: RouteInventory
    conflicts: tuple[RouteConflict, ...]
    resolver: RouteResolver

    @property
    def root(self) -> Path:
        return self.inventory.root

    @classmethod
    def from_inventory(cls, inventory: RouteInventory, config: AppConfig) -> RouteTable:
        roles = config.roles
        return cls(
            inventory=inventory,
            conflicts=tuple(audit(inventory, roles)),
            resolver=RouteResolver(inventory, roles, private_marker=config.private_marker),
        )


def load_route_table(config: AppConfig) -> RouteTable:
    """Scan ``config.app_dir`` and audit the result."""
    inventory = scan(config.app_dir, config.inventory_cache_path)
    return RouteTable.from_inventory(inventory, config)
