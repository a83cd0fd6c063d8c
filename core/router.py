"""Path -> module mapping for the navigation shell."""
from typing import Dict, Optional, Protocol

from core.constants import (
    MENU_ANALYTICS,
    MENU_CUSTOMERS,
    MENU_DASHBOARD,
    MENU_INVENTORY,
    MENU_ORDERS,
    MENU_POS,
    MENU_SETTINGS,
    MENU_SUPPLIERS,
)

DASHBOARD = "dashboard"
INVENTORY = "inventory"
POS = "pos"
ANALYTICS = "analytics"
CUSTOMERS = "customers"
ORDERS = "orders"
SUPPLIERS = "suppliers"
SETTINGS = "settings"

ROUTES: Dict[str, str] = {
    "/": DASHBOARD,
    "/inventory": INVENTORY,
    "/pos": POS,
    "/analytics": ANALYTICS,
    "/customers": CUSTOMERS,
    "/orders": ORDERS,
    "/suppliers": SUPPLIERS,
    "/settings": SETTINGS,
}

MENU_LABELS: Dict[str, str] = {
    DASHBOARD: MENU_DASHBOARD,
    INVENTORY: MENU_INVENTORY,
    POS: MENU_POS,
    ANALYTICS: MENU_ANALYTICS,
    CUSTOMERS: MENU_CUSTOMERS,
    ORDERS: MENU_ORDERS,
    SUPPLIERS: MENU_SUPPLIERS,
    SETTINGS: MENU_SETTINGS,
}


class Router(Protocol):
    def resolve(self, path: str) -> Optional[str]:
        ...


def normalize_path(path: Optional[str]) -> str:
    """Lower-case, leading slash, no trailing slash, no query string."""
    path = (path or "/").split("?", 1)[0].split("#", 1)[0].strip().lower()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


class PathRouter:
    """Resolve browser paths to module ids; unknown paths resolve to None."""

    def __init__(self, routes: Dict[str, str] = None):
        self.routes = dict(ROUTES if routes is None else routes)
        self._paths = {module: path for path, module in self.routes.items()}

    def resolve(self, path: str) -> Optional[str]:
        return self.routes.get(normalize_path(path))

    def path_for(self, module_id: str) -> str:
        return self._paths.get(module_id, "/")
