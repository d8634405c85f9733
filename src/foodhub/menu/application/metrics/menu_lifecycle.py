from __future__ import annotations

from prometheus_client import Counter

MENUS_CREATED_TOTAL = Counter(
    "foodhub_menus_created_total",
    "Total number of menus created.",
)

MENU_ITEMS_CHANGED_TOTAL = Counter(
    "foodhub_menu_items_changed_total",
    "Total number of menu item changes by kind.",
    ["change"],
)

MENU_CREATE_REJECTED_TOTAL = Counter(
    "foodhub_menu_create_rejected_total",
    "Total number of menu creations rejected by reason.",
    ["reason"],
)


def record_menu_created(item_count: int) -> None:
    MENUS_CREATED_TOTAL.inc()
    if item_count:
        MENU_ITEMS_CHANGED_TOTAL.labels(change="added").inc(item_count)


def record_menu_create_rejected(reason: str) -> None:
    MENU_CREATE_REJECTED_TOTAL.labels(reason=reason).inc()


def record_menu_item_added() -> None:
    MENU_ITEMS_CHANGED_TOTAL.labels(change="added").inc()


def record_menu_item_updated() -> None:
    MENU_ITEMS_CHANGED_TOTAL.labels(change="updated").inc()


def record_menu_item_availability_changed() -> None:
    MENU_ITEMS_CHANGED_TOTAL.labels(change="availability").inc()
