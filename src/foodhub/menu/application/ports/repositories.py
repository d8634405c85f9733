from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from foodhub.menu.domain.entities import Menu
from foodhub.shared.domain.ids import MenuId, RestaurantId


@dataclass(frozen=True)
class VersionedMenu:
    menu: Menu
    etag: str


class MenuRepository(Protocol):
    def get_by_id(
        self,
        menu_id: MenuId,
        restaurant_id: RestaurantId | None = None,
    ) -> Menu | None: ...

    def get_by_restaurant_id(self, restaurant_id: RestaurantId) -> Menu | None: ...

    def add(self, menu: Menu) -> None: ...

    def update(self, menu: Menu, expected_etag: str | None = None) -> None: ...

    def get_versioned_by_id(self, menu_id: MenuId) -> VersionedMenu | None: ...


# Implemented by the restaurant module and wired in at composition time.
class RestaurantReadRepository(Protocol):
    def exists(self, restaurant_id: RestaurantId) -> bool: ...
