from __future__ import annotations

from typing import Protocol

from foodhub.restaurant.domain.entities import Restaurant
from foodhub.shared.domain.ids import RestaurantId


class RestaurantRepository(Protocol):
    def add(self, restaurant: Restaurant) -> None: ...

    def get_by_id(self, restaurant_id: RestaurantId) -> Restaurant | None: ...

    def get_all(self) -> list[Restaurant]: ...

    def update(self, restaurant: Restaurant) -> None: ...
