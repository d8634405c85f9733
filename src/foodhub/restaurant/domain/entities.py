from __future__ import annotations

from dataclasses import dataclass, replace

from foodhub.restaurant.domain.value_objects import RestaurantName
from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import RestaurantId, is_blank, new_id


def _clean_city(city: str) -> str:
    if is_blank(city):
        raise DomainValidationError("City cannot be empty.")
    return city.strip()


@dataclass(frozen=True)
class Restaurant:
    restaurant_id: RestaurantId
    name: RestaurantName
    city: str
    is_active: bool

    def __post_init__(self) -> None:
        if is_blank(self.restaurant_id):
            raise DomainValidationError("Restaurant id cannot be empty.")
        object.__setattr__(self, "city", _clean_city(self.city))

    def activate(self) -> Restaurant:
        if self.is_active:
            return self
        return replace(self, is_active=True)

    def deactivate(self) -> Restaurant:
        if not self.is_active:
            return self
        return replace(self, is_active=False)

    def update_name(self, name: str) -> Restaurant:
        return replace(self, name=RestaurantName(name))

    def update_city(self, city: str) -> Restaurant:
        return replace(self, city=_clean_city(city))


def create_restaurant(name: str, city: str) -> Restaurant:
    return Restaurant(
        restaurant_id=RestaurantId(new_id()),
        name=RestaurantName(name),
        city=city,
        is_active=True,
    )


def rehydrate_restaurant(
    restaurant_id: RestaurantId,
    name: str,
    city: str,
    is_active: bool,
) -> Restaurant:
    return Restaurant(
        restaurant_id=restaurant_id,
        name=RestaurantName(name),
        city=city,
        is_active=is_active,
    )
