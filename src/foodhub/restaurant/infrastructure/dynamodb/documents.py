from __future__ import annotations

from typing import Any, Mapping

from foodhub.restaurant.domain.entities import Restaurant, rehydrate_restaurant
from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import RestaurantId


def _parse_flag(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise DomainValidationError(f"Restaurant isActive must be a boolean, got {raw!r}")
    return raw


def restaurant_to_document(restaurant: Restaurant) -> dict[str, Any]:
    return {
        "id": str(restaurant.restaurant_id),
        "name": restaurant.name.value,
        "city": restaurant.city,
        "isActive": restaurant.is_active,
    }


def restaurant_from_document(document: Mapping[str, Any]) -> Restaurant:
    return rehydrate_restaurant(
        restaurant_id=RestaurantId(document["id"]),
        name=document["name"],
        city=document["city"],
        is_active=_parse_flag(document["isActive"]),
    )
