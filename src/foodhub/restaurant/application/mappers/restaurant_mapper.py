from __future__ import annotations

from foodhub.restaurant.application.dto.responses import RestaurantResponse
from foodhub.restaurant.domain.entities import Restaurant


def to_restaurant_response(restaurant: Restaurant) -> RestaurantResponse:
    return RestaurantResponse(
        id=str(restaurant.restaurant_id),
        name=restaurant.name.value,
        city=restaurant.city,
        isActive=restaurant.is_active,
    )
