from __future__ import annotations

import logging

from foodhub.restaurant.application.dto.requests import UpdateRestaurantRequest
from foodhub.restaurant.application.dto.responses import RestaurantResponse
from foodhub.restaurant.application.mappers.restaurant_mapper import to_restaurant_response
from foodhub.restaurant.application.metrics.restaurant_lifecycle import (
    record_restaurant_activation,
)
from foodhub.restaurant.application.ports.repositories import RestaurantRepository
from foodhub.restaurant.domain.entities import Restaurant
from foodhub.shared.application.errors import NotFoundError
from foodhub.shared.domain.ids import RestaurantId

logger = logging.getLogger(__name__)


class RestaurantNotFoundError(NotFoundError):
    pass


def _load(repository: RestaurantRepository, restaurant_id: RestaurantId) -> Restaurant:
    restaurant = repository.get_by_id(restaurant_id)
    if restaurant is None:
        raise RestaurantNotFoundError(f"Restaurant with ID '{restaurant_id}' not found.")
    return restaurant


class UpdateRestaurantDetails:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(
        self,
        restaurant_id: RestaurantId,
        request_dto: UpdateRestaurantRequest,
    ) -> RestaurantResponse:
        restaurant = _load(self._restaurant_repository, restaurant_id)
        updated = restaurant
        if request_dto.name is not None:
            updated = updated.update_name(request_dto.name)
        if request_dto.city is not None:
            updated = updated.update_city(request_dto.city)

        if updated != restaurant:
            self._restaurant_repository.update(updated)
            logger.info("restaurant_updated", extra={"restaurant_id": restaurant_id})
        return to_restaurant_response(updated)


class SetRestaurantActive:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, restaurant_id: RestaurantId, is_active: bool) -> RestaurantResponse:
        restaurant = _load(self._restaurant_repository, restaurant_id)
        updated = restaurant.activate() if is_active else restaurant.deactivate()

        if updated is not restaurant:
            self._restaurant_repository.update(updated)
            record_restaurant_activation(is_active)
            logger.info(
                "restaurant_activated" if is_active else "restaurant_deactivated",
                extra={"restaurant_id": restaurant_id},
            )
        return to_restaurant_response(updated)
