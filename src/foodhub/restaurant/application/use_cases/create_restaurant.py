from __future__ import annotations

import logging

from foodhub.restaurant.application.dto.requests import CreateRestaurantRequest
from foodhub.restaurant.application.dto.responses import CreatedRestaurantResponse
from foodhub.restaurant.application.metrics.restaurant_lifecycle import record_restaurant_created
from foodhub.restaurant.application.ports.repositories import RestaurantRepository
from foodhub.restaurant.domain.entities import create_restaurant

logger = logging.getLogger(__name__)


class CreateRestaurant:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, request_dto: CreateRestaurantRequest) -> CreatedRestaurantResponse:
        restaurant = create_restaurant(name=request_dto.name, city=request_dto.city)
        self._restaurant_repository.add(restaurant)
        record_restaurant_created()
        logger.info("restaurant_created", extra={"restaurant_id": restaurant.restaurant_id})
        return CreatedRestaurantResponse(id=str(restaurant.restaurant_id))
