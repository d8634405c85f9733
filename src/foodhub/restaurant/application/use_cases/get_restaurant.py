from __future__ import annotations

from foodhub.restaurant.application.dto.responses import RestaurantListResponse, RestaurantResponse
from foodhub.restaurant.application.mappers.restaurant_mapper import to_restaurant_response
from foodhub.restaurant.application.ports.repositories import RestaurantRepository
from foodhub.shared.domain.ids import RestaurantId


class GetRestaurant:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, restaurant_id: RestaurantId) -> RestaurantResponse | None:
        restaurant = self._restaurant_repository.get_by_id(restaurant_id)
        if restaurant is None:
            return None
        return to_restaurant_response(restaurant)


class ListRestaurants:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self) -> RestaurantListResponse:
        restaurants = self._restaurant_repository.get_all()
        return RestaurantListResponse(
            restaurants=[to_restaurant_response(restaurant) for restaurant in restaurants]
        )
