from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from foodhub.restaurant.application.dto.requests import (
    CreateRestaurantRequest,
    UpdateRestaurantRequest,
)
from foodhub.restaurant.application.dto.responses import (
    CreatedRestaurantResponse,
    RestaurantListResponse,
    RestaurantResponse,
)
from foodhub.restaurant.application.use_cases.create_restaurant import CreateRestaurant
from foodhub.restaurant.application.use_cases.get_restaurant import (
    GetRestaurant,
    ListRestaurants,
)
from foodhub.restaurant.application.use_cases.update_restaurant import (
    SetRestaurantActive,
    UpdateRestaurantDetails,
)
from foodhub.restaurant.infrastructure.dynamodb.restaurant_repo import DynamoRestaurantRepository
from foodhub.shared.domain.ids import RestaurantId

router = APIRouter()


def _create_restaurant_use_case() -> CreateRestaurant:
    return CreateRestaurant(restaurant_repository=DynamoRestaurantRepository())


def _get_restaurant_use_case() -> GetRestaurant:
    return GetRestaurant(restaurant_repository=DynamoRestaurantRepository())


def _list_restaurants_use_case() -> ListRestaurants:
    return ListRestaurants(restaurant_repository=DynamoRestaurantRepository())


def _update_restaurant_use_case() -> UpdateRestaurantDetails:
    return UpdateRestaurantDetails(restaurant_repository=DynamoRestaurantRepository())


def _set_restaurant_active_use_case() -> SetRestaurantActive:
    return SetRestaurantActive(restaurant_repository=DynamoRestaurantRepository())


@router.post(
    "/v1/restaurants",
    response_model=CreatedRestaurantResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_restaurant(request_dto: CreateRestaurantRequest) -> CreatedRestaurantResponse:
    return _create_restaurant_use_case().execute(request_dto)


@router.get("/v1/restaurants", response_model=RestaurantListResponse)
def list_restaurants() -> RestaurantListResponse:
    return _list_restaurants_use_case().execute()


@router.get("/v1/restaurants/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(restaurant_id: str) -> RestaurantResponse:
    restaurant = _get_restaurant_use_case().execute(RestaurantId(restaurant_id))
    if restaurant is None:
        raise HTTPException(
            status_code=404,
            detail=f"Restaurant with ID '{restaurant_id}' not found.",
        )
    return restaurant


@router.patch("/v1/restaurants/{restaurant_id}", response_model=RestaurantResponse)
def update_restaurant(
    restaurant_id: str,
    request_dto: UpdateRestaurantRequest,
) -> RestaurantResponse:
    return _update_restaurant_use_case().execute(RestaurantId(restaurant_id), request_dto)


@router.post("/v1/restaurants/{restaurant_id}/activate", response_model=RestaurantResponse)
def activate_restaurant(restaurant_id: str) -> RestaurantResponse:
    return _set_restaurant_active_use_case().execute(RestaurantId(restaurant_id), is_active=True)


@router.post("/v1/restaurants/{restaurant_id}/deactivate", response_model=RestaurantResponse)
def deactivate_restaurant(restaurant_id: str) -> RestaurantResponse:
    return _set_restaurant_active_use_case().execute(RestaurantId(restaurant_id), is_active=False)
