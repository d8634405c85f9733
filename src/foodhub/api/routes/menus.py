from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from foodhub.menu.application.dto.requests import (
    AddMenuItemRequest,
    CreateMenuRequest,
    SetMenuItemAvailabilityRequest,
    UpdateMenuItemRequest,
)
from foodhub.menu.application.dto.responses import (
    CreatedMenuItemResponse,
    CreatedMenuResponse,
    MenuResponse,
)
from foodhub.menu.application.use_cases.add_menu_item import AddMenuItem
from foodhub.menu.application.use_cases.create_menu import CreateMenu
from foodhub.menu.application.use_cases.get_menu import GetMenuById, GetMenuByRestaurantId
from foodhub.menu.application.use_cases.update_menu_item import (
    SetMenuItemAvailability,
    UpdateMenuItem,
)
from foodhub.menu.infrastructure.dynamodb.menu_repo import (
    DynamoMenuRepository,
    optimistic_concurrency_enabled,
)
from foodhub.restaurant.infrastructure.dynamodb.restaurant_repo import (
    DynamoRestaurantReadRepository,
)
from foodhub.shared.domain.ids import MenuId, MenuItemId, RestaurantId

router = APIRouter()


def _create_menu_use_case() -> CreateMenu:
    return CreateMenu(
        menu_repository=DynamoMenuRepository(),
        restaurant_reader=DynamoRestaurantReadRepository(),
    )


def _get_menu_use_case() -> GetMenuById:
    return GetMenuById(menu_repository=DynamoMenuRepository())


def _get_restaurant_menu_use_case() -> GetMenuByRestaurantId:
    return GetMenuByRestaurantId(menu_repository=DynamoMenuRepository())


def _add_menu_item_use_case() -> AddMenuItem:
    return AddMenuItem(
        menu_repository=DynamoMenuRepository(),
        optimistic=optimistic_concurrency_enabled(),
    )


def _update_menu_item_use_case() -> UpdateMenuItem:
    return UpdateMenuItem(
        menu_repository=DynamoMenuRepository(),
        optimistic=optimistic_concurrency_enabled(),
    )


def _set_availability_use_case() -> SetMenuItemAvailability:
    return SetMenuItemAvailability(
        menu_repository=DynamoMenuRepository(),
        optimistic=optimistic_concurrency_enabled(),
    )


@router.post(
    "/v1/menus",
    response_model=CreatedMenuResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_menu(request_dto: CreateMenuRequest) -> CreatedMenuResponse:
    return _create_menu_use_case().execute(request_dto)


@router.get("/v1/menus/{menu_id}", response_model=MenuResponse)
def get_menu(menu_id: str) -> MenuResponse:
    menu = _get_menu_use_case().execute(MenuId(menu_id))
    if menu is None:
        raise HTTPException(status_code=404, detail=f"Menu with ID '{menu_id}' not found.")
    return menu


@router.get("/v1/restaurants/{restaurant_id}/menu", response_model=MenuResponse)
def get_restaurant_menu(restaurant_id: str) -> MenuResponse:
    menu = _get_restaurant_menu_use_case().execute(RestaurantId(restaurant_id))
    if menu is None:
        raise HTTPException(
            status_code=404,
            detail=f"Restaurant '{restaurant_id}' has no menu.",
        )
    return menu


@router.post(
    "/v1/menus/{menu_id}/items",
    response_model=CreatedMenuItemResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_menu_item(menu_id: str, request_dto: AddMenuItemRequest) -> CreatedMenuItemResponse:
    return _add_menu_item_use_case().execute(MenuId(menu_id), request_dto)


@router.put("/v1/menus/{menu_id}/items/{item_id}", response_model=MenuResponse)
def update_menu_item(
    menu_id: str,
    item_id: str,
    request_dto: UpdateMenuItemRequest,
) -> MenuResponse:
    return _update_menu_item_use_case().execute(MenuId(menu_id), MenuItemId(item_id), request_dto)


@router.put("/v1/menus/{menu_id}/items/{item_id}/availability", response_model=MenuResponse)
def set_menu_item_availability(
    menu_id: str,
    item_id: str,
    request_dto: SetMenuItemAvailabilityRequest,
) -> MenuResponse:
    return _set_availability_use_case().execute(MenuId(menu_id), MenuItemId(item_id), request_dto)
