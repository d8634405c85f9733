from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodhub.menu.application.dto.requests import (
    AddMenuItemRequest,
    CreateMenuItemRequest,
    CreateMenuRequest,
    SetMenuItemAvailabilityRequest,
)
from foodhub.menu.application.errors import RestaurantDoesNotExistError
from foodhub.menu.application.use_cases.add_menu_item import AddMenuItem
from foodhub.menu.application.use_cases.create_menu import CreateMenu
from foodhub.menu.application.use_cases.get_menu import GetMenuById, GetMenuByRestaurantId
from foodhub.menu.application.use_cases.update_menu_item import SetMenuItemAvailability
from foodhub.menu.domain.entities import DuplicateMenuItemNameError, ItemAvailability, ItemCategory
from foodhub.menu.infrastructure.dynamodb.menu_repo import DynamoMenuRepository
from foodhub.restaurant.application.dto.requests import CreateRestaurantRequest
from foodhub.restaurant.application.use_cases.create_restaurant import CreateRestaurant
from foodhub.restaurant.infrastructure.dynamodb.restaurant_repo import (
    DynamoRestaurantReadRepository,
    DynamoRestaurantRepository,
)
from foodhub.shared.application.errors import OptimisticConcurrencyError
from foodhub.shared.domain.ids import MenuId, MenuItemId, RestaurantId

pytestmark = pytest.mark.usefixtures("dynamodb_tables")


def _item(name: str, price: str) -> dict[str, object]:
    return {"name": name, "price": Decimal(price), "currency": "EUR", "category": ItemCategory.MAIN}


def _restaurant() -> str:
    return CreateRestaurant(DynamoRestaurantRepository()).execute(
        CreateRestaurantRequest(name="Luigi's", city="Rome")
    ).id


def _create_menu(restaurant_id: str, *items: dict[str, object]) -> str:
    return CreateMenu(DynamoMenuRepository(), DynamoRestaurantReadRepository()).execute(
        CreateMenuRequest(
            restaurant_id=restaurant_id,
            name="Lunch",
            items=[CreateMenuItemRequest(**item) for item in items],
        )
    ).id


def test_menu_round_trip_through_dynamodb() -> None:
    restaurant_id = _restaurant()
    menu_id = _create_menu(restaurant_id, _item("Margherita", "8.50"))

    by_id = GetMenuById(DynamoMenuRepository()).execute(MenuId(menu_id))
    by_restaurant = GetMenuByRestaurantId(DynamoMenuRepository()).execute(
        RestaurantId(restaurant_id)
    )

    assert by_id is not None and by_restaurant is not None
    assert by_id == by_restaurant
    assert by_id.menuItems[0].price == Decimal("8.50")


def test_menu_for_missing_restaurant_is_not_stored() -> None:
    with pytest.raises(RestaurantDoesNotExistError):
        _create_menu("rst_does_not_exist")

    assert GetMenuByRestaurantId(DynamoMenuRepository()).execute(
        RestaurantId("rst_does_not_exist")
    ) is None


def test_add_duplicate_item_leaves_stored_menu_unchanged() -> None:
    menu_id = _create_menu(_restaurant(), _item("Margherita", "8.50"))

    with pytest.raises(DuplicateMenuItemNameError):
        AddMenuItem(DynamoMenuRepository()).execute(
            MenuId(menu_id), AddMenuItemRequest(**_item("margherita", "9.00"))
        )

    stored = DynamoMenuRepository().get_by_id(MenuId(menu_id))
    assert stored is not None and len(stored.items) == 1


def test_availability_change_is_persisted() -> None:
    menu_id = _create_menu(_restaurant(), _item("Margherita", "8.50"), _item("Calzone", "11"))
    repository = DynamoMenuRepository()
    item_id = repository.get_by_id(MenuId(menu_id)).items[0].item_id

    SetMenuItemAvailability(repository, optimistic=True).execute(
        MenuId(menu_id),
        MenuItemId(item_id),
        SetMenuItemAvailabilityRequest(availability=ItemAvailability.UNAVAILABLE),
    )

    stored = repository.get_by_id(MenuId(menu_id))
    assert [item.availability for item in stored.items] == [
        ItemAvailability.UNAVAILABLE,
        ItemAvailability.AVAILABLE,
    ]


def test_stale_etag_is_rejected_by_dynamodb() -> None:
    menu_id = _create_menu(_restaurant())
    repository = DynamoMenuRepository()
    stale = repository.get_versioned_by_id(MenuId(menu_id))
    repository.update(stale.menu)

    with pytest.raises(OptimisticConcurrencyError):
        repository.update(stale.menu, expected_etag=stale.etag)
