from __future__ import annotations

from decimal import Decimal

from foodhub.menu.application.dto.requests import CreateMenuItemRequest, CreateMenuRequest
from foodhub.menu.application.use_cases.create_menu import CreateMenu
from foodhub.menu.domain.entities import ItemCategory
from foodhub.menu.infrastructure.dynamodb.menu_repo import DynamoMenuRepository
from foodhub.restaurant.application.dto.requests import CreateRestaurantRequest
from foodhub.restaurant.application.use_cases.create_restaurant import CreateRestaurant
from foodhub.restaurant.infrastructure.dynamodb.restaurant_repo import (
    DynamoRestaurantReadRepository,
    DynamoRestaurantRepository,
)
from foodhub.tools.create_tables import main as create_tables


def main() -> None:
    create_tables()

    restaurant = CreateRestaurant(DynamoRestaurantRepository()).execute(
        CreateRestaurantRequest(name="Luigi's", city="Rome")
    )

    items = [
        CreateMenuItemRequest(
            name="Margherita",
            description="Tomato, mozzarella, basil",
            price=Decimal("8.50"),
            currency="EUR",
            category=ItemCategory.MAIN,
        ),
        CreateMenuItemRequest(
            name="Bruschetta",
            description="Grilled bread, tomato, garlic",
            price=Decimal("5.00"),
            currency="EUR",
            category=ItemCategory.APPETIZER,
        ),
        CreateMenuItemRequest(
            name="Tiramisu",
            description="Espresso-soaked ladyfingers",
            price=Decimal("6.00"),
            currency="EUR",
            category=ItemCategory.DESSERT,
        ),
    ]
    menu = CreateMenu(DynamoMenuRepository(), DynamoRestaurantReadRepository()).execute(
        CreateMenuRequest(restaurant_id=restaurant.id, name="Lunch", items=items)
    )
    print(f"seed complete: restaurant={restaurant.id} menu={menu.id}")


if __name__ == "__main__":
    main()
