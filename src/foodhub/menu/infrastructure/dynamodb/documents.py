"""Translation between the menu aggregate and its stored document.

A menu is stored as one document in the restaurant's partition::

    {"id", "restaurantId", "name", "description",
     "items": [{"id", "name", "description", "priceAmount", "priceCurrency",
                "category", "availability", "images": [{"type", "url"}]}]}

Loading always goes through the rehydrate factories so stored identities are
kept. Store-only attributes such as ``etag`` are ignored here.
"""

from __future__ import annotations

from decimal import Decimal, DecimalException
from enum import Enum
from typing import Any, Mapping, TypeVar

from boto3.dynamodb.types import DYNAMODB_CONTEXT

from foodhub.menu.domain.entities import (
    ItemAvailability,
    ItemCategory,
    Menu,
    MenuItem,
    rehydrate_menu,
    rehydrate_menu_item,
)
from foodhub.menu.domain.value_objects import MenuImage, Price
from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import MenuId, MenuItemId, RestaurantId

EnumT = TypeVar("EnumT", bound=Enum)


def _parse_enum(enum_cls: type[EnumT], raw: Any) -> EnumT:
    for member in enum_cls:
        if member.value == raw:
            return member
    raise DomainValidationError(f"Unknown {enum_cls.__name__} value: {raw!r}")


def _storable_amount(amount: Decimal) -> Decimal:
    # DynamoDB numbers carry at most 38 significant digits.
    try:
        return DYNAMODB_CONTEXT.create_decimal(amount)
    except DecimalException as exc:
        raise DomainValidationError(
            f"Price amount {amount} cannot be stored without rounding."
        ) from exc


def image_to_document(image: MenuImage) -> dict[str, Any]:
    return {"type": image.type, "url": image.url}


def image_from_document(document: Mapping[str, Any]) -> MenuImage:
    return MenuImage(type=document["type"], url=document["url"])


def menu_item_to_document(item: MenuItem) -> dict[str, Any]:
    return {
        "id": str(item.item_id),
        "name": item.name,
        "description": item.description,
        "priceAmount": _storable_amount(item.price.amount),
        "priceCurrency": item.price.currency,
        "category": item.category.value,
        "availability": item.availability.value,
        "images": [image_to_document(image) for image in item.images],
    }


def menu_item_from_document(document: Mapping[str, Any]) -> MenuItem:
    return rehydrate_menu_item(
        item_id=MenuItemId(document["id"]),
        name=document["name"],
        description=document.get("description") or "",
        price=Price(
            amount=Decimal(str(document["priceAmount"])),
            currency=document["priceCurrency"],
        ),
        category=_parse_enum(ItemCategory, document["category"]),
        availability=_parse_enum(ItemAvailability, document["availability"]),
        images=[image_from_document(image) for image in document.get("images") or []],
    )


def menu_to_document(menu: Menu) -> dict[str, Any]:
    return {
        "id": str(menu.menu_id),
        "restaurantId": str(menu.restaurant_id),
        "name": menu.name,
        "description": menu.description,
        "items": [menu_item_to_document(item) for item in menu.items],
    }


def menu_from_document(document: Mapping[str, Any]) -> Menu:
    return rehydrate_menu(
        menu_id=MenuId(document["id"]),
        restaurant_id=RestaurantId(document["restaurantId"]),
        name=document["name"],
        description=document.get("description"),
        items=[menu_item_from_document(item) for item in document.get("items") or []],
    )
