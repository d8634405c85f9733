from __future__ import annotations

from typing import Iterable

from foodhub.menu.application.dto.requests import MenuImageRequest
from foodhub.menu.application.dto.responses import (
    MenuImageResponse,
    MenuItemResponse,
    MenuPriceRangeResponse,
    MenuResponse,
)
from foodhub.menu.domain.entities import Menu
from foodhub.menu.domain.value_objects import MenuImage


def to_domain_images(images: Iterable[MenuImageRequest] | None) -> list[MenuImage] | None:
    if images is None:
        return None
    return [MenuImage(type=image.type, url=image.url) for image in images]


def _price_range(menu: Menu) -> MenuPriceRangeResponse | None:
    # Currency of the first item is reported; mixed currencies are not converted.
    if not menu.items:
        return None
    amounts = [item.price.amount for item in menu.items]
    return MenuPriceRangeResponse(
        min=min(amounts),
        max=max(amounts),
        currency=menu.items[0].price.currency,
    )


def to_menu_response(menu: Menu) -> MenuResponse:
    items = [
        MenuItemResponse(
            id=str(item.item_id),
            name=item.name,
            description=item.description,
            price=item.price.amount,
            currency=item.price.currency,
            category=item.category.value,
            availability=item.availability.value,
            images=[MenuImageResponse(type=image.type, url=image.url) for image in item.images],
        )
        for item in menu.items
    ]
    return MenuResponse(
        id=str(menu.menu_id),
        restaurantId=str(menu.restaurant_id),
        name=menu.name,
        description=menu.description,
        menuItems=items,
        priceRange=_price_range(menu),
    )
