from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from foodhub.menu.domain.entities import ItemAvailability, ItemCategory

PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 4


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class MenuImageRequest(CamelBaseModel):
    type: str
    url: str


class CreateMenuItemRequest(CamelBaseModel):
    name: str
    description: str = ""
    price: Decimal = Field(max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)
    currency: str
    category: ItemCategory
    images: list[MenuImageRequest] | None = None


class CreateMenuRequest(CamelBaseModel):
    restaurant_id: str
    name: str
    description: str | None = None
    items: list[CreateMenuItemRequest] = Field(default_factory=list)


class AddMenuItemRequest(CreateMenuItemRequest):
    pass


class UpdateMenuItemRequest(CreateMenuItemRequest):
    pass


class SetMenuItemAvailabilityRequest(CamelBaseModel):
    availability: ItemAvailability
