from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class MenuImageResponse(BaseModel):
    type: str
    url: str


class MenuItemResponse(BaseModel):
    id: str
    name: str
    description: str
    price: Decimal
    currency: str
    category: str
    availability: str
    images: list[MenuImageResponse] = Field(default_factory=list)


class MenuPriceRangeResponse(BaseModel):
    min: Decimal
    max: Decimal
    currency: str


class MenuResponse(BaseModel):
    id: str
    restaurantId: str
    name: str
    description: str | None = None
    menuItems: list[MenuItemResponse] = Field(default_factory=list)
    priceRange: MenuPriceRangeResponse | None = None


class CreatedMenuResponse(BaseModel):
    id: str


class CreatedMenuItemResponse(BaseModel):
    id: str
    menuId: str
