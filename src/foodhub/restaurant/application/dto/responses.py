from __future__ import annotations

from pydantic import BaseModel, Field


class RestaurantResponse(BaseModel):
    id: str
    name: str
    city: str
    isActive: bool


class RestaurantListResponse(BaseModel):
    restaurants: list[RestaurantResponse] = Field(default_factory=list)


class CreatedRestaurantResponse(BaseModel):
    id: str
