from __future__ import annotations

from pydantic import BaseModel


class CreateRestaurantRequest(BaseModel):
    name: str
    city: str


class UpdateRestaurantRequest(BaseModel):
    name: str | None = None
    city: str | None = None
