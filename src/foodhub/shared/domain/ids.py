from __future__ import annotations

from typing import NewType
from uuid import uuid4

RestaurantId = NewType("RestaurantId", str)
MenuId = NewType("MenuId", str)
MenuItemId = NewType("MenuItemId", str)
UserId = NewType("UserId", str)


def new_id() -> str:
    return str(uuid4())


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
