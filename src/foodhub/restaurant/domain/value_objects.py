from __future__ import annotations

from dataclasses import dataclass

from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import is_blank


@dataclass(frozen=True)
class RestaurantName:
    value: str

    def __post_init__(self) -> None:
        if is_blank(self.value):
            raise DomainValidationError("Restaurant name cannot be empty.")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
