from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import is_blank


@dataclass(frozen=True)
class Price:
    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        try:
            amount = Decimal(str(self.amount)) if not isinstance(self.amount, Decimal) else self.amount
        except InvalidOperation as exc:
            raise DomainValidationError("Price amount must be a number.") from exc
        if not amount.is_finite():
            raise DomainValidationError("Price amount must be a number.")
        if amount < 0:
            raise DomainValidationError("Price amount cannot be negative.")
        if is_blank(self.currency):
            raise DomainValidationError("Currency cannot be empty.")
        object.__setattr__(self, "amount", amount)


@dataclass(frozen=True)
class MenuImage:
    type: str
    url: str

    def __post_init__(self) -> None:
        if is_blank(self.type):
            raise DomainValidationError("Image type cannot be empty.")
        if is_blank(self.url):
            raise DomainValidationError("Image url cannot be empty.")
