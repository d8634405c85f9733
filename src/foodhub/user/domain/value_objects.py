from __future__ import annotations

from dataclasses import dataclass

from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import is_blank


@dataclass(frozen=True)
class EmailAddress:
    value: str

    def __post_init__(self) -> None:
        if is_blank(self.value):
            raise DomainValidationError("Email cannot be empty.")
        normalized = self.value.strip().lower()
        local, sep, domain = normalized.partition("@")
        if not sep or not local or "@" in domain or "." not in domain.strip("."):
            raise DomainValidationError(f"Email '{self.value}' is not a valid address.")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
