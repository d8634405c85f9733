from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable

from foodhub.menu.domain.value_objects import MenuImage, Price
from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import MenuId, MenuItemId, RestaurantId, is_blank, new_id


class ItemCategory(str, Enum):
    APPETIZER = "Appetizer"
    MAIN = "Main"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"
    SIDE = "Side"


class ItemAvailability(str, Enum):
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"


class DuplicateMenuItemNameError(DomainValidationError):
    pass


class MenuItemNotInMenuError(DomainValidationError):
    pass


def _same_name(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


@dataclass(frozen=True)
class MenuItem:
    item_id: MenuItemId
    name: str
    description: str
    price: Price
    category: ItemCategory
    availability: ItemAvailability
    images: tuple[MenuImage, ...] = ()

    def __post_init__(self) -> None:
        if is_blank(self.item_id):
            raise DomainValidationError("Menu item id cannot be empty.")
        if is_blank(self.name):
            raise DomainValidationError("Menu item name cannot be empty.")
        object.__setattr__(self, "images", tuple(self.images))

    def update(
        self,
        name: str,
        description: str,
        price: Price,
        category: ItemCategory,
        images: Iterable[MenuImage] | None = None,
    ) -> MenuItem:
        return replace(
            self,
            name=name,
            description=description,
            price=price,
            category=category,
            images=self.images if images is None else tuple(images),
        )

    def set_availability(self, availability: ItemAvailability) -> MenuItem:
        return replace(self, availability=availability)


@dataclass(frozen=True)
class Menu:
    """Aggregate root owning its menu items.

    ``restaurant_id`` is a weak reference: the aggregate only requires it to
    be present, whether the restaurant exists is checked by the use case.
    Item names are unique case-insensitively; the mutators enforce it, while
    rehydration loads stored items as they are.
    """

    menu_id: MenuId
    restaurant_id: RestaurantId
    name: str
    description: str | None = None
    items: tuple[MenuItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if is_blank(self.menu_id):
            raise DomainValidationError("Menu id cannot be empty.")
        if is_blank(self.restaurant_id):
            raise DomainValidationError("A menu must be associated with a valid restaurant.")
        if is_blank(self.name):
            raise DomainValidationError("Menu name cannot be empty.")
        object.__setattr__(self, "items", tuple(self.items))

    def find_item(self, item_id: MenuItemId) -> MenuItem | None:
        for item in self.items:
            if item.item_id == item_id:
                return item
        return None

    def add_menu_item(self, item: MenuItem) -> Menu:
        if any(_same_name(existing.name, item.name) for existing in self.items):
            raise DuplicateMenuItemNameError(f"Menu item with name '{item.name}' already exists.")
        return replace(self, items=(*self.items, item))

    def update_menu_item(
        self,
        item_id: MenuItemId,
        name: str,
        description: str,
        price: Price,
        category: ItemCategory,
        images: Iterable[MenuImage] | None = None,
    ) -> Menu:
        existing = self._require_item(item_id)
        if any(
            other.item_id != item_id and _same_name(other.name, name) for other in self.items
        ):
            raise DuplicateMenuItemNameError(f"Menu item with name '{name}' already exists.")
        updated = existing.update(name, description, price, category, images)
        return self._replace_item(updated)

    def set_menu_item_availability(
        self,
        item_id: MenuItemId,
        availability: ItemAvailability,
    ) -> Menu:
        existing = self._require_item(item_id)
        return self._replace_item(existing.set_availability(availability))

    def _require_item(self, item_id: MenuItemId) -> MenuItem:
        item = self.find_item(item_id)
        if item is None:
            raise MenuItemNotInMenuError(f"Menu item with ID '{item_id}' not found.")
        return item

    def _replace_item(self, updated: MenuItem) -> Menu:
        items = tuple(updated if item.item_id == updated.item_id else item for item in self.items)
        return replace(self, items=items)


def create_menu_item(
    name: str,
    description: str,
    price: Price,
    category: ItemCategory,
    images: Iterable[MenuImage] | None = None,
) -> MenuItem:
    return MenuItem(
        item_id=MenuItemId(new_id()),
        name=name,
        description=description,
        price=price,
        category=category,
        availability=ItemAvailability.AVAILABLE,
        images=tuple(images or ()),
    )


def rehydrate_menu_item(
    item_id: MenuItemId,
    name: str,
    description: str,
    price: Price,
    category: ItemCategory,
    availability: ItemAvailability,
    images: Iterable[MenuImage] | None = None,
) -> MenuItem:
    return MenuItem(
        item_id=item_id,
        name=name,
        description=description,
        price=price,
        category=category,
        availability=availability,
        images=tuple(images or ()),
    )


def create_menu(
    restaurant_id: RestaurantId,
    name: str,
    description: str | None = None,
) -> Menu:
    return Menu(
        menu_id=MenuId(new_id()),
        restaurant_id=restaurant_id,
        name=name,
        description=description,
    )


def rehydrate_menu(
    menu_id: MenuId,
    restaurant_id: RestaurantId,
    name: str,
    description: str | None,
    items: Iterable[MenuItem] | None = None,
) -> Menu:
    return Menu(
        menu_id=menu_id,
        restaurant_id=restaurant_id,
        name=name,
        description=description,
        items=tuple(items or ()),
    )
