from __future__ import annotations

from foodhub.menu.application.errors import MenuNotFoundError
from foodhub.menu.application.ports.repositories import MenuRepository
from foodhub.menu.domain.entities import Menu
from foodhub.shared.domain.ids import MenuId


def load_menu_for_update(
    repository: MenuRepository,
    menu_id: MenuId,
    optimistic: bool,
) -> tuple[Menu, str | None]:
    if optimistic:
        versioned = repository.get_versioned_by_id(menu_id)
        if versioned is not None:
            return versioned.menu, versioned.etag
    else:
        menu = repository.get_by_id(menu_id)
        if menu is not None:
            return menu, None
    raise MenuNotFoundError(f"Menu with ID '{menu_id}' not found.")
