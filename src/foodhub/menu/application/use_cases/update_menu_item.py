from __future__ import annotations

import logging

from foodhub.menu.application.dto.requests import (
    SetMenuItemAvailabilityRequest,
    UpdateMenuItemRequest,
)
from foodhub.menu.application.dto.responses import MenuResponse
from foodhub.menu.application.errors import MenuItemNotFoundError
from foodhub.menu.application.mappers.menu_mapper import to_domain_images, to_menu_response
from foodhub.menu.application.metrics.menu_lifecycle import (
    record_menu_item_availability_changed,
    record_menu_item_updated,
)
from foodhub.menu.application.ports.repositories import MenuRepository
from foodhub.menu.application.use_cases.menu_loading import load_menu_for_update
from foodhub.menu.domain.entities import Menu
from foodhub.menu.domain.value_objects import Price
from foodhub.shared.domain.ids import MenuId, MenuItemId

logger = logging.getLogger(__name__)


def _ensure_item(menu: Menu, item_id: MenuItemId) -> None:
    if menu.find_item(item_id) is None:
        raise MenuItemNotFoundError(
            f"Menu item with ID '{item_id}' not found in menu '{menu.menu_id}'."
        )


class UpdateMenuItem:
    def __init__(self, menu_repository: MenuRepository, optimistic: bool = False) -> None:
        self._menu_repository = menu_repository
        self._optimistic = optimistic

    def execute(
        self,
        menu_id: MenuId,
        item_id: MenuItemId,
        request_dto: UpdateMenuItemRequest,
    ) -> MenuResponse:
        logger.info(
            "menu_item_update_requested",
            extra={"menu_id": menu_id, "menu_item_id": item_id},
        )
        menu, etag = load_menu_for_update(self._menu_repository, menu_id, self._optimistic)
        _ensure_item(menu, item_id)

        menu = menu.update_menu_item(
            item_id=item_id,
            name=request_dto.name,
            description=request_dto.description,
            price=Price(amount=request_dto.price, currency=request_dto.currency),
            category=request_dto.category,
            images=to_domain_images(request_dto.images),
        )

        self._menu_repository.update(menu, expected_etag=etag)
        record_menu_item_updated()
        logger.info("menu_item_updated", extra={"menu_id": menu_id, "menu_item_id": item_id})
        return to_menu_response(menu)


class SetMenuItemAvailability:
    def __init__(self, menu_repository: MenuRepository, optimistic: bool = False) -> None:
        self._menu_repository = menu_repository
        self._optimistic = optimistic

    def execute(
        self,
        menu_id: MenuId,
        item_id: MenuItemId,
        request_dto: SetMenuItemAvailabilityRequest,
    ) -> MenuResponse:
        menu, etag = load_menu_for_update(self._menu_repository, menu_id, self._optimistic)
        _ensure_item(menu, item_id)

        menu = menu.set_menu_item_availability(item_id, request_dto.availability)

        self._menu_repository.update(menu, expected_etag=etag)
        record_menu_item_availability_changed()
        logger.info(
            "menu_item_availability_changed",
            extra={"menu_id": menu_id, "menu_item_id": item_id},
        )
        return to_menu_response(menu)
