from __future__ import annotations

import logging

from foodhub.menu.application.dto.requests import AddMenuItemRequest
from foodhub.menu.application.dto.responses import CreatedMenuItemResponse
from foodhub.menu.application.mappers.menu_mapper import to_domain_images
from foodhub.menu.application.metrics.menu_lifecycle import record_menu_item_added
from foodhub.menu.application.ports.repositories import MenuRepository
from foodhub.menu.application.use_cases.menu_loading import load_menu_for_update
from foodhub.menu.domain.entities import create_menu_item
from foodhub.menu.domain.value_objects import Price
from foodhub.shared.domain.ids import MenuId

logger = logging.getLogger(__name__)


class AddMenuItem:
    def __init__(self, menu_repository: MenuRepository, optimistic: bool = False) -> None:
        self._menu_repository = menu_repository
        self._optimistic = optimistic

    def execute(self, menu_id: MenuId, request_dto: AddMenuItemRequest) -> CreatedMenuItemResponse:
        logger.info("menu_item_add_requested", extra={"menu_id": menu_id})
        menu, etag = load_menu_for_update(self._menu_repository, menu_id, self._optimistic)

        menu_item = create_menu_item(
            name=request_dto.name,
            description=request_dto.description,
            price=Price(amount=request_dto.price, currency=request_dto.currency),
            category=request_dto.category,
            images=to_domain_images(request_dto.images),
        )
        menu = menu.add_menu_item(menu_item)

        self._menu_repository.update(menu, expected_etag=etag)
        record_menu_item_added()
        logger.info(
            "menu_item_added",
            extra={"menu_id": menu.menu_id, "menu_item_id": menu_item.item_id},
        )
        return CreatedMenuItemResponse(id=str(menu_item.item_id), menuId=str(menu.menu_id))
