from __future__ import annotations

import logging

from foodhub.menu.application.dto.responses import MenuResponse
from foodhub.menu.application.mappers.menu_mapper import to_menu_response
from foodhub.menu.application.ports.repositories import MenuRepository
from foodhub.shared.domain.ids import MenuId, RestaurantId

logger = logging.getLogger(__name__)


class GetMenuById:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, menu_id: MenuId) -> MenuResponse | None:
        menu = self._menu_repository.get_by_id(menu_id)
        if menu is None:
            logger.warning("menu_not_found", extra={"menu_id": menu_id})
            return None
        return to_menu_response(menu)


class GetMenuByRestaurantId:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, restaurant_id: RestaurantId) -> MenuResponse | None:
        menu = self._menu_repository.get_by_restaurant_id(restaurant_id)
        if menu is None:
            logger.warning("menu_not_found", extra={"restaurant_id": restaurant_id})
            return None
        return to_menu_response(menu)
