from __future__ import annotations

import logging

from foodhub.menu.application.dto.requests import CreateMenuRequest
from foodhub.menu.application.dto.responses import CreatedMenuResponse
from foodhub.menu.application.errors import RestaurantDoesNotExistError
from foodhub.menu.application.mappers.menu_mapper import to_domain_images
from foodhub.menu.application.metrics.menu_lifecycle import (
    record_menu_create_rejected,
    record_menu_created,
)
from foodhub.menu.application.ports.repositories import MenuRepository, RestaurantReadRepository
from foodhub.menu.domain.entities import create_menu, create_menu_item
from foodhub.menu.domain.value_objects import Price
from foodhub.shared.domain.ids import RestaurantId

logger = logging.getLogger(__name__)


class CreateMenu:
    """Creates a menu after checking the referenced restaurant exists.

    The existence check goes through ``RestaurantReadRepository`` only, so
    this module never touches restaurant persistence or domain types. The
    aggregate, including any initial items, is fully validated before the
    single ``add`` call; nothing is written when a check fails.
    """

    def __init__(
        self,
        menu_repository: MenuRepository,
        restaurant_reader: RestaurantReadRepository,
    ) -> None:
        self._menu_repository = menu_repository
        self._restaurant_reader = restaurant_reader

    def execute(self, request_dto: CreateMenuRequest) -> CreatedMenuResponse:
        restaurant_id = RestaurantId(request_dto.restaurant_id)
        logger.info("menu_create_requested", extra={"restaurant_id": restaurant_id})

        if not self._restaurant_reader.exists(restaurant_id):
            record_menu_create_rejected(reason="RESTAURANT_NOT_FOUND")
            raise RestaurantDoesNotExistError(
                f"Restaurant with ID '{restaurant_id}' does not exist."
            )

        menu = create_menu(restaurant_id, request_dto.name, request_dto.description)
        for item_dto in request_dto.items:
            menu_item = create_menu_item(
                name=item_dto.name,
                description=item_dto.description,
                price=Price(amount=item_dto.price, currency=item_dto.currency),
                category=item_dto.category,
                images=to_domain_images(item_dto.images),
            )
            menu = menu.add_menu_item(menu_item)

        self._menu_repository.add(menu)
        record_menu_created(item_count=len(menu.items))
        logger.info(
            "menu_created",
            extra={"menu_id": menu.menu_id, "restaurant_id": menu.restaurant_id},
        )
        return CreatedMenuResponse(id=str(menu.menu_id))
