from __future__ import annotations

import logging
import os
from typing import Any, Iterator
from uuid import uuid4

from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import ClientError

from foodhub.infrastructure.dynamodb.client import get_table
from foodhub.infrastructure.dynamodb.tables import menus_table_name
from foodhub.menu.application.ports.repositories import MenuRepository, VersionedMenu
from foodhub.menu.domain.entities import Menu
from foodhub.menu.infrastructure.dynamodb.documents import menu_from_document, menu_to_document
from foodhub.shared.application.errors import OptimisticConcurrencyError
from foodhub.shared.domain.ids import MenuId, RestaurantId

logger = logging.getLogger(__name__)

ETAG_ATTRIBUTE = "etag"


def _new_etag() -> str:
    return uuid4().hex


def _is_condition_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class DynamoMenuRepository(MenuRepository):
    """Menus partitioned by ``restaurantId`` with ``id`` as the sort key."""

    def __init__(self, table: Any | None = None) -> None:
        self._table = table if table is not None else get_table(menus_table_name())

    def get_by_id(
        self,
        menu_id: MenuId,
        restaurant_id: RestaurantId | None = None,
    ) -> Menu | None:
        document = self._find_document(menu_id, restaurant_id)
        if document is None:
            return None
        return menu_from_document(document)

    def get_versioned_by_id(self, menu_id: MenuId) -> VersionedMenu | None:
        document = self._find_document(menu_id, None)
        if document is None:
            return None
        return VersionedMenu(
            menu=menu_from_document(document),
            etag=str(document.get(ETAG_ATTRIBUTE) or ""),
        )

    def get_by_restaurant_id(self, restaurant_id: RestaurantId) -> Menu | None:
        logger.debug("menu_query_partition", extra={"restaurant_id": restaurant_id})
        for document in self._pages(
            self._table.query,
            KeyConditionExpression=Key("restaurantId").eq(str(restaurant_id)),
        ):
            return menu_from_document(document)
        return None

    def add(self, menu: Menu) -> None:
        logger.debug("menu_insert", extra={"menu_id": menu.menu_id})
        self._table.put_item(
            Item=self._item(menu),
            ConditionExpression=Attr("id").not_exists(),
        )

    def update(self, menu: Menu, expected_etag: str | None = None) -> None:
        logger.debug("menu_upsert", extra={"menu_id": menu.menu_id})
        if expected_etag is None:
            self._table.put_item(Item=self._item(menu))
            return

        condition: ConditionBase
        if expected_etag:
            condition = Attr(ETAG_ATTRIBUTE).eq(expected_etag)
        else:
            condition = Attr("id").exists() & Attr(ETAG_ATTRIBUTE).not_exists()
        try:
            self._table.put_item(Item=self._item(menu), ConditionExpression=condition)
        except ClientError as exc:
            if _is_condition_failure(exc):
                raise OptimisticConcurrencyError(
                    f"Menu '{menu.menu_id}' was modified by another request."
                ) from exc
            raise

    def _find_document(
        self,
        menu_id: MenuId,
        restaurant_id: RestaurantId | None,
    ) -> dict[str, Any] | None:
        if restaurant_id is not None:
            logger.debug(
                "menu_point_read",
                extra={"menu_id": menu_id, "restaurant_id": restaurant_id},
            )
            response = self._table.get_item(
                Key={"restaurantId": str(restaurant_id), "id": str(menu_id)}
            )
            return response.get("Item")

        # Partition key unknown: cross-partition scan, first match wins.
        logger.debug("menu_scan_by_id", extra={"menu_id": menu_id})
        for document in self._pages(self._table.scan, FilterExpression=Attr("id").eq(str(menu_id))):
            return document
        return None

    @staticmethod
    def _pages(operation: Any, **kwargs: Any) -> Iterator[dict[str, Any]]:
        while True:
            response = operation(**kwargs)
            yield from response.get("Items") or []
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return
            kwargs["ExclusiveStartKey"] = last_key

    @staticmethod
    def _item(menu: Menu) -> dict[str, Any]:
        item = menu_to_document(menu)
        item[ETAG_ATTRIBUTE] = _new_etag()
        return item


def optimistic_concurrency_enabled() -> bool:
    return os.getenv("MENU_OPTIMISTIC_CONCURRENCY", "0").strip().lower() in {"1", "true", "yes"}
