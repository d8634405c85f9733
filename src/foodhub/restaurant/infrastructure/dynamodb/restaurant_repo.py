from __future__ import annotations

import logging
from typing import Any

from boto3.dynamodb.conditions import Attr

from foodhub.infrastructure.dynamodb.client import get_table
from foodhub.infrastructure.dynamodb.tables import restaurants_table_name
from foodhub.restaurant.application.ports.repositories import RestaurantRepository
from foodhub.restaurant.domain.entities import Restaurant
from foodhub.restaurant.infrastructure.dynamodb.documents import (
    restaurant_from_document,
    restaurant_to_document,
)
from foodhub.shared.domain.ids import RestaurantId, is_blank

logger = logging.getLogger(__name__)


def _restaurants_table(table: Any | None) -> Any:
    return table if table is not None else get_table(restaurants_table_name())


class DynamoRestaurantRepository(RestaurantRepository):
    """Restaurants partitioned by their own id, so lookups are point reads."""

    def __init__(self, table: Any | None = None) -> None:
        self._table = _restaurants_table(table)

    def add(self, restaurant: Restaurant) -> None:
        logger.debug("restaurant_insert", extra={"restaurant_id": restaurant.restaurant_id})
        self._table.put_item(
            Item=restaurant_to_document(restaurant),
            ConditionExpression=Attr("id").not_exists(),
        )

    def update(self, restaurant: Restaurant) -> None:
        logger.debug("restaurant_upsert", extra={"restaurant_id": restaurant.restaurant_id})
        self._table.put_item(Item=restaurant_to_document(restaurant))

    def get_by_id(self, restaurant_id: RestaurantId) -> Restaurant | None:
        response = self._table.get_item(Key={"id": str(restaurant_id)})
        document = response.get("Item")
        if document is None:
            return None
        return restaurant_from_document(document)

    def get_all(self) -> list[Restaurant]:
        restaurants: list[Restaurant] = []
        kwargs: dict[str, Any] = {}
        while True:
            response = self._table.scan(**kwargs)
            restaurants.extend(restaurant_from_document(item) for item in response.get("Items") or [])
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return restaurants
            kwargs["ExclusiveStartKey"] = last_key


class DynamoRestaurantReadRepository:
    """Answers existence checks for other modules and exposes nothing else."""

    def __init__(self, table: Any | None = None) -> None:
        self._table = _restaurants_table(table)

    def exists(self, restaurant_id: RestaurantId) -> bool:
        # DynamoDB rejects empty key attributes, and no restaurant has a blank id.
        if is_blank(restaurant_id):
            return False
        response = self._table.get_item(
            Key={"id": str(restaurant_id)},
            ProjectionExpression="id",
        )
        return response.get("Item") is not None
