from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from foodhub.infrastructure.dynamodb.client import get_dynamodb_resource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSpec:
    name: str
    partition_key: str
    sort_key: str | None = None

    def key_schema(self) -> list[dict[str, str]]:
        schema = [{"AttributeName": self.partition_key, "KeyType": "HASH"}]
        if self.sort_key:
            schema.append({"AttributeName": self.sort_key, "KeyType": "RANGE"})
        return schema

    def attribute_definitions(self) -> list[dict[str, str]]:
        names = [self.partition_key] + ([self.sort_key] if self.sort_key else [])
        return [{"AttributeName": name, "AttributeType": "S"} for name in names]


def restaurants_table_name() -> str:
    return os.getenv("RESTAURANTS_TABLE", "Restaurants")


def menus_table_name() -> str:
    return os.getenv("MENUS_TABLE", "Menus")


def restaurants_table_spec() -> TableSpec:
    return TableSpec(name=restaurants_table_name(), partition_key="id")


def menus_table_spec() -> TableSpec:
    # Every menu of a restaurant lives in that restaurant's partition.
    return TableSpec(name=menus_table_name(), partition_key="restaurantId", sort_key="id")


def create_table_if_missing(resource: Any, spec: TableSpec) -> bool:
    try:
        table = resource.create_table(
            TableName=spec.name,
            KeySchema=spec.key_schema(),
            AttributeDefinitions=spec.attribute_definitions(),
            BillingMode="PAY_PER_REQUEST",
        )
    except ClientError as exc:
        if exc.response.get("Error", {}).get("Code") == "ResourceInUseException":
            return False
        raise
    table.wait_until_exists()
    logger.info("dynamodb_table_created", extra={"table": spec.name})
    return True


def ping_dynamodb() -> bool:
    try:
        get_dynamodb_resource().meta.client.describe_table(TableName=restaurants_table_name())
        return True
    except Exception:
        return False
