from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
from botocore.exceptions import ClientError

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeDynamoTable:
    """In-memory stand-in for a boto3 ``Table`` resource.

    Condition objects built with ``boto3.dynamodb.conditions`` are evaluated
    from their ``get_expression()`` form, so repositories are exercised with
    the same expressions they send to DynamoDB.
    """

    def __init__(
        self,
        partition_key: str,
        sort_key: str | None = None,
        page_size: int = 100,
    ) -> None:
        self.partition_key = partition_key
        self.sort_key = sort_key
        self.page_size = page_size
        self.items: dict[tuple[str, ...], dict[str, Any]] = {}
        self.calls: list[str] = []
        self.fail_with: str | None = None

    def _key_of(self, item: dict[str, Any]) -> tuple[str, ...]:
        if self.sort_key is None:
            return (item[self.partition_key],)
        return (item[self.partition_key], item[self.sort_key])

    def _key_dict(self, item: dict[str, Any]) -> dict[str, Any]:
        key = {self.partition_key: item[self.partition_key]}
        if self.sort_key is not None:
            key[self.sort_key] = item[self.sort_key]
        return key

    def _check_key(self, key: dict[str, Any], operation: str) -> None:
        names = [self.partition_key] + ([self.sort_key] if self.sort_key else [])
        if any(key.get(name) == "" for name in names):
            raise _client_error("ValidationException", operation)

    def _check_failure(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail_with is not None:
            raise _client_error(self.fail_with, operation)

    def _evaluate(self, condition: Any, item: dict[str, Any] | None) -> bool:
        expression = condition.get_expression()
        operator = expression["operator"]
        values = expression["values"]
        if operator == "AND":
            return all(self._evaluate(value, item) for value in values)
        if operator == "OR":
            return any(self._evaluate(value, item) for value in values)
        name = values[0].name
        if operator == "attribute_not_exists":
            return item is None or name not in item
        if operator == "attribute_exists":
            return item is not None and name in item
        if operator == "=":
            return item is not None and item.get(name) == values[1]
        raise NotImplementedError(operator)

    def _paginate(
        self,
        items: list[dict[str, Any]],
        exclusive_start_key: dict[str, Any] | None,
    ) -> dict[str, Any]:
        start = 0
        if exclusive_start_key is not None:
            start_key = self._key_of(exclusive_start_key)
            for index, item in enumerate(items):
                if self._key_of(item) == start_key:
                    start = index + 1
                    break
        page = items[start : start + self.page_size]
        response: dict[str, Any] = {"Items": [copy.deepcopy(item) for item in page]}
        if start + self.page_size < len(items):
            response["LastEvaluatedKey"] = self._key_dict(page[-1])
        return response

    def put_item(self, Item: dict[str, Any], ConditionExpression: Any = None) -> dict[str, Any]:
        self._check_failure("PutItem")
        self._check_key(Item, "PutItem")
        key = self._key_of(Item)
        if ConditionExpression is not None and not self._evaluate(
            ConditionExpression, self.items.get(key)
        ):
            raise _client_error("ConditionalCheckFailedException", "PutItem")
        self.items[key] = copy.deepcopy(Item)
        return {}

    def get_item(self, Key: dict[str, Any], ProjectionExpression: str | None = None) -> dict[str, Any]:
        self._check_failure("GetItem")
        self._check_key(Key, "GetItem")
        item = self.items.get(self._key_of(Key))
        if item is None:
            return {}
        if ProjectionExpression is not None:
            names = [name.strip() for name in ProjectionExpression.split(",")]
            return {"Item": {name: copy.deepcopy(item[name]) for name in names if name in item}}
        return {"Item": copy.deepcopy(item)}

    def query(
        self,
        KeyConditionExpression: Any,
        ExclusiveStartKey: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        self._check_failure("Query")
        matches = [item for item in self.items.values() if self._evaluate(KeyConditionExpression, item)]
        if self.sort_key is not None:
            matches.sort(key=lambda item: item[self.sort_key])
        return self._paginate(matches, ExclusiveStartKey)

    def scan(
        self,
        FilterExpression: Any = None,
        ExclusiveStartKey: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        self._check_failure("Scan")
        all_items = list(self.items.values())
        response = self._paginate(all_items, ExclusiveStartKey)
        if FilterExpression is not None:
            response["Items"] = [
                item for item in response["Items"] if self._evaluate(FilterExpression, item)
            ]
        return response


@pytest.fixture
def dynamo_table_factory() -> Iterator[Callable[..., FakeDynamoTable]]:
    def factory(partition_key: str, sort_key: str | None = None, page_size: int = 100):
        return FakeDynamoTable(partition_key=partition_key, sort_key=sort_key, page_size=page_size)

    yield factory


@pytest.fixture
def restaurants_table() -> FakeDynamoTable:
    return FakeDynamoTable(partition_key="id")


@pytest.fixture
def menus_table() -> FakeDynamoTable:
    return FakeDynamoTable(partition_key="restaurantId", sort_key="id")
