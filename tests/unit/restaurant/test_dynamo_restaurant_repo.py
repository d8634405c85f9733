from __future__ import annotations

import sys
from pathlib import Path

import pytest
from botocore.exceptions import ClientError

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from foodhub.restaurant.domain.entities import create_restaurant
from foodhub.restaurant.infrastructure.dynamodb.documents import (
    restaurant_from_document,
    restaurant_to_document,
)
from foodhub.restaurant.infrastructure.dynamodb.restaurant_repo import (
    DynamoRestaurantReadRepository,
    DynamoRestaurantRepository,
)
from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import RestaurantId


def test_add_and_get_by_id(restaurants_table) -> None:
    repository = DynamoRestaurantRepository(table=restaurants_table)
    restaurant = create_restaurant("Luigi's", "Rome")

    repository.add(restaurant)

    assert repository.get_by_id(restaurant.restaurant_id) == restaurant
    assert repository.get_by_id(RestaurantId("rst_missing")) is None
    assert restaurants_table.items[(restaurant.restaurant_id,)] == {
        "id": restaurant.restaurant_id,
        "name": "Luigi's",
        "city": "Rome",
        "isActive": True,
    }


def test_add_is_conditional_on_new_id(restaurants_table) -> None:
    repository = DynamoRestaurantRepository(table=restaurants_table)
    restaurant = create_restaurant("Luigi's", "Rome")
    repository.add(restaurant)

    with pytest.raises(ClientError):
        repository.add(restaurant)


def test_update_overwrites_document(restaurants_table) -> None:
    repository = DynamoRestaurantRepository(table=restaurants_table)
    restaurant = create_restaurant("Luigi's", "Rome")
    repository.add(restaurant)

    repository.update(restaurant.deactivate())

    assert repository.get_by_id(restaurant.restaurant_id).is_active is False


def test_get_all_reads_every_page(dynamo_table_factory) -> None:
    table = dynamo_table_factory("id", page_size=2)
    repository = DynamoRestaurantRepository(table=table)
    for index in range(5):
        repository.add(create_restaurant(f"Restaurant {index}", "Rome"))

    restaurants = repository.get_all()

    assert len(restaurants) == 5
    assert table.calls.count("Scan") == 3


def test_read_repository_answers_existence_only(restaurants_table) -> None:
    restaurant = create_restaurant("Luigi's", "Rome")
    DynamoRestaurantRepository(table=restaurants_table).add(restaurant)
    reader = DynamoRestaurantReadRepository(table=restaurants_table)

    assert reader.exists(restaurant.restaurant_id) is True
    assert reader.exists(RestaurantId("rst_missing")) is False


def test_read_repository_propagates_storage_errors(restaurants_table) -> None:
    restaurants_table.fail_with = "ResourceNotFoundException"
    reader = DynamoRestaurantReadRepository(table=restaurants_table)

    with pytest.raises(ClientError):
        reader.exists(RestaurantId("rst_001"))


@pytest.mark.parametrize("restaurant_id", ["", "   "])
def test_read_repository_treats_blank_id_as_missing(restaurants_table, restaurant_id: str) -> None:
    reader = DynamoRestaurantReadRepository(table=restaurants_table)

    assert reader.exists(RestaurantId(restaurant_id)) is False
    assert "GetItem" not in restaurants_table.calls


def test_store_rejects_empty_key_attribute(restaurants_table) -> None:
    with pytest.raises(ClientError) as exc_info:
        restaurants_table.get_item(Key={"id": ""})

    assert exc_info.value.response["Error"]["Code"] == "ValidationException"


def test_document_round_trip_keeps_inactive_flag() -> None:
    restaurant = create_restaurant("Luigi's", "Rome").deactivate()

    assert restaurant_from_document(restaurant_to_document(restaurant)) == restaurant


def test_document_without_active_flag_fails_to_load() -> None:
    document = restaurant_to_document(create_restaurant("Luigi's", "Rome"))
    del document["isActive"]

    with pytest.raises(KeyError):
        restaurant_from_document(document)


@pytest.mark.parametrize("raw", ["false", 0, None])
def test_document_with_non_boolean_active_flag_fails_to_load(raw: object) -> None:
    document = restaurant_to_document(create_restaurant("Luigi's", "Rome"))
    document["isActive"] = raw

    with pytest.raises(DomainValidationError):
        restaurant_from_document(document)
