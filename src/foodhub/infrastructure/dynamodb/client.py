from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

import boto3
from botocore.config import Config


def _region() -> str:
    return os.getenv("AWS_REGION", "us-east-1")


def _endpoint_url() -> str | None:
    return os.getenv("DYNAMODB_ENDPOINT_URL") or None


def _timeout_seconds() -> float:
    return float(os.getenv("DYNAMODB_TIMEOUT_SECONDS", "2"))


@lru_cache(maxsize=8)
def _build_resource(region: str, endpoint_url: str | None, timeout_seconds: float) -> Any:
    # Connect and read timeouts bound every call to the store.
    config = Config(
        retries={"max_attempts": 3, "mode": "standard"},
        connect_timeout=timeout_seconds,
        read_timeout=timeout_seconds,
    )
    return boto3.resource(
        "dynamodb",
        region_name=region,
        endpoint_url=endpoint_url,
        config=config,
    )


def get_dynamodb_resource() -> Any:
    return _build_resource(_region(), _endpoint_url(), _timeout_seconds())


def get_table(table_name: str) -> Any:
    return get_dynamodb_resource().Table(table_name)
