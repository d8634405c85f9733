from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterator
from uuid import uuid4

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodhub.infrastructure.dynamodb import client as dynamodb_client
from foodhub.infrastructure.dynamodb.tables import (
    create_table_if_missing,
    menus_table_spec,
    restaurants_table_spec,
)
from foodhub.user.infrastructure.db import session as db_session

BACKEND_DIR = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session")
def dynamodb_tables() -> Iterator[None]:
    if not os.getenv("DYNAMODB_ENDPOINT_URL"):
        pytest.skip("DYNAMODB_ENDPOINT_URL is not set")

    suffix = uuid4().hex[:8]
    os.environ["RESTAURANTS_TABLE"] = f"Restaurants-{suffix}"
    os.environ["MENUS_TABLE"] = f"Menus-{suffix}"
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "local")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "local")
    os.environ.setdefault("OTEL_SERVICE_NAME", "foodhub-backend-test")
    os.environ.setdefault("OTEL_EXPORTER_OTLP_ENDPOINT", "")
    dynamodb_client._build_resource.cache_clear()

    resource = dynamodb_client.get_dynamodb_resource()
    specs = [restaurants_table_spec(), menus_table_spec()]
    for spec in specs:
        create_table_if_missing(resource, spec)
    yield
    for spec in specs:
        resource.Table(spec.name).delete()


@pytest.fixture(scope="session")
def user_database() -> Iterator[None]:
    if not os.getenv("DATABASE_URL"):
        pytest.skip("DATABASE_URL is not set")

    db_session._build_engine.cache_clear()
    env = os.environ.copy()
    env["PYTHONPATH"] = f"{BACKEND_DIR / 'src'}{os.pathsep}{env.get('PYTHONPATH', '')}".rstrip(
        os.pathsep
    )
    subprocess.run(
        [sys.executable, "-m", "alembic", "-c", "alembic.ini", "upgrade", "head"],
        cwd=BACKEND_DIR,
        env=env,
        check=True,
    )
    yield
