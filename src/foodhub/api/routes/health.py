from __future__ import annotations

from fastapi import APIRouter, Response, status

from foodhub.infrastructure.dynamodb.tables import ping_dynamodb
from foodhub.user.infrastructure.db.session import ping_database

router = APIRouter()


@router.get("/health/live")
def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/ready")
def ready(response: Response) -> dict[str, object]:
    dynamodb_ready = ping_dynamodb()
    postgres_ready = ping_database(timeout_seconds=1.0)

    if dynamodb_ready and postgres_ready:
        return {"status": "ok"}

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {
        "status": "unavailable",
        "checks": {"dynamodb": dynamodb_ready, "postgres": postgres_ready},
    }
