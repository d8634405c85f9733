from __future__ import annotations

from typing import Any, cast

from botocore.exceptions import ClientError
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from foodhub.api.middleware.correlation_id import get_correlation_id
from foodhub.menu.application.errors import (
    MenuItemNotFoundError,
    MenuNotFoundError,
    RestaurantDoesNotExistError,
)
from foodhub.menu.domain.entities import DuplicateMenuItemNameError, MenuItemNotInMenuError
from foodhub.restaurant.application.use_cases.update_restaurant import RestaurantNotFoundError
from foodhub.shared.application.errors import (
    ApplicationError,
    NotFoundError,
    OptimisticConcurrencyError,
)
from foodhub.shared.domain.errors import DomainValidationError
from foodhub.user.application.use_cases.register_user import (
    EmailAlreadyRegisteredError,
    UserNotFoundError,
)


def _error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
            "correlationId": get_correlation_id(),
        },
    )


def _exception_handler(status_code: int, code: str):
    async def handler(_: Request, exc: Exception) -> JSONResponse:
        details = getattr(exc, "details", None)
        return _error_response(
            status_code=status_code,
            code=code,
            message=str(exc),
            details=details if isinstance(details, dict) else None,
        )

    return handler


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else "request failed"
    code = "HTTP_ERROR"
    if http_exc.status_code == 404:
        code = "NOT_FOUND"
    elif http_exc.status_code == 400:
        code = "BAD_REQUEST"
    elif http_exc.status_code == 409:
        code = "CONFLICT"
    return _error_response(
        status_code=http_exc.status_code,
        code=code,
        message=message,
    )


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    return _error_response(
        status_code=400,
        code="INVALID_REQUEST",
        message="request validation failed",
        details={"errors": validation_exc.errors()},
    )


async def _storage_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    client_error = cast(ClientError, exc)
    storage_code = client_error.response.get("Error", {}).get("Code", "Unknown")
    if storage_code == "ConditionalCheckFailedException":
        return _error_response(
            status_code=409,
            code="CONFLICT",
            message="document was modified concurrently",
        )
    return _error_response(
        status_code=503,
        code="STORAGE_UNAVAILABLE",
        message="document store request failed",
        details={"storageCode": storage_code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette resolves handlers along the exception MRO, so subclasses win.
    mappings: list[tuple[type[Exception], int, str]] = [
        (DuplicateMenuItemNameError, 422, "DUPLICATE_MENU_ITEM_NAME"),
        (MenuItemNotInMenuError, 404, "MENU_ITEM_NOT_FOUND"),
        (DomainValidationError, 422, "DOMAIN_VALIDATION_FAILED"),
        (RestaurantDoesNotExistError, 422, "RESTAURANT_DOES_NOT_EXIST"),
        (MenuNotFoundError, 404, "MENU_NOT_FOUND"),
        (MenuItemNotFoundError, 404, "MENU_ITEM_NOT_FOUND"),
        (RestaurantNotFoundError, 404, "RESTAURANT_NOT_FOUND"),
        (UserNotFoundError, 404, "USER_NOT_FOUND"),
        (NotFoundError, 404, "NOT_FOUND"),
        (EmailAlreadyRegisteredError, 409, "EMAIL_ALREADY_REGISTERED"),
        (OptimisticConcurrencyError, 409, "CONFLICT"),
        (ApplicationError, 422, "APPLICATION_ERROR"),
    ]

    for exc_cls, status_code, code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code))

    app.add_exception_handler(ClientError, _storage_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
