from __future__ import annotations

from foodhub.shared.application.errors import ApplicationError, NotFoundError


class RestaurantDoesNotExistError(ApplicationError):
    pass


class MenuNotFoundError(NotFoundError):
    pass


class MenuItemNotFoundError(NotFoundError):
    pass
