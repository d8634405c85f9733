from __future__ import annotations


class ApplicationError(Exception):
    """A use-case precondition that depends on stored state failed."""


class NotFoundError(ApplicationError):
    pass


class OptimisticConcurrencyError(ApplicationError):
    pass
