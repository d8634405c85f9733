from __future__ import annotations


class DomainValidationError(ValueError):
    """An aggregate or value object invariant was violated.

    Raised synchronously at the point of violation, never deferred.
    """
