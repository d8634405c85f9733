from __future__ import annotations

from prometheus_client import Counter

USERS_REGISTERED_TOTAL = Counter(
    "foodhub_users_registered_total",
    "Total number of users registered.",
)


def record_user_registered() -> None:
    USERS_REGISTERED_TOTAL.inc()
