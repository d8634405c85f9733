from __future__ import annotations

from prometheus_client import Counter

RESTAURANTS_CREATED_TOTAL = Counter(
    "foodhub_restaurants_created_total",
    "Total number of restaurants created.",
)

RESTAURANT_ACTIVATION_TOTAL = Counter(
    "foodhub_restaurant_activation_total",
    "Total number of restaurant activation changes.",
    ["to"],
)


def record_restaurant_created() -> None:
    RESTAURANTS_CREATED_TOTAL.inc()


def record_restaurant_activation(is_active: bool) -> None:
    RESTAURANT_ACTIVATION_TOTAL.labels(to="active" if is_active else "inactive").inc()
