from __future__ import annotations

from foodhub.infrastructure.dynamodb.client import get_dynamodb_resource
from foodhub.infrastructure.dynamodb.tables import (
    create_table_if_missing,
    menus_table_spec,
    restaurants_table_spec,
)
from foodhub.infrastructure.observability.logging_config import configure_logging


def main() -> None:
    configure_logging()
    resource = get_dynamodb_resource()
    for spec in (restaurants_table_spec(), menus_table_spec()):
        created = create_table_if_missing(resource, spec)
        print(f"{spec.name}: {'created' if created else 'exists'}")


if __name__ == "__main__":
    main()
