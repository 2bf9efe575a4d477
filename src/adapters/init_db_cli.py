"""CLI adapter to create the finance schema.

This module wires the schema definition to the concrete database adapter
and provides a command-line entry point for bootstrapping a database.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.schema import create_schema, metadata


def main() -> None:
    """Create every finance table that is missing."""
    logger = get_app_logger()
    adapter = build_database_adapter()
    engine = adapter.get_engine()

    create_schema(engine)

    table_names = sorted(metadata.tables)
    logger.info(f"Schema ready on {engine.url}: {', '.join(table_names)}")
    get_usage_logger().info("init_db_cli run")
    print(f"Created or verified {len(table_names)} tables.")


if __name__ == "__main__":  # pragma: no cover
    main()
