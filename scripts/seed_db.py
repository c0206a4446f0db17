from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from club_attendance.common.logging import configure_logging
from club_attendance.config import get_settings_module
from club_attendance.database.bootstrap import apply_schema, apply_seed_sql

logger = logging.getLogger("club_attendance.scripts.seed_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    # Seed rows need the tables; schema.sql is idempotent.
    apply_schema(db_config)
    count = apply_seed_sql(db_config)
    logger.info(
        "Seeded database -> %s@%s:%s/%s (statements=%s)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        count,
    )


if __name__ == "__main__":
    main()
