from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from club_attendance.common.logging import configure_logging
from club_attendance.config import get_settings_module
from club_attendance.database.bootstrap import apply_schema, list_tables

logger = logging.getLogger("club_attendance.scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        len(tables),
    )


if __name__ == "__main__":
    main()
