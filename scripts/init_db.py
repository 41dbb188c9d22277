from __future__ import annotations

import importlib
import logging

from config import get_settings_module

from lecture_attendance.container import build_container
from lecture_attendance.database.bootstrap import apply_schema, list_tables


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        jwt_secret=settings.JWT_SECRET,
        upload_folder=settings.UPLOAD_FOLDER,
    )

    apply_schema(container.conn)
    seeded_user = container.identity_service.ensure_demo_identity()
    seeded_lectures = container.lecture_service.ensure_seeded()

    db = container.conn.config
    print(
        "OK: Applied schema.sql -> "
        f"{db.user}@{db.host}:{db.port}/{db.database} "
        f"(tables={len(list_tables(container.conn))}, demo_user={seeded_user}, lectures={seeded_lectures})"
    )


if __name__ == "__main__":
    main()
