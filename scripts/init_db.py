from __future__ import annotations

import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from sqlalchemy import inspect

from shift_logger.database.bootstrap import create_schema
from shift_logger.database.extensions import db
from shift_logger.main import create_app


def main() -> None:
    app = create_app()
    with app.app_context():
        create_schema()
        tables = inspect(db.engine).get_table_names()
        print(f"OK: Schema ready -> {db.engine.url.render_as_string(hide_password=True)} (tables={len(tables)})")


if __name__ == "__main__":
    main()
