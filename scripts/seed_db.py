from __future__ import annotations

import argparse
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from shift_logger.database.bootstrap import create_schema, seed_demo_data
from shift_logger.database.extensions import db
from shift_logger.main import create_app


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo workers and shifts")
    parser.add_argument("--days", type=int, default=5, help="number of daily shifts per worker")
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        create_schema()
        inserted = seed_demo_data(db.session, days=args.days)

    if inserted:
        print(f"OK: Seeded {inserted} workers with {args.days} shifts each")
    else:
        print("OK: Database already has workers, nothing seeded")


if __name__ == "__main__":
    main()
