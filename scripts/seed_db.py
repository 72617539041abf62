from __future__ import annotations

import argparse
import sys

from skillgap.config import build_sqlalchemy_db_url, is_production, settings
from skillgap.database import Base, SessionLocal, engine, mask_db_url
from skillgap.services.seed_service import seed_catalog


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Replace the skill, career and learning-resource catalog with the bundled seed data."
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Allow seeding when ENVIRONMENT=production",
    )
    args = parser.parse_args(argv)

    if is_production(settings) and not args.force:
        sys.stderr.write("Refusing to seed a production database without --force\n")
        return 2

    _ensure_tables()

    with SessionLocal() as db:
        summary = seed_catalog(db)

    print(f"db_url={mask_db_url(build_sqlalchemy_db_url(settings))}")
    print(f"skills={summary.skills} careers={summary.careers} resources={summary.resources}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
