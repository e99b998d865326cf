"""
CLI entrypoint that seeds the static roles (user, admin). Run after migrations:

  python -m app.seed

Safe to run repeatedly; existing roles are left untouched.
"""

import logging
import sys

from dotenv import load_dotenv

from app.core.database import SessionLocal, check_db_connected
from app.services.roles import ensure_roles

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Insert missing static roles."""
    load_dotenv()
    db = SessionLocal()
    try:
        if not check_db_connected(db):
            logger.error("Seeding aborted: database is not reachable")
            return 1
        created = ensure_roles(db)
        logger.info("Seeding completed: roles_created=%s", created)
        return 0
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
