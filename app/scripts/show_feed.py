"""
Print a user's feed as JSON lines, newest first:
  python -m app.scripts.show_feed USER_ID [--page N] [--per-page N]
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from app.core.database import SessionLocal
from app.schemas.micropost import MicropostRead
from app.services.errors import ServiceError
from app.services.feed import feed
from app.services.identity import get_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Show a user's feed.")
    parser.add_argument("user_id", type=int)
    parser.add_argument("--page", type=int, default=None)
    parser.add_argument("--per-page", type=int, default=None)
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = get_user(db, args.user_id)
        for micropost in feed(db, user, page=args.page, per_page=args.per_page):
            print(MicropostRead.model_validate(micropost).model_dump_json())
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Feed lookup failed: user_id=%s, error=%s", args.user_id, e)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
