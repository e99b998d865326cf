"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [--role ROLE ...]
Example:
  python -m app.scripts.create_user "Site Admin" admin@example.com s3cret! --role admin
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from app.core.database import SessionLocal
from app.schemas.user import UserCreate, UserRead
from app.services.errors import ServiceError, ValidationError
from app.services.identity import create_user
from app.services.roles import STATIC_ROLES, get_role_by_name

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Create a user without going through sign-up.")
    parser.add_argument("name", help="Display name (1-50 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-40 chars)")
    parser.add_argument(
        "--role",
        dest="roles",
        action="append",
        choices=STATIC_ROLES,
        help="Role to grant; repeat for several. Defaults to the default role.",
    )
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        role_ids = [get_role_by_name(db, name).id for name in args.roles or []]
        user = create_user(
            db,
            UserCreate(
                name=args.name,
                email=args.email,
                password=args.password,
                password_confirmation=args.password,
                role_ids=role_ids,
            ),
        )
        print(UserRead.model_validate(user).model_dump_json())
    except ValidationError as e:
        for field, messages in e.by_field().items():
            for message in messages:
                print(f"{field}: {message}", file=sys.stderr)
        return 1
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("User creation failed: %s", e)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
