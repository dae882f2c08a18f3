"""
Create a user without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD
Example:
  python -m app.scripts.create_user alice your-secure-password
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import ServiceError
from app.core.logging_config import configure_logging
from app.services import accounts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Orderdesk user.")
    parser.add_argument("username", help="Username (must be unused)")
    parser.add_argument("password", help="Password")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    db = SessionLocal()
    try:
        accounts.register(
            db, args.username.strip(), args.password, rounds=settings.BCRYPT_ROUNDS
        )
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{args.username.strip()}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
