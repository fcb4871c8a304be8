"""
Add one account to the Users table. Run from project root:
  python -m app.scripts.create_user IDENTIFIER PASSWORD [--full-name NAME] [--email EMAIL]
Example:
  python -m app.scripts.create_user jdoe your-secure-password --full-name "Jane Doe"
"""
import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import StorageUnavailableError, db_manager
from app.services.user_store import add_user, create_users_table


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an admin panel account (no registration UI).")
    parser.add_argument("identifier", help="User identifier (1-255 chars, case-sensitive)")
    parser.add_argument("password", help="Password")
    parser.add_argument("--full-name", default=None, help="Display name (defaults to identifier)")
    parser.add_argument("--email", default=None, help="Email (defaults to IDENTIFIER@example.com)")
    args = parser.parse_args(argv)

    identifier = args.identifier.strip()
    if not identifier or len(identifier) > 255:
        print("Invalid identifier length.", file=sys.stderr)
        return 1
    if not args.password:
        print("Password is required.", file=sys.stderr)
        return 1

    try:
        create_users_table(db_manager.get_engine())
        db = db_manager.session()
    except (StorageUnavailableError, SQLAlchemyError) as e:
        print(f"Database unavailable: {e}", file=sys.stderr)
        return 1
    try:
        if not add_user(db, identifier, args.password, full_name=args.full_name, email=args.email):
            print(f"User '{identifier}' already exists.", file=sys.stderr)
            return 1
        print(f"Created user '{identifier}'.")
        return 0
    except SQLAlchemyError as e:
        db.rollback()
        print(f"Could not create user '{identifier}': {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
