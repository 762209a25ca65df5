"""
python -m scripts.create_admin --username admin --email admin@example.com

Bootstrap a platform administrator. The password is read from the
ADMIN_PASSWORD environment variable or prompted for.
"""

import argparse
import getpass
import os
import sys

sys.path.insert(0, ".")

from dotenv import load_dotenv
load_dotenv()

from app.database import Database
from app.core.config import settings
from app.core.roles import Role
from app.crud.user import user as user_crud


def create_admin(username: str, email: str, password: str) -> None:
    """Create the admin user, or report that the e-mail is already taken."""
    database = Database(settings.DATABASE_URL)

    with database.session() as db:
        existing = user_crud.get_by_email(db, email=email)
        if existing:
            print(f"User with email {email} already exists (id={existing.id})")
            return

        admin = user_crud.create(
            db,
            username=username,
            email=email,
            password=password,
            user_type=Role.admin.value,
            is_verified=True,
        )
        print(f"Created platform admin: id={admin.id}, username={admin.username}")

    database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a platform admin user")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--email", required=True)
    args = parser.parse_args()

    password = os.getenv("ADMIN_PASSWORD") or getpass.getpass("Password: ")
    if len(password) < 8:
        sys.exit("Password must be at least 8 characters")

    create_admin(args.username, args.email, password)
