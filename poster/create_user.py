"""
Create a user account from the command line:

    python -m poster.create_user
"""
import asyncio
import sys
from getpass import getpass

from poster.core.db import close_db, init_db
from poster.core.errors import ValidationError
from poster.schemas.user import UserCreate
from poster.services.auth_service import AuthService


async def create_user():
    await init_db()

    print("=== Create user ===\n")

    try:
        username = input("Username: ").strip()
        if not username:
            print("Username must not be empty")
            return

        password = getpass("Password: ").strip()
        password_confirm = getpass("Confirm password: ").strip()

        if password != password_confirm:
            print("Passwords do not match")
            return

        if len(password) < 6:
            print("Password must be at least 6 characters")
            return

        name = input("Name (optional): ").strip() or None
        email = input("Email (optional): ").strip() or None

        try:
            user = await AuthService.create_user(
                UserCreate(username=username, password=password, name=name, email=email)
            )
        except ValidationError as exc:
            print(exc.message)
            return

        print("\nUser created")
        print(f"   ID: {user.id}")
        print(f"   Username: {user.username}")
        print(f"   Name: {user.name or 'N/A'}")
        print(f"   Email: {user.email or 'N/A'}")
    finally:
        await close_db()


if __name__ == "__main__":
    try:
        asyncio.run(create_user())
    except KeyboardInterrupt:
        print("\n\nCancelled")
        sys.exit(1)
