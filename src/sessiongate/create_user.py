"""Add a user to the MongoDB credential store.

Run with:
  sessiongate-create-user
"""

import asyncio
from getpass import getpass

from sessiongate.config import Config
from sessiongate.core.core import Core
from sessiongate.core.modules.user.service import UserService
from sessiongate.logging import setup_logging


async def _create(config: Config, email: str, name: str, password: str) -> None:
    core = Core(config)
    users = core.services.user
    if not isinstance(users, UserService):
        raise SystemExit("Configured credential store does not support user creation")
    async with core.lifespan():
        user = await users.create_user(email, name, password)
    print(f"OK -> {user.email} ({user.id})")


def main() -> None:
    config = Config()
    setup_logging(config.debug)

    email = input("Email: ").strip()
    name = input("Display name: ").strip() or email
    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if not email or not pw1:
        raise SystemExit("Email and password are required")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")

    asyncio.run(_create(config, email, name, pw1))


if __name__ == "__main__":
    main()
