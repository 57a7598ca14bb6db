"""Read access to the users table."""

from __future__ import annotations

from sqlalchemy import select

from ..database.connection import Database
from ..dbmodels import Users
from ..logging import get_logger

logger = get_logger(__name__)

# Range of a signed 64-bit INTEGER column; no stored id can fall outside it
MIN_USER_ID = -(2**63)
MAX_USER_ID = 2**63 - 1


class UserGateway:
    """Storage gateway for user lookups.

    Every read opens its own session on the shared pool; nothing is cached and
    storage errors propagate to the caller.
    """

    def __init__(self, database: Database):
        self.database = database

    async def get_by_id(self, user_id: int) -> Users | None:
        if not MIN_USER_ID <= user_id <= MAX_USER_ID:
            return None

        async with self.database.session() as session:
            stmt = select(Users).where(Users.id == user_id)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_all(self) -> list[Users]:
        async with self.database.session() as session:
            stmt = select(Users).order_by(Users.id)
            result = await session.execute(stmt)
            users = list(result.scalars().all())

        logger.debug("Loaded users", count=len(users))
        return users
