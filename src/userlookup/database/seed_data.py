"""
Seed data helpers for local development databases.

These are administrative helpers used by the CLI; the service itself never
writes to the users table.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Users
from ..logging import get_logger

logger = get_logger(__name__)

SAMPLE_USER_NAMES = ("Ada", "Grace", "Alan")


async def ensure_user(db: AsyncSession, *, name: str) -> int:
    """
    Ensure a user with the given name exists.

    Returns:
        ID of the existing or newly created user
    """
    stmt = select(Users).where(Users.name == name).order_by(Users.id).limit(1)
    result = await db.execute(stmt)
    existing = result.scalar_one_or_none()

    if existing:
        logger.info("User already exists", user_id=existing.id, name=name)
        return existing.id

    user = Users(name=name)
    db.add(user)
    await db.flush()

    logger.info("Created user", user_id=user.id, name=name)
    return user.id


async def seed_users(db: AsyncSession, names: Iterable[str] | None = None) -> list[int]:
    """Ensure every name in ``names`` (default: sample users) has a user row."""
    if names is None:
        names = SAMPLE_USER_NAMES

    return [await ensure_user(db, name=name) for name in names]
