"""Acces donnees Utilisateur / User data access."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.models.user import User


async def get_by_id(db: AsyncSession, user_id: int) -> User | None:
    return await db.get(User, user_id)


async def get_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def username_exists(db: AsyncSession, username: str) -> bool:
    result = await db.execute(select(exists().where(User.username == username)))
    return bool(result.scalar())
