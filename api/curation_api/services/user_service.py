from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.models.user import User


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: str | int) -> User | None:
    try:
        user_pk = int(str(user_id))
    except ValueError:
        return None
    result = await session.execute(select(User).where(User.id == user_pk))
    return result.scalar_one_or_none()


async def create_user(session: AsyncSession, email: str, display_name: str | None = None) -> User:
    existing = await get_user_by_email(session, email)
    if existing:
        raise ValueError("Email already registered")
    user = User(email=email.lower(), display_name=display_name)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user
