"""User repository for database operations."""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User


class UserRepository:
    """Encapsulates user-related database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by email address."""
        result = await self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: int) -> User | None:
        """Find a user by primary key."""
        result = await self._session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists."""
        result = await self._session.execute(select(User.id).where(User.email == email))
        return result.scalar_one_or_none() is not None

    async def create(
        self,
        name: str,
        email: str,
        hashed_password: str,
        is_verified: bool = False,
    ) -> User:
        """Create a new user record."""
        user = User(
            name=name,
            email=email,
            hashed_password=hashed_password,
            is_verified=is_verified,
        )
        self._session.add(user)
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def mark_verified(
        self, user: User, name: str, hashed_password: str
    ) -> User:
        """Complete verification, taking the credentials submitted with the code."""
        user.name = name
        user.hashed_password = hashed_password
        user.is_verified = True
        await self._session.flush()
        return user

    async def touch_last_login(self, user: User) -> User:
        """Stamp a successful login."""
        user.last_login = datetime.now(UTC)
        await self._session.flush()
        return user
