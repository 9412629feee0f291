"""
Taskboard Backend — User Store
================================

What:  Persistence operations for users.
Who:   AuthService (register, login) and ClientService (listing, lookup).

Uniqueness:
    `create()` flushes before committing so the UNIQUE constraints on username and
    email fire inside the call. A violation becomes ConflictError, which
    makes the database the authoritative source of "already taken" even when
    two registrations race past the workflow's lookup.
"""

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.exceptions import ConflictError
from taskboard.models.user import User

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "Username aready taken"


class UserStore:
    """Async user persistence on top of one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        """Return any user whose email OR username matches, else None."""
        result = await self.session.execute(
            select(User)
            .where(or_(User.email == email, User.username == username))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get(self, user_id: int) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        result = await self.session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def create(self, username: str, email: str, password_hash: str) -> User:
        """
        Insert and commit a user.

        The flush runs first so a UNIQUE violation surfaces as ConflictError
        before anything is committed; id and created_at are populated
        afterwards.

        Raises:
            ConflictError: username or email already exists (UNIQUE violation)
        """
        user = User(username=username, email=email, password=password_hash)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # The session is unusable after a failed flush; get_db_session
            # rolls it back when the ConflictError leaves the route
            logger.warning("Unique constraint rejected user '%s': %s", username, e.orig)
            raise ConflictError(
                message=DUPLICATE_USER_MESSAGE,
                context={"username": username, "email": email},
            ) from e
        await self.session.commit()
        return user
