"""
Taskboard Backend — Auth Service (Registration & Login Workflows)
===================================================================

What:  Registration (validate → uniqueness check → hash → persist → shape)
       and login (validate → lookup → verify → shape).
Who:   Called by the /auth route handlers.

Registration Flow (POST /auth/register):
    ┌──────────┐   ┌─────────────┐   ┌────────────┐   ┌──────────┐   ┌──────────┐
    │ Required │──▶│ Username or │──▶│   bcrypt   │──▶│  Insert  │──▶│ Response │
    │  fields  │   │ email taken?│   │  (cost 10) │   │  (store) │   │ (no hash)│
    └──────────┘   └─────────────┘   └────────────┘   └──────────┘   └──────────┘
         │400            │400                              │400 (UNIQUE violation)

Error Handling Strategy:
    Only the checks this workflow owns become exceptions here
    (ValidationError, ConflictError, AuthenticationError). Store and hasher
    failures are NOT caught: they reach the error middleware unmodified.
"""

import logging

from taskboard.exceptions import AuthenticationError, ConflictError, ValidationError
from taskboard.schemas.auth import (
    LoginRequest,
    LoginResponse,
    PublicUser,
    RegisterRequest,
    RegisterResponse,
)
from taskboard.security import PasswordHasher
from taskboard.stores.user_store import DUPLICATE_USER_MESSAGE, UserStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class AuthService:
    """
    Registration and login workflows.

    Dependencies are passed in (store for this request's session, shared
    hasher) so tests can substitute AsyncMock doubles for both.
    """

    def __init__(self, users: UserStore, hasher: PasswordHasher):
        self.users = users
        self.hasher = hasher

    async def register(self, payload: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Raises:
            ValidationError: username, email or password absent/empty (→ 400)
            ConflictError:   username or email already used (→ 400)
        """
        if not payload.username or not payload.email or not payload.password:
            logger.info("Registration rejected: missing fields")
            raise ValidationError(message=MISSING_FIELDS_MESSAGE)

        # Fast path; the UNIQUE constraints in UserStore.create are the backstop
        existing = await self.users.find_by_username_or_email(
            username=payload.username,
            email=payload.email,
        )
        if existing is not None:
            logger.info("Registration rejected: '%s' already taken", payload.username)
            raise ConflictError(
                message=DUPLICATE_USER_MESSAGE,
                context={"username": payload.username, "email": payload.email},
            )

        password_hash = await self.hasher.hash(payload.password)
        user = await self.users.create(
            username=payload.username,
            email=payload.email,
            password_hash=password_hash,
        )
        logger.info("User registered: id=%s username=%s", user.id, user.username)

        return RegisterResponse(
            user=PublicUser(id=user.id, username=user.username, email=user.email),
        )

    async def login(self, payload: LoginRequest) -> LoginResponse:
        """
        Check a username-or-email and password pair.

        The same AuthenticationError is raised for an unknown user and for a
        wrong password, so responses do not reveal which usernames exist.
        """
        if not payload.username or not payload.password:
            raise ValidationError(message=MISSING_FIELDS_MESSAGE)

        user = await self.users.find_by_username_or_email(
            username=payload.username,
            email=payload.username,
        )
        if user is None or not await self.hasher.verify(payload.password, user.password):
            logger.warning("Failed login for '%s'", payload.username)
            raise AuthenticationError(message=INVALID_CREDENTIALS_MESSAGE)

        logger.info("User logged in: id=%s", user.id)
        return LoginResponse(
            user=PublicUser(id=user.id, username=user.username, email=user.email),
        )
