"""
Taskboard Backend — Auth Request/Response Schemas
===================================================

What:  Pydantic models for POST /auth/register and POST /auth/login.

Why every field is Optional:
    Absent and empty fields must produce the same 400 "All fields are
    required" answer, which is decided by the workflow. The models still
    reject unknown keys and non-string values before the workflow runs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Body of POST /auth/register."""

    username: Optional[str] = Field(default=None, description="Unique username")
    email: Optional[str] = Field(default=None, description="Unique email address")
    password: Optional[str] = Field(default=None, description="Plaintext password")

    model_config = {"extra": "forbid"}


class LoginRequest(BaseModel):
    """Body of POST /auth/login. `username` accepts a username or an email."""

    username: Optional[str] = Field(default=None, description="Username or email")
    password: Optional[str] = Field(default=None, description="Plaintext password")

    model_config = {"extra": "forbid"}


class PublicUser(BaseModel):
    """
    User as returned by the auth endpoints.

    Security: deliberately has no password field, so the hash can never be
    serialized from this model.
    """
    id: int
    username: str
    email: str

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    """HTTP 201 body for a successful registration."""
    success: bool = True
    message: str = "User registered successfully"
    user: PublicUser


class LoginResponse(BaseModel):
    """HTTP 200 body for a successful login."""
    success: bool = True
    message: str = "Login successful"
    user: PublicUser
