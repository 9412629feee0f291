"""
Taskboard Backend — Client (User Listing) Schemas
===================================================

What:  Response models for GET /clients and GET /clients/{id}.

Note on `password`:
    These endpoints have always returned the stored record including the
    password hash. The field is kept so the response contract does not change
    silently; see DESIGN.md (open question on redaction).
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class ClientRecord(BaseModel):
    """A user row as exposed by the clients endpoints."""

    id: int
    username: str
    email: str
    password: str
    created_at: datetime = Field(alias="createdAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class ClientListMeta(BaseModel):
    count: int
    title: str = "All users"
    url: str


class ClientListResponse(BaseModel):
    """HTTP 200 body of GET /clients."""
    meta: ClientListMeta
    data: List[ClientRecord]


class ClientResponse(BaseModel):
    """HTTP 200 body of GET /clients/{id}."""
    success: bool = True
    user: ClientRecord
