"""
Taskboard Backend — Client Service
====================================

What:  List all users and fetch one user by id ("clients" endpoints).
Who:   Called by the /clients route handlers.
"""

from taskboard.exceptions import NotFoundError
from taskboard.schemas.client import (
    ClientListMeta,
    ClientListResponse,
    ClientRecord,
    ClientResponse,
)
from taskboard.stores.user_store import UserStore


class ClientService:
    def __init__(self, users: UserStore):
        self.users = users

    async def list_clients(self, url: str) -> ClientListResponse:
        """Every user plus a meta block echoing the request url."""
        users = await self.users.list_all()
        return ClientListResponse(
            meta=ClientListMeta(count=len(users), title="All users", url=url),
            data=[ClientRecord.model_validate(user) for user in users],
        )

    async def get_client(self, client_id: int) -> ClientResponse:
        """
        One user by id.

        Raises:
            NotFoundError: no user with that id (→ 404 "User not found")
        """
        user = await self.users.get(client_id)
        if user is None:
            raise NotFoundError(
                message="User not found",
                resource="user",
                resource_id=str(client_id),
            )
        return ClientResponse(user=ClientRecord.model_validate(user))
