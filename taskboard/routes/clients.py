"""
Taskboard Backend — Client Route Handlers
===========================================

What:  GET /clients (all users) and GET /clients/{client_id} (one user).
"""

from fastapi import APIRouter, Depends, Request

from taskboard.dependencies import get_client_service
from taskboard.schemas.client import ClientListResponse, ClientResponse
from taskboard.schemas.common import ErrorResponse
from taskboard.services.client_service import ClientService

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get(
    "",
    response_model=ClientListResponse,
    summary="List all users",
)
async def list_clients(
    request: Request,
    service: ClientService = Depends(get_client_service),
) -> ClientListResponse:
    # meta.url echoes what the client asked for, query string included
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return await service.list_clients(url=url)


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get one user by id",
)
async def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    return await service.get_client(client_id)
