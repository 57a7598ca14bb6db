"""FastAPI dependencies shared by the REST and GraphQL routers."""

from fastapi import Request

from ..users.repository import UserGateway


def get_user_gateway(request: Request) -> UserGateway:
    """Return the storage gateway attached to the running application."""
    return request.app.state.users
