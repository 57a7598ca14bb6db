from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger

if TYPE_CHECKING:
    from ...users.repository import UserGateway
    from ..types.user import User

logger = get_logger(__name__)


def get_user_gateway_from_info(info: strawberry.Info) -> UserGateway:
    return info.context["users"]


async def resolve_user_by_id(info: strawberry.Info, id: int) -> User | None:
    """Resolve a user by ID; absence is a null field, not an error."""
    from ..types.user import User as UserType

    record = await get_user_gateway_from_info(info).get_by_id(id)
    if record is None:
        logger.info("User not found", user_id=id)
        return None

    return UserType(id=record.id, name=record.name)


async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    records = await get_user_gateway_from_info(info).get_all()
    return [UserType(id=record.id, name=record.name) for record in records]
