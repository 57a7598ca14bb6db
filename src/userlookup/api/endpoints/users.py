"""User lookup endpoints."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from ...errors import InvalidUserIdError, UserNotFoundError
from ...logging import get_logger
from ...users.repository import UserGateway
from ..dependencies import get_user_gateway

logger = get_logger(__name__)


router = APIRouter()


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ErrorResponse(BaseModel):
    error: str


USER_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_user_id(raw: str) -> int | None:
    """Parse a path segment as a decimal integer, or return None if it is not one."""
    if not USER_ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


@router.get("", response_model=list[UserResponse])
async def list_users(users: UserGateway = Depends(get_user_gateway)) -> list[UserResponse]:
    """Return every stored user."""
    records = await users.get_all()
    return [UserResponse.model_validate(record) for record in records]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    users: UserGateway = Depends(get_user_gateway),
) -> UserResponse:
    """Return a single user by ID."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        logger.info("Rejected non-integer user id", raw_id=user_id)
        raise InvalidUserIdError()

    record = await users.get_by_id(parsed_id)
    if record is None:
        raise UserNotFoundError()

    return UserResponse.model_validate(record)
