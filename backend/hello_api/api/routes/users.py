"""User Routes — create and modify transient user records.

Invariants:
    - POST /users → 201 with the placeholder id; PUT /users and /users/modify → 204, empty body
    - Method is checked by routing before the body is read (405 wins over 400)
    - The body is decoded as JSON whatever its Content-Type
    - Nothing is stored; a successful request only produces a log line

Design Decisions:
    - PUT is served on both /users (method routing) and /users/modify
      (one path per handler), so clients of either style keep working
    - Body read from the Request rather than a body parameter: FastAPI only
      parses JSON for JSON content types, and `curl -d` sends form-urlencoded
"""

import logging

from fastapi import APIRouter, Request, Response, status

from hello_api.core.users import PLACEHOLDER_USER_ID, require_user_fields
from hello_api.schemas.user import (
    ErrorResponse, UserCreatedResponse, UserPayload, decode_user,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    405: {"model": ErrorResponse},
}

_USER_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": UserPayload.model_json_schema()},
        },
    },
}


async def _read_user(request: Request) -> UserPayload:
    user = decode_user(await request.body())
    require_user_fields(user)
    return user


@router.post(
    "", response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED, responses=_ERROR_RESPONSES,
    openapi_extra=_USER_BODY,
)
async def create_user(request: Request):
    """Validate a new user and acknowledge it."""
    user = await _read_user(request)
    logger.info(
        f"Received new user: Name={user.name}, Email={user.email}",
        extra={"user_name": user.name, "user_email": user.email},
    )
    return UserCreatedResponse(
        message="User created successfully", id=PLACEHOLDER_USER_ID,
    )


@router.put(
    "", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses=_ERROR_RESPONSES,
    openapi_extra=_USER_BODY,
)
@router.put(
    "/modify", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses=_ERROR_RESPONSES,
    openapi_extra=_USER_BODY,
)
async def modify_user(request: Request):
    """Validate a modified user; answers with no content."""
    user = await _read_user(request)
    logger.info(
        f"Received modify user: Name={user.name}, Email={user.email}",
        extra={"user_name": user.name, "user_email": user.email},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
