"""Hello Routes — greeting by query parameter and by path segment.

Invariants:
    - GET /hello always answers 200
    - A repeated `name` query parameter greets its first value
    - GET /hello/<name> answers 400 when the name segment is empty
    - The /hello/ subtree is one route; the name is split out of the raw path,
      so "/hello/" reaches the handler instead of being redirected to "/hello"
"""

from fastapi import APIRouter, Query, Request

from hello_api.core.greetings import greet, name_from_path
from hello_api.schemas.user import ErrorResponse, MessageResponse

router = APIRouter(tags=["hello"])


@router.get("/hello", response_model=MessageResponse)
async def hello(request: Request, name: str | None = Query(None)):
    """Greet the optional `name` query parameter."""
    # FastAPI binds the last repeated value; the first one is greeted
    names = request.query_params.getlist("name")
    return MessageResponse(message=greet(names[0] if names else name))


@router.get(
    "/hello/{rest:path}", response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def hello_path(request: Request):
    """Greet the first path segment after /hello/."""
    name = name_from_path(request.url.path)
    return MessageResponse(message=greet(name))
