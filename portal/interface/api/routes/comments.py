"""Comment routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse

from portal.application.usecase.auth import (
    ResolveCurrentUserRequest,
    ResolveCurrentUserUseCase,
)
from portal.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from portal.domain.error import CommentValidationError, NotAuthorizedError

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

VALIDATION_FAILED_MESSAGE = "The given data was invalid."


async def _read_payload(request: Request) -> dict[str, Any] | None:
    """Decode the JSON body, or None when it is not a JSON object."""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    resolve_current_user_use_case: FromDishka[ResolveCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    user_agent: str = Header(default=""),
):
    """Comment on an article or reply to one of its comments.

    Requires authentication. The body is read inside the handler so that
    anonymous callers are refused before it is looked at:

        {"article_id": 12, "content": "...", "parent_id": 34}

    Args:
        request: Incoming request (JSON body, client IP)
        create_comment_use_case: Create comment use case from DI
        resolve_current_user_use_case: Resolve current user use case from DI
        auth_token: JWT token from cookie
        user_agent: User-Agent header

    Returns:
        Acknowledgement with the new comment's details, or a 422 body with
        field-keyed errors

    Raises:
        HTTPException: If not authenticated
    """
    user = await resolve_current_user_use_case.execute(
        ResolveCurrentUserRequest(token=auth_token)
    )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                payload=await _read_payload(request),
                user=user,
                ip_address=request.client.host if request.client else "",
                user_agent=user_agent,
            )
        )
    except NotAuthorizedError as e:
        logfire.warn("Anonymous comment attempt")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except CommentValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"message": VALIDATION_FAILED_MESSAGE, "errors": e.errors},
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )
