"""Article routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from portal.application.usecase.article import (
    ShowArticleRequest,
    ShowArticleResponse,
    ShowArticleUseCase,
)
from portal.application.usecase.auth import (
    ResolveCurrentUserRequest,
    ResolveCurrentUserUseCase,
)
from portal.application.usecase.comment import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from portal.domain.error import NotFoundError

router = APIRouter(prefix="/posts", tags=["articles"], route_class=DishkaRoute)


@router.get("/{identifier}", response_model=ShowArticleResponse)
async def show_article(
    identifier: str,
    show_article_use_case: FromDishka[ShowArticleUseCase],
    resolve_current_user_use_case: FromDishka[ResolveCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ShowArticleResponse:
    """Get an article page: body, sidebars and comment tree.

    Args:
        identifier: Article ID or slug
        show_article_use_case: Show article use case from DI
        resolve_current_user_use_case: Resolve current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Article page data, with ``can_comment`` set for signed-in readers

    Raises:
        HTTPException: If no published article matches
    """
    user = await resolve_current_user_use_case.execute(
        ResolveCurrentUserRequest(token=auth_token)
    )

    try:
        return await show_article_use_case.execute(
            ShowArticleRequest(identifier=identifier, user=user)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logfire.error(
            "Unexpected error loading article page",
            identifier=identifier,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load article",
        )


@router.get("/{identifier}/comments", response_model=GetCommentTreeResponse)
async def get_comment_tree(
    identifier: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """Get the approved comments of an article as a reply tree.

    Args:
        identifier: Article ID or slug
        get_comment_tree_use_case: Get comment tree use case from DI

    Returns:
        Root comments with nested replies, oldest first at every level

    Raises:
        HTTPException: If no published article matches
    """
    try:
        return await get_comment_tree_use_case.execute(
            GetCommentTreeRequest(identifier=identifier)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logfire.error(
            "Unexpected error building comment tree",
            identifier=identifier,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load comments",
        )
