"""Unit tests for CreateCommentUseCase."""

import pytest

from portal.application.usecase.comment import (
    COMMENT_PUBLISHED_MESSAGE,
    CreateCommentRequest,
    CreateCommentUseCase,
)
from portal.domain.error import CommentValidationError, NotAuthorizedError
from portal.domain.repository import ArticleRepository, CommentRepository
from portal.domain.service import CommentService
from tests.conftest import make_article, make_author, make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_rejected_before_validation(self, unit_env):
        """No user means forbidden, even for an invalid payload."""
        comment_repo = await unit_env.get(CommentRepository)
        use_case = CreateCommentUseCase(
            comment_service=await unit_env.get(CommentService)
        )

        for payload in ({}, {"article_id": "abc", "content": ""}, None):
            with pytest.raises(NotAuthorizedError):
                await use_case.execute(CreateCommentRequest(payload=payload, user=None))

        assert comment_repo.all() == []

    @pytest.mark.asyncio
    async def test_reply_is_persisted(self, unit_env):
        """A valid reply is stored approved, linked to parent and user."""
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await article_repo.save(make_article(1))
        await comment_repo.add(make_comment(10, article_id=1, minutes=1))
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                payload={"article_id": 1, "content": "hello", "parent_id": 10},
                user=make_author(7),
                ip_address="192.0.2.10",
                user_agent="pytest",
            )
        )

        # Assert
        assert response.message == COMMENT_PUBLISHED_MESSAGE
        assert response.article_id == 1
        assert response.parent_id == 10
        assert response.redirect_to == "/posts/1"

        saved = await comment_repo.find_by_id(response.comment_id)
        assert saved is not None
        assert saved.approved is True
        assert saved.user_id == 7
        assert saved.parent_id == 10
        assert saved.content == "hello"
        assert saved.author_ip == "192.0.2.10"
        assert saved.created_at == response.created_at

    @pytest.mark.asyncio
    async def test_invalid_reply_writes_nothing(self, unit_env):
        """A cross-article parent is rejected and nothing is stored."""
        article_repo = await unit_env.get(ArticleRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await article_repo.save(make_article(1))
        await article_repo.save(make_article(2))
        await comment_repo.add(make_comment(10, article_id=1, minutes=1))
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(CommentValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    payload={"article_id": 2, "content": "hello", "parent_id": 10},
                    user=make_author(7),
                )
            )

        assert "parent_id" in exc_info.value.errors
        assert [c.id for c in comment_repo.all()] == [10]

    @pytest.mark.asyncio
    async def test_body_that_is_not_an_object(self, unit_env):
        """An unreadable body from a signed-in reader is a field error."""
        comment_repo = await unit_env.get(CommentRepository)
        use_case = CreateCommentUseCase(
            comment_service=await unit_env.get(CommentService)
        )

        with pytest.raises(CommentValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(payload=None, user=make_author())
            )

        assert set(exc_info.value.errors) == {"body"}
        assert comment_repo.all() == []
