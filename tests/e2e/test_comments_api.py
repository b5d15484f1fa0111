"""End-to-end tests for comment submission."""

import pytest

from portal.domain.repository import ArticleRepository, CommentRepository, UserRepository
from portal.domain.service import JWTService
from tests.conftest import make_article, make_comment, make_user


async def _seed(container):
    """Article 1 with root comment 10, article 2 empty, user 7."""
    async with container() as request_container:
        article_repo = await request_container.get(ArticleRepository)
        comment_repo = await request_container.get(CommentRepository)
        user_repo = await request_container.get(UserRepository)
        jwt_service = await request_container.get(JWTService)

        await article_repo.save(make_article(1))
        await article_repo.save(make_article(2))
        await comment_repo.add(make_comment(10, article_id=1, minutes=1))
        await user_repo.save(make_user(7))
        return comment_repo, jwt_service.create_token(7)


class TestCreateCommentEndpoint:
    """Tests for POST /comments."""

    @pytest.mark.asyncio
    async def test_reply_created(self, client, container):
        """Authenticated reply returns 201 and is stored."""
        comment_repo, token = await _seed(container)
        client.cookies.set("auth_token", token)

        response = await client.post(
            "/comments",
            json={"article_id": 1, "content": "hello", "parent_id": 10},
            headers={"User-Agent": "e2e-agent"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Comentario publicado com sucesso."
        assert data["article_id"] == 1
        assert data["parent_id"] == 10
        assert data["redirect_to"] == "/posts/1"

        saved = await comment_repo.find_by_id(data["comment_id"])
        assert saved.user_id == 7
        assert saved.approved is True
        assert saved.author_ip == "198.51.100.7"
        assert saved.user_agent == "e2e-agent"

    @pytest.mark.asyncio
    async def test_anonymous_forbidden(self, client, container):
        """No cookie means 403 even for an empty body."""
        comment_repo, _ = await _seed(container)

        response = await client.post("/comments", json={})

        assert response.status_code == 403
        assert response.json()["detail"] == "Authentication required."
        assert [c.id for c in comment_repo.all()] == [10]

    @pytest.mark.asyncio
    async def test_bad_token_forbidden(self, client, container):
        """An unverifiable token counts as no user."""
        await _seed(container)
        client.cookies.set("auth_token", "garbage")

        response = await client.post(
            "/comments",
            json={"article_id": 1, "content": "hello"},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_cross_article_parent_rejected(self, client, container):
        """Replying on article 2 to a comment of article 1 fails with 422."""
        comment_repo, token = await _seed(container)
        client.cookies.set("auth_token", token)

        response = await client.post(
            "/comments",
            json={"article_id": 2, "content": "hello", "parent_id": 10},
        )

        assert response.status_code == 422
        data = response.json()
        assert "message" in data
        assert list(data["errors"]) == ["parent_id"]
        assert [c.id for c in comment_repo.all()] == [10]

    @pytest.mark.asyncio
    async def test_content_limit(self, client, container):
        """2000 characters are accepted, 2001 are not."""
        _, token = await _seed(container)
        client.cookies.set("auth_token", token)

        ok = await client.post(
            "/comments",
            json={"article_id": 1, "content": "a" * 2000},
        )
        too_long = await client.post(
            "/comments",
            json={"article_id": 1, "content": "a" * 2001},
        )

        assert ok.status_code == 201
        assert too_long.status_code == 422
        assert "content" in too_long.json()["errors"]

    @pytest.mark.asyncio
    async def test_anonymous_malformed_body_forbidden(self, client, container):
        """Authentication is checked before the body is parsed."""
        comment_repo, _ = await _seed(container)

        response = await client.post(
            "/comments",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 403
        assert [c.id for c in comment_repo.all()] == [10]

    @pytest.mark.asyncio
    async def test_malformed_body_rejected(self, client, container):
        """A signed-in reader sending broken JSON gets a field-keyed 422."""
        comment_repo, token = await _seed(container)
        client.cookies.set("auth_token", token)

        for body in (b"{not json", b"[1, 2]"):
            response = await client.post(
                "/comments",
                content=body,
                headers={"Content-Type": "application/json"},
            )

            assert response.status_code == 422
            assert list(response.json()["errors"]) == ["body"]
        assert [c.id for c in comment_repo.all()] == [10]

    @pytest.mark.asyncio
    async def test_comment_on_plugin_status_post(self, client, container):
        """Posts with statuses the portal does not know about can be commented on."""
        comment_repo, token = await _seed(container)
        async with container() as request_container:
            article_repo = await request_container.get(ArticleRepository)
            await article_repo.save(
                make_article(3, status="request-pending", post_type="user_request")
            )
        client.cookies.set("auth_token", token)

        response = await client.post(
            "/comments",
            json={"article_id": 3, "content": "hello"},
        )

        assert response.status_code == 201
        assert response.json()["article_id"] == 3

    @pytest.mark.asyncio
    async def test_oversized_article_id_rejected(self, client, container):
        """An ID past the 64-bit range is a validation error."""
        _, token = await _seed(container)
        client.cookies.set("auth_token", token)

        response = await client.post(
            "/comments",
            json={"article_id": 10**20, "content": "hello"},
        )

        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["article_id"]
