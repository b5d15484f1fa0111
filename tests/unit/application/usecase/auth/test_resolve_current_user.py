"""Unit tests for ResolveCurrentUserUseCase."""

import pytest

from portal.application.usecase.auth import (
    ResolveCurrentUserRequest,
    ResolveCurrentUserUseCase,
)
from portal.domain.repository import UserRepository
from portal.domain.service import JWTService
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveCurrentUserUseCase:
    """Tests for ResolveCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)
        await user_repo.save(make_user(7))
        use_case = await unit_env.get(ResolveCurrentUserUseCase)

        user = await use_case.execute(
            ResolveCurrentUserRequest(token=jwt_service.create_token(7))
        )

        assert user is not None
        assert user.id == 7
        assert user.name == "Ana Macuacua"
        assert user.email == "ana@example.com"

    @pytest.mark.asyncio
    async def test_profile_placeholders(self, unit_env):
        """Users without display name or email get placeholders."""
        user_repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)
        await user_repo.save(make_user(8, display_name="", email=None))
        use_case = await unit_env.get(ResolveCurrentUserUseCase)

        user = await use_case.execute(
            ResolveCurrentUserRequest(token=jwt_service.create_token(8))
        )

        assert user.name == "Usuario"
        assert user.email == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    async def test_missing_or_invalid_token(self, unit_env, token):
        use_case = await unit_env.get(ResolveCurrentUserUseCase)

        assert await use_case.execute(ResolveCurrentUserRequest(token=token)) is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """A valid token for a deleted account means no user."""
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(ResolveCurrentUserUseCase)

        user = await use_case.execute(
            ResolveCurrentUserRequest(token=jwt_service.create_token(404))
        )

        assert user is None
