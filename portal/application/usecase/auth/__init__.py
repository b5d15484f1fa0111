"""Auth use cases."""

from .resolve_current_user import (
    ResolveCurrentUserRequest,
    ResolveCurrentUserUseCase,
)

__all__ = [
    "ResolveCurrentUserRequest",
    "ResolveCurrentUserUseCase",
]
