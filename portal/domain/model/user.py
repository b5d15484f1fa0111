"""User entity (read-only view of ``wp_users``)."""

from typing import Optional

from portal.domain.model.common import DomainModel
from portal.domain.value import UserId


class User(DomainModel):
    """WordPress user account."""

    id: UserId
    login: str
    display_name: Optional[str] = None
    email: Optional[str] = None
