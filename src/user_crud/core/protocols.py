from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from user_crud.users.models import User


@runtime_checkable
class UserView(Protocol):
    def display_users(self, users: Sequence[User]) -> None: ...
    def display_user(self, user: User) -> None: ...
    def display_success(self, message: str) -> None: ...
    def display_error(self, message: str) -> None: ...
