"""Controller translating user use cases into view output."""

from user_crud.core.errors import ValidationError
from user_crud.core.protocols import UserView
from user_crud.users.service import UserService


def _not_found(user_id: int) -> str:
    return f"User with ID {user_id} not found"


class UserController:
    """One method per use case; holds no state of its own."""

    def __init__(self, service: UserService, view: UserView):
        self._service = service
        self._view = view

    def list_users(self) -> None:
        users = self._service.get_all_users()
        self._view.display_users(users)

    def get_user(self, user_id: int) -> None:
        user = self._service.get_user_by_id(user_id)
        if user:
            self._view.display_user(user)
        else:
            self._view.display_error(_not_found(user_id))

    def create_user(self, name: str, email: str) -> None:
        try:
            user = self._service.create_user(name, email)
        except ValidationError as e:
            self._view.display_error(str(e))
            return

        self._view.display_success(f"User created: {user.name}")

    def update_user(self, user_id: int, name: str, email: str) -> None:
        try:
            user = self._service.update_user(user_id, name, email)
        except ValidationError as e:
            self._view.display_error(str(e))
            return

        if user:
            self._view.display_success(f"User updated: {user.name}")
        else:
            self._view.display_error(_not_found(user_id))

    def delete_user(self, user_id: int) -> None:
        if self._service.delete_user(user_id):
            self._view.display_success("User deleted successfully")
        else:
            self._view.display_error(_not_found(user_id))
