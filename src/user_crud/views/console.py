"""Text rendering of users and status messages."""

from collections.abc import Sequence

from rich.console import Console

from user_crud.users.models import User


def format_user(user: User) -> str:
    return f"ID: {user.id} | Name: {user.name} | Email: {user.email}"


class ConsoleView:
    """Writes users and status messages to a rich console.

    Text is printed literally: rich markup, emoji codes and highlighting are
    disabled so user-provided names and emails are never reinterpreted, and
    lines are not wrapped.
    """

    def __init__(self, console: Console | None = None):
        self._console = console or Console()

    @property
    def console(self) -> Console:
        return self._console

    def display_users(self, users: Sequence[User]) -> None:
        self._write("\n=== User List ===", style="bold")
        if not users:
            self._write("No users registered.", style="yellow")
            return

        for user in users:
            self._write(format_user(user))

    def display_user(self, user: User) -> None:
        self._write("\n=== User ===", style="bold")
        self._write(format_user(user))

    def display_success(self, message: str) -> None:
        self._write(f"\n✓ {message}", style="green")

    def display_error(self, message: str) -> None:
        self._write(f"\n✗ Error: {message}", style="red")

    def _write(self, text: str, style: str | None = None) -> None:
        self._console.print(
            text,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
