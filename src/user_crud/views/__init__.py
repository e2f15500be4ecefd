"""Console views for user-crud."""

from user_crud.views.console import ConsoleView, format_user

__all__ = ["ConsoleView", "format_user"]
