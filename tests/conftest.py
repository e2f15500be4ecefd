"""Pytest configuration and fixtures."""

import io
from pathlib import Path

import pytest
from dotenv import load_dotenv
from rich.console import Console

from user_crud.config import Settings
from user_crud.users import InMemoryUserRepository, UserService
from user_crud.views import ConsoleView

# Load .env file at test collection time
load_dotenv(Path(__file__).parent.parent / ".env")


class RecordingView:
    """View double that records every call instead of printing."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def display_users(self, users):
        self.calls.append(("users", list(users)))

    def display_user(self, user):
        self.calls.append(("user", user))

    def display_success(self, message):
        self.calls.append(("success", message))

    def display_error(self, message):
        self.calls.append(("error", message))


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Get an empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def service(repository: InMemoryUserRepository) -> UserService:
    """Get a service wrapping the repository fixture."""
    return UserService(repository)


@pytest.fixture
def recording_view() -> RecordingView:
    """Get a view that records calls."""
    return RecordingView()


@pytest.fixture
def console() -> Console:
    """Get a rich console writing plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def console_view(console: Console) -> ConsoleView:
    """Get a console view writing to the console fixture."""
    return ConsoleView(console)


@pytest.fixture
def settings() -> Settings:
    """Get settings independent of the environment."""
    return Settings(_env_file=None, log_level="WARNING", no_color=True, show_banner=True)


@pytest.fixture
def output(console: Console):
    """Get a callable returning everything written to the console fixture."""
    return lambda: console.file.getvalue()
