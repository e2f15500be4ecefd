"""Component wiring and the demonstration sequence."""

import logging
from dataclasses import dataclass

from rich.console import Console

from user_crud.config import Settings, get_settings
from user_crud.users.controller import UserController
from user_crud.users.repository import InMemoryUserRepository, UserRepository
from user_crud.users.service import UserService
from user_crud.views.console import ConsoleView

logger = logging.getLogger(__name__)

BANNER = "=== CRUD MVC + SOLID ==="


@dataclass
class AppContext:
    """One wired component graph, alive for as long as the caller keeps it."""

    settings: Settings
    repository: UserRepository
    service: UserService
    view: ConsoleView
    controller: UserController


def build_app(
    settings: Settings | None = None,
    console: Console | None = None,
    repository: UserRepository | None = None,
) -> AppContext:
    """Wire repository, service, view and controller together.

    Args:
        settings: Settings to use; defaults to the cached process settings.
        console: Console the view writes to; a stdout console honouring
            ``settings.no_color`` is created when omitted.
        repository: Storage backend; a fresh in-memory repository by default.

    Returns:
        A new, independent AppContext.
    """
    settings = settings or get_settings()
    console = console or Console(no_color=settings.no_color)
    repository = repository if repository is not None else InMemoryUserRepository()

    service = UserService(repository)
    view = ConsoleView(console)
    controller = UserController(service, view)

    logger.debug(f"Built application with {type(repository).__name__}")
    return AppContext(
        settings=settings,
        repository=repository,
        service=service,
        view=view,
        controller=controller,
    )


def run_demo(app: AppContext) -> None:
    controller = app.controller

    if app.settings.show_banner:
        app.view.console.print(BANNER, markup=False, highlight=False, style="bold")
        app.view.console.print()

    logger.info("Running demonstration sequence")

    # create
    controller.create_user("João Silva", "joao@email.com")
    controller.create_user("Maria Santos", "maria@email.com")
    controller.create_user("Pedro Costa", "pedro@email.com")

    # read
    controller.list_users()
    controller.get_user(1)

    # update
    controller.update_user(2, "Maria Oliveira", "maria.oliveira@email.com")
    controller.list_users()

    # delete
    controller.delete_user(3)
    controller.list_users()

    # invalid input
    controller.create_user("", "invalido@email.com")
    controller.get_user(999)

    logger.info("Demonstration finished")
