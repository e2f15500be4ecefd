import argparse
import logging
import sys

from user_crud.config import DEFAULT_LOG_FORMAT, load_settings
from user_crud.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stderr,  # keep stdout for rendered output
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="user-crud",
        description="User CRUD - layered MVC demo over an in-memory repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  user-crud                        Run the demonstration
  user-crud demo --no-banner       Run the demonstration without the banner
  user-crud --log-level DEBUG      Show repository activity on stderr
  user-crud settings               Show current configuration
""",
    )
    parser.add_argument("--log-level", help="Logging level (overrides USER_CRUD_LOG_LEVEL)")
    parser.add_argument(
        "--no-color", action="store_true", default=None, help="Disable colored output"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    demo_parser = subparsers.add_parser("demo", help="Run the CRUD demonstration")
    demo_parser.add_argument(
        "--no-banner", action="store_true", help="Do not print the banner"
    )

    subparsers.add_parser("settings", help="Show current configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_color:
        overrides["no_color"] = True
    if getattr(args, "no_banner", False):
        overrides["show_banner"] = False

    try:
        settings = load_settings(**overrides)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level_number, settings.log_format)
    logger.debug(f"Running command: {args.command or 'demo'}")

    if args.command == "settings":
        run_settings(settings)
    else:
        run_demo_command(settings)
    return 0


def run_demo_command(settings) -> None:
    from user_crud.app import build_app, run_demo

    run_demo(build_app(settings))


def run_settings(settings) -> None:
    from rich.console import Console
    from rich.table import Table

    console = Console(no_color=settings.no_color)

    table = Table(title="Configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Log Level", settings.log_level)
    table.add_row("Log Format", settings.log_format)
    table.add_row("Color", "off" if settings.no_color else "on")
    table.add_row("Banner", "on" if settings.show_banner else "off")

    console.print(table)


if __name__ == "__main__":
    sys.exit(main())
