"""Composition root for the Roster user registry.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive CLI loop
"""

import json
import logging
import sys
from collections.abc import Callable
from typing import Any

from roster.adapters.cli.commands import CLICommandHandler, run_command
from roster.adapters.store.memory import InMemoryUserStore
from roster.config import Settings, load_settings
from roster.core.identifiers import IdGenerator, SequentialIdGenerator, UuidIdGenerator
from roster.core.messages import get_messages
from roster.core.user_service import UserService


def _run_cli_interactive(
    cli_handler: CLICommandHandler,
    read_line: Callable[[str], str] = input,
    verbose: bool = False,
) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for management commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
        read_line: Function reading one line of input for a prompt.
        verbose: Forwarded to commands that support verbose logging.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = read_line("roster> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            # Parse command and arguments
            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            # Try to parse arguments as JSON
            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Command arguments must be a JSON object.")
                continue

            if verbose:
                args.setdefault("verbose", True)

            try:
                result = run_command(cli_handler, command, args)
                if command == "report" and result.get("status") == "success":
                    print(result["report"])
                else:
                    print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
            except ValueError as e:
                logger.error(f"Command execution error: {e}")
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  create
    Register a new user. Users start active.
    Required: name, email, age (18 or older)
    Optional: is_admin

    Example: create {"name": "Alice", "email": "alice@email.com", "age": 28}

  get
    Show a single user.
    Required: user_id

    Example: get {"user_id": "uuid-here"}

  deactivate
    Deactivate a user. Admin users are never deactivated.
    Required: user_id

    Example: deactivate {"user_id": "uuid-here"}

  list
    List all users.

  report
    Print the plain-text user report.

  clear
    Remove every user.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_id_generator(settings: Settings) -> IdGenerator:
    """Select the identifier generator configured in ``settings``."""
    if settings.id_strategy == "sequential":
        return SequentialIdGenerator(prefix=settings.id_prefix)
    return UuidIdGenerator()


def build_service(settings: Settings) -> UserService:
    """Wire the in-memory store and the user service from ``settings``."""
    return UserService(
        store=InMemoryUserStore(),
        id_generator=build_id_generator(settings),
        messages=get_messages(settings.locale),
    )


def bootstrap(settings: Settings | None = None, **cli_options: Any) -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the store and core service
    4. Run the interactive CLI

    Raises:
        pydantic.ValidationError: If the configuration is invalid.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading Roster user registry...")

    service = build_service(settings)
    logger.info(
        f"User service ready (locale={settings.locale}, ids={settings.id_strategy})"
    )

    cli_handler = CLICommandHandler(service)
    _run_cli_interactive(cli_handler, verbose=settings.debug, **cli_options)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)


if __name__ == "__main__":
    main()
