"""CLI command implementations for Roster user management.

Provides human-initiated actions through the command-line interface.

This adapter maps CLI commands (create, get, deactivate, list, report, clear)
to UserManagementPort operations. It handles CLI-specific formatting and
error reporting.
"""

import logging
from typing import Any

from roster.core.ports import UserManagementPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to UserManagementPort."""

    def __init__(self, management: UserManagementPort):
        """Initialize the CLI command handler.

        Args:
            management: UserManagementPort implementation to execute commands.
        """
        self.management = management

    def create_user(
        self,
        name: Any,
        email: Any,
        age: Any,
        is_admin: bool = False,
        verbose: bool = False,
    ) -> dict[str, Any]:
        """Create a user via CLI.

        Args:
            name: Display name.
            email: Email address.
            age: Age in years.
            is_admin: Whether the new user is an admin.
            verbose: If True, log additional information.

        Returns:
            Dictionary with the created user or status/message on error.
        """
        try:
            user = self.management.create_user(name, email, age, is_admin)
        except ValueError as e:
            logger.error(f"Failed to create user: {e}")
            return {
                "status": "error",
                "operation": "create",
                "message": str(e),
            }

        if verbose:
            logger.info(
                f"Created user {user.id}",
                extra={"user_id": user.id, "verbose": True},
            )

        return {
            "status": "success",
            "operation": "create",
            "user_id": user.id,
            "data": user.to_dict(),
        }

    def get_user(self, user_id: str) -> dict[str, Any]:
        """Retrieve a user via CLI."""
        user = self.management.get_user_by_id(user_id)
        if user is None:
            return {
                "status": "error",
                "operation": "get",
                "user_id": user_id,
                "message": f"User {user_id} not found",
            }
        return {
            "status": "success",
            "operation": "get",
            "user_id": user_id,
            "data": user.to_dict(),
        }

    def deactivate_user(self, user_id: str, verbose: bool = False) -> dict[str, Any]:
        """Deactivate a user via CLI.

        A refused deactivation (unknown id or admin) is still a successful
        command; ``deactivated`` carries the outcome.
        """
        deactivated = self.management.deactivate_user(user_id)

        if verbose:
            logger.info(
                f"Deactivation of user {user_id}: {deactivated}",
                extra={"user_id": user_id, "verbose": True},
            )

        return {
            "status": "success",
            "operation": "deactivate",
            "user_id": user_id,
            "deactivated": deactivated,
            "message": (
                f"User {user_id} deactivated"
                if deactivated
                else f"User {user_id} was not deactivated"
            ),
        }

    def list_users(self) -> dict[str, Any]:
        users = self.management.list_users()
        return {
            "status": "success",
            "operation": "list",
            "count": len(users),
            "data": [user.to_dict() for user in users],
        }

    def generate_report(self) -> dict[str, Any]:
        return {
            "status": "success",
            "operation": "report",
            "report": self.management.generate_user_report(),
        }

    def clear_users(self) -> dict[str, Any]:
        removed = self.management.clear()
        return {
            "status": "success",
            "operation": "clear",
            "removed": removed,
        }


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Maps command names to handler methods.

    Args:
        handler: CLICommandHandler instance.
        command: Command name.
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required
            parameter is missing.
    """
    if command == "create":
        return handler.create_user(
            name=args.get("name"),
            email=args.get("email"),
            age=args.get("age"),
            is_admin=args.get("is_admin", False),
            verbose=args.get("verbose", False),
        )

    elif command == "get":
        if "user_id" not in args:
            raise ValueError("Missing required parameter: user_id")
        return handler.get_user(args["user_id"])

    elif command == "deactivate":
        if "user_id" not in args:
            raise ValueError("Missing required parameter: user_id")
        return handler.deactivate_user(
            args["user_id"],
            verbose=args.get("verbose", False),
        )

    elif command == "list":
        return handler.list_users()

    elif command == "report":
        return handler.generate_report()

    elif command == "clear":
        return handler.clear_users()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
