"""Port interfaces for the Roster user registry.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - UserStorePort: Hold and query user records

2. **Driving Ports** (adapters/external systems call into core)
   - UserManagementPort: Create, look up, deactivate and report users
"""

from abc import ABC, abstractmethod

from .models import User, UserStatus


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class UserStorePort(ABC):
    """Port for holding user records.

    Implementations must:
    - Keep one record per id
    - Return copies, never the stored objects themselves
    - Preserve insertion order in get_all
    """

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Retrieve a user by its identifier.

        Args:
            user_id: Identifier assigned at creation.

        Returns:
            A copy of the stored User, or None if no record matches.
        """

    @abstractmethod
    def save(self, user: User) -> None:
        """Store a new user record.

        Args:
            user: The record to store.

        Raises:
            ValueError: If a record with the same id already exists.
        """

    @abstractmethod
    def update(self, user: User) -> None:
        """Replace an existing user record.

        Args:
            user: The record carrying the new state.

        Raises:
            ValueError: If no record with that id exists.
        """

    @abstractmethod
    def get_all(self, status: UserStatus | None = None) -> list[User]:
        """Retrieve all users, optionally filtered by status.

        Args:
            status: Only return users in this status (optional).

        Returns:
            Copies of the matching records in insertion order.
        """

    @abstractmethod
    def clear(self) -> int:
        """Remove every record.

        Returns:
            Number of records removed.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class UserManagementPort(ABC):
    """Port for user management operations.

    Called by the CLI adapter and by in-process callers.
    """

    @abstractmethod
    def create_user(
        self, name: str, email: str, age: int, is_admin: bool = False
    ) -> User:
        """Create and store a new active user.

        Raises:
            ValidationError: If a required field is missing or the
                user is under age.
        """

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> User | None:
        """Return the user with ``user_id``, or None if it does not exist."""

    @abstractmethod
    def deactivate_user(self, user_id: str) -> bool:
        """Deactivate a non-admin user.

        Returns:
            True if the user is now inactive, False if the user does
            not exist or is an admin.
        """

    @abstractmethod
    def list_users(self) -> list[User]:
        """Return all users in creation order."""

    @abstractmethod
    def generate_user_report(self) -> str:
        """Render a plain-text report of all users."""

    @abstractmethod
    def clear(self) -> int:
        """Remove every user, returning the number removed."""
