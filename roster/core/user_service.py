"""User service: implements UserManagementPort over a UserStorePort.

This is the core service that validates new users, assigns identifiers,
drives the active/inactive lifecycle and renders the user report. All
state changes are logged.
"""

import logging
import threading
from typing import Any

from .errors import ValidationError
from .identifiers import IdGenerator, UuidIdGenerator
from .messages import ENGLISH, Messages
from .models import ADULT_AGE, User, UserStatus
from .ports import UserManagementPort, UserStorePort
from .report import render_user_report

logger = logging.getLogger(__name__)


def _is_present_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_present_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class UserService(UserManagementPort):
    """Core implementation of UserManagementPort.

    Owns no records itself; the store passed in holds them, so every
    service instance is isolated from the others.
    """

    def __init__(
        self,
        store: UserStorePort,
        id_generator: IdGenerator | None = None,
        messages: Messages = ENGLISH,
    ):
        """Initialize the user service.

        Args:
            store: UserStorePort implementation holding the records.
            id_generator: Callable producing unique ids (UUID4 by default).
            messages: Message catalog used for errors and the report.
        """
        self.store = store
        self.id_generator = id_generator or UuidIdGenerator()
        self.messages = messages
        self._lock = threading.Lock()

    def validate_new_user(self, name: Any, email: Any, age: Any) -> None:
        """Check creation rules in order: required fields, then age.

        Raises:
            ValidationError: On the first rule that fails.
        """
        if not (
            _is_present_text(name)
            and _is_present_text(email)
            and _is_present_integer(age)
        ):
            raise ValidationError(self.messages.required_fields, "required_fields")
        if age < ADULT_AGE:
            raise ValidationError(self.messages.underage, "underage")

    def create_user(
        self, name: str, email: str, age: int, is_admin: bool = False
    ) -> User:
        """Create and store a new active user.

        Args:
            name: Display name, must be non-empty.
            email: Email address, must be non-empty.
            age: Age in years, must be at least 18.
            is_admin: Whether the user is exempt from deactivation.

        Returns:
            The stored record, including its assigned id.

        Raises:
            ValidationError: If a required field is missing or the user
                is under age.
            ValueError: If is_admin is not a bool.
        """
        self.validate_new_user(name, email, age)
        if not isinstance(is_admin, bool):
            raise ValueError(f"is_admin must be a boolean, got {is_admin!r}")

        with self._lock:
            user = User(
                id=self.id_generator(),
                name=name,
                email=email,
                age=age,
                is_admin=is_admin,
                status=UserStatus.ACTIVE,
            )
            self.store.save(user)

        logger.info(
            f"User {user.id} created",
            extra={"user_id": user.id, "is_admin": user.is_admin},
        )
        return user

    def get_user_by_id(self, user_id: str) -> User | None:
        user = self.store.get_by_id(user_id)
        if user is None:
            logger.debug(f"User {user_id} not found", extra={"user_id": user_id})
        return user

    def deactivate_user(self, user_id: str) -> bool:
        """Deactivate a non-admin user.

        Deactivating an already inactive user succeeds again.

        Args:
            user_id: Identifier of the user.

        Returns:
            True if the user is now inactive, False if it does not exist
            or is an admin.
        """
        with self._lock:
            user = self.store.get_by_id(user_id)
            if user is None:
                logger.warning(
                    f"Cannot deactivate user {user_id}: not found",
                    extra={"user_id": user_id, "reason": "not_found"},
                )
                return False

            # Update status using domain guard clause
            try:
                user.deactivate()
            except ValueError as e:
                logger.warning(
                    f"Cannot deactivate user {user_id}: {e}",
                    extra={"user_id": user_id, "reason": "admin"},
                )
                return False

            self.store.update(user)

        logger.info(f"User {user_id} deactivated", extra={"user_id": user_id})
        return True

    def list_users(self) -> list[User]:
        return self.store.get_all()

    def generate_user_report(self) -> str:
        users = self.store.get_all()
        logger.debug(
            f"Generating report for {len(users)} users",
            extra={"user_count": len(users)},
        )
        return render_user_report(users, self.messages)

    def clear(self) -> int:
        with self._lock:
            removed = self.store.clear()
        logger.info(f"Cleared {removed} users", extra={"removed": removed})
        return removed
