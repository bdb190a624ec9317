"""Domain models for the Roster user registry.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

ADULT_AGE = 18


class UserStatus(Enum):
    """Lifecycle states for a user record.

    State transitions follow a single directed edge:
    - ACTIVE: Initial state of every record
    - INACTIVE: Record has been deactivated (non-admin only)

    There is no transition back to ACTIVE.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class User:
    """A registered user.

    State Transitions:
        - ACTIVE → INACTIVE (deactivate, non-admin only)
        - INACTIVE → INACTIVE (deactivate, idempotent)

    Note: This dataclass is intentionally mutable so the status can change
    after creation. Stores hand out copies, so mutating a returned record
    never changes stored state.
    """

    id: str
    name: str
    email: str
    age: int
    is_admin: bool = False
    status: UserStatus = UserStatus.ACTIVE

    def __post_init__(self) -> None:
        """Validate user invariants on creation or deserialization."""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        if not self.name:
            raise ValueError("name must be a non-empty string")
        if not self.email:
            raise ValueError("email must be a non-empty string")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"age must be an integer, got {self.age!r}")
        if self.age < ADULT_AGE:
            raise ValueError(f"age must be >= {ADULT_AGE}, got {self.age}")
        if self.is_admin and self.status != UserStatus.ACTIVE:
            raise ValueError("admin users must be active")

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def deactivate(self) -> None:
        """Transition user to inactive status."""
        if self.is_admin:
            raise ValueError(f"Admin user {self.id} cannot be deactivated")
        self.status = UserStatus.INACTIVE

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the record."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "is_admin": self.is_admin,
            "status": self.status.value,
        }
