"""Core domain logic for the Roster user registry.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import ValidationError
from .messages import Messages, get_messages
from .models import User, UserStatus
from .user_service import UserService

__all__ = [
    "Messages",
    "User",
    "UserService",
    "UserStatus",
    "ValidationError",
    "get_messages",
]
