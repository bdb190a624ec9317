"""Domain errors raised by the core services."""

from typing import Literal, TypeAlias

ValidationCode: TypeAlias = Literal["required_fields", "underage"]


class ValidationError(ValueError):
    """Raised when user input violates a creation rule.

    ``code`` identifies the rule independently of the rendered message,
    which depends on the configured locale.
    """

    def __init__(self, message: str, code: ValidationCode):
        super().__init__(message)
        self.message = message
        self.code = code
