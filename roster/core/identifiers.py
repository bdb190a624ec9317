"""Identifier generation for user records.

Uniqueness is the only guarantee; the format is opaque to callers.
"""

import itertools
import threading
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Produces a fresh identifier on every call."""

    def __call__(self) -> str: ...


class UuidIdGenerator:
    """Random UUID4 identifiers."""

    def __call__(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """Monotonically increasing identifiers: ``user-1``, ``user-2``, ...

    The counter belongs to the instance, so independent services never
    share a sequence.
    """

    def __init__(self, prefix: str = "user", start: int = 1):
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}-{value}"
