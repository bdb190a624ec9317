"""User store adapters.

Implementations:
- In-memory (process-local, cleared on exit)
"""

from .memory import InMemoryUserStore

__all__ = ["InMemoryUserStore"]
