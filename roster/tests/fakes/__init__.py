"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without the real adapters:

- FakeUserStorePort: In-memory user records with call tracking
"""

from .store import FakeUserStorePort

__all__ = ["FakeUserStorePort"]
