"""Test suite for the Roster user registry.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - In-memory store and CLI command handler

3. fakes/: Port implementations for testing
   - In-memory implementation of UserStorePort that records calls
"""
