"""External adapters for the Roster user registry.

This package provides implementations of the core port interfaces and the
outer surfaces that drive the core.

Adapter Organization:

- store/: Adapters holding user records (in-memory)
- cli/: Command-line interface and management commands
"""
