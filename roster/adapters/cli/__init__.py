"""Command-line interface adapters.

Provides CLI commands for managing users:
- create: Register a new user
- get: Show a single user
- deactivate: Deactivate a non-admin user
- list / report: Show all users
"""
