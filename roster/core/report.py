"""Plain-text rendering of the user report."""

from collections.abc import Iterable

from .messages import Messages
from .models import User


def format_user_line(user: User, messages: Messages) -> str:
    """Format a single report line for ``user``."""
    line = f"[{user.id}] {user.name} <{user.email}> - {messages.status_label(user.status)}"
    if user.is_admin:
        line += f" ({messages.admin_marker})"
    return line


def render_user_report(users: Iterable[User], messages: Messages) -> str:
    """Render the report: header, then one line per user or the empty notice."""
    lines = [messages.report_header]
    user_lines = [format_user_line(user, messages) for user in users]
    if user_lines:
        lines.extend(user_lines)
    else:
        lines.append(messages.report_empty)
    return "\n".join(lines)
