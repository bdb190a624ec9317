"""Tests for report rendering, message catalogs and identifier generation."""

import pytest

from roster.core.identifiers import SequentialIdGenerator, UuidIdGenerator
from roster.core.messages import ENGLISH, PORTUGUESE, get_messages
from roster.core.models import User, UserStatus
from roster.core.report import format_user_line, render_user_report


@pytest.fixture
def users() -> list[User]:
    return [
        User(id="user-1", name="Alice", email="alice@email.com", age=28),
        User(
            id="user-2",
            name="Bob",
            email="bob@email.com",
            age=32,
            status=UserStatus.INACTIVE,
        ),
        User(id="user-3", name="Root", email="root@email.com", age=50, is_admin=True),
    ]


class TestRenderUserReport:
    """Tests for render_user_report."""

    def test_empty(self) -> None:
        report = render_user_report([], ENGLISH)
        assert report.splitlines() == ["--- User Report ---", "No users registered."]

    def test_one_line_per_user(self, users: list[User]) -> None:
        lines = render_user_report(users, ENGLISH).splitlines()

        assert lines[0] == "--- User Report ---"
        assert len(lines) == 1 + len(users)
        for line, user in zip(lines[1:], users):
            assert user.id in line
            assert user.name in line
            assert user.status.value in line

    def test_admin_marker(self, users: list[User]) -> None:
        assert "(admin)" in format_user_line(users[2], ENGLISH)
        assert "(admin)" not in format_user_line(users[0], ENGLISH)

    def test_portuguese_labels(self, users: list[User]) -> None:
        report = render_user_report(users, PORTUGUESE)

        assert report.startswith("--- Relatório de Usuários ---")
        assert "Alice" in report and "ativo" in report
        assert "inativo" in report
        assert "(administrador)" in report

    def test_accepts_any_iterable(self, users: list[User]) -> None:
        report = render_user_report(iter(users), ENGLISH)
        assert "Root" in report


class TestMessages:
    """Tests for the locale catalogs."""

    def test_default_locale_is_english(self) -> None:
        assert get_messages() is ENGLISH

    def test_portuguese_locale(self) -> None:
        assert get_messages("pt_BR") is PORTUGUESE

    def test_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unsupported locale 'fr'"):
            get_messages("fr")

    def test_status_labels(self) -> None:
        assert ENGLISH.status_label(UserStatus.ACTIVE) == "active"
        assert ENGLISH.status_label(UserStatus.INACTIVE) == "inactive"
        assert PORTUGUESE.status_label(UserStatus.INACTIVE) == "inativo"


class TestIdGenerators:
    """Tests for identifier generators."""

    def test_uuid_ids_are_unique(self) -> None:
        generate = UuidIdGenerator()
        ids = {generate() for _ in range(100)}
        assert len(ids) == 100

    def test_sequential_ids(self) -> None:
        generate = SequentialIdGenerator()
        assert [generate(), generate(), generate()] == ["user-1", "user-2", "user-3"]

    def test_sequential_custom_prefix_and_start(self) -> None:
        generate = SequentialIdGenerator(prefix="member", start=10)
        assert generate() == "member-10"

    def test_sequential_generators_are_independent(self) -> None:
        first = SequentialIdGenerator()
        second = SequentialIdGenerator()
        first()
        assert second() == "user-1"

    def test_sequential_rejects_empty_prefix(self) -> None:
        with pytest.raises(ValueError, match="prefix must be a non-empty string"):
            SequentialIdGenerator(prefix="")
