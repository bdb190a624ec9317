"""Tests for User invariants and the active/inactive state machine."""

import pytest

from roster.core.models import User, UserStatus


@pytest.fixture
def user() -> User:
    """Create a sample regular user."""
    return User(id="user-1", name="Comum", email="comum@teste.com", age=30)


@pytest.fixture
def admin() -> User:
    """Create a sample admin user."""
    return User(id="user-2", name="Admin", email="admin@teste.com", age=40, is_admin=True)


# ============================================================================
# Construction invariants
# ============================================================================


def test_new_user_defaults(user: User) -> None:
    """Users are active non-admins unless told otherwise."""
    assert user.status == UserStatus.ACTIVE
    assert user.is_admin is False
    assert user.is_active


@pytest.mark.parametrize("field", ["id", "name", "email"])
def test_empty_text_fields_rejected(field: str) -> None:
    """id, name and email must be non-empty."""
    values = {"id": "user-1", "name": "Fulano", "email": "fulano@teste.com", "age": 25}
    values[field] = ""
    with pytest.raises(ValueError, match=f"{field} must be a non-empty string"):
        User(**values)


def test_underage_rejected() -> None:
    with pytest.raises(ValueError, match="age must be >= 18"):
        User(id="user-1", name="Menor", email="menor@teste.com", age=17)


@pytest.mark.parametrize("age", [float("nan"), 18.5, 30.0, True])
def test_non_integer_age_rejected(age) -> None:
    with pytest.raises(ValueError, match="age must be an integer"):
        User(id="user-1", name="Fulano", email="fulano@teste.com", age=age)


def test_inactive_admin_rejected() -> None:
    """An admin record can never be built in the inactive state."""
    with pytest.raises(ValueError, match="admin users must be active"):
        User(
            id="user-1",
            name="Admin",
            email="admin@teste.com",
            age=40,
            is_admin=True,
            status=UserStatus.INACTIVE,
        )


# ============================================================================
# deactivate tests
# ============================================================================


def test_deactivate_regular_user(user: User) -> None:
    user.deactivate()
    assert user.status == UserStatus.INACTIVE
    assert not user.is_active


def test_deactivate_is_idempotent(user: User) -> None:
    """Deactivating twice leaves the user inactive without error."""
    user.deactivate()
    user.deactivate()
    assert user.status == UserStatus.INACTIVE


def test_deactivate_admin_fails(admin: User) -> None:
    with pytest.raises(ValueError, match="cannot be deactivated"):
        admin.deactivate()
    assert admin.status == UserStatus.ACTIVE


def test_to_dict(admin: User) -> None:
    assert admin.to_dict() == {
        "id": "user-2",
        "name": "Admin",
        "email": "admin@teste.com",
        "age": 40,
        "is_admin": True,
        "status": "active",
    }
