"""Tests for the User aggregate root."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from storefront.user.events import UserRegistered
from storefront.user.user import User, UserRole, normalize_email


class TestUserConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert User.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(User)
        for name in ("name", "email", "password_hash", "role", "created_at"):
            assert name in fields

    def test_register_defaults_to_customer(self):
        user = User.register(name="Ann", email="ann@example.com", password="secret1")
        assert user.role == UserRole.CUSTOMER.value
        assert user.is_admin is False
        assert user.created_at is not None

    def test_register_admin(self):
        user = User.register(name="Ada", email="ada@example.com", password="secret1", role=UserRole.ADMIN.value)
        assert user.is_admin is True

    def test_email_is_normalized(self):
        user = User.register(name="Ann", email="  Ann@Example.COM ", password="secret1")
        assert user.email == "ann@example.com"

    def test_name_is_trimmed(self):
        user = User.register(name="  Ann  ", email="ann@example.com", password="secret1")
        assert user.name == "Ann"


class TestPasswordHandling:
    def test_password_is_never_stored_in_plain_text(self):
        user = User.register(name="Ann", email="ann@example.com", password="secret1")
        assert user.password_hash != "secret1"
        assert "secret1" not in user.password_hash

    def test_check_password(self):
        user = User.register(name="Ann", email="ann@example.com", password="secret1")
        assert user.check_password("secret1") is True
        assert user.check_password("wrong") is False
        assert user.check_password("") is False
        assert user.check_password(None) is False

    def test_password_is_required(self):
        with pytest.raises(ValidationError) as exc:
            User.register(name="Ann", email="ann@example.com", password="")
        assert "password" in exc.value.messages

    def test_short_password_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            User.register(name="Ann", email="ann@example.com", password="12345")
        assert exc.value.messages["password"] == ["Password must be at least 6 characters"]

    def test_six_characters_is_enough(self):
        user = User.register(name="Ann", email="ann@example.com", password="123456")
        assert user.check_password("123456")


class TestEmailInvariant:
    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "ann@", "@example.com", "ann@example", "ann@@example.com", "a nn@example.com", "ann..x@example.com"],
    )
    def test_malformed_email_is_rejected(self, email):
        with pytest.raises(ValidationError) as exc:
            User.register(name="Ann", email=email, password="secret1")
        assert "email" in exc.value.messages

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc:
            User.register(name="", email="ann@example.com", password="secret1")
        assert "name" in exc.value.messages

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValidationError):
            User.register(name="Ann", email="ann@example.com", password="secret1", role="superuser")


class TestUserEvents:
    def test_register_raises_user_registered(self):
        user = User.register(name="Ann", email="ann@example.com", password="secret1")
        assert len(user._events) == 1

        event = user._events[0]
        assert isinstance(event, UserRegistered)
        assert event.user_id == user.id
        assert event.email == "ann@example.com"
        assert event.role == UserRole.CUSTOMER.value


def test_normalize_email():
    assert normalize_email(" Ann@Example.com ") == "ann@example.com"
    assert normalize_email(None) is None
