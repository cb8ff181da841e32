"""Tests for request validation helpers and the error types."""

from accounts.common.exceptions import DeleteFailed, NotFound, Unauthorized, ValidationError
from accounts.domains.auth.passwords import get_password_hash
from accounts.domains.user.models import User
from accounts.domains.user.schemas import UserCreate, UserResponse, UserUpdate
from accounts.domains.user.validation import (
    EMAIL_TAKEN,
    FieldError,
    errors_to_dict,
    from_request_errors,
    validate_create,
    validate_update,
)


class TestFromRequestErrors:

    def test_missing_field_message(self):
        errors = from_request_errors([
            {"loc": ("body", "first_name"), "msg": "Field required", "type": "missing"},
        ])
        assert errors == [FieldError("first_name", "The first_name field is required.")]

    def test_other_errors_keep_pydantic_message(self):
        errors = from_request_errors([
            {"loc": ("body", "email"), "msg": "value is not a valid email address", "type": "value_error"},
        ])
        assert errors == [FieldError("email", "value is not a valid email address")]

    def test_whole_body_error(self):
        errors = from_request_errors([{"loc": ("body",), "msg": "Field required", "type": "missing"}])
        assert errors[0].field == "body"

    def test_json_offset_reported_on_body(self):
        errors = from_request_errors([
            {"loc": ("body", 12), "msg": "JSON decode error", "type": "json_invalid"},
        ])
        assert errors == [FieldError("body", "JSON decode error")]


class TestErrorsToDict:

    def test_groups_by_field(self):
        result = errors_to_dict([
            FieldError("email", "one"),
            FieldError("email", "two"),
            FieldError("password", "three"),
        ])
        assert result == {"email": ["one", "two"], "password": ["three"]}


class TestServiceErrors:

    def test_validation_error_message_is_first_error(self):
        error = ValidationError({"email": ["taken"], "password": ["short"]})
        assert error.message == "taken"
        assert error.status_code == 422

    def test_status_codes(self):
        assert NotFound("x").status_code == 404
        assert Unauthorized("x").status_code == 401
        assert DeleteFailed("x").status_code == 400


class TestUniquenessRules:

    async def _add_user(self, session, email):
        user = User(
            first_name="A",
            last_name="B",
            email=email,
            hashed_password=get_password_hash("pw"),
        )
        session.add(user)
        await session.flush()
        return user

    async def test_create_rejects_existing_email(self, session):
        await self._add_user(session, "a@b.com")
        data = UserCreate(first_name="A", last_name="B", email="a@b.com", password="pw")

        assert await validate_create(session, data) == [FieldError("email", EMAIL_TAKEN)]

    async def test_create_accepts_new_email(self, session):
        data = UserCreate(first_name="A", last_name="B", email="a@b.com", password="pw")

        assert await validate_create(session, data) == []

    async def test_update_ignores_own_email(self, session):
        user = await self._add_user(session, "a@b.com")
        data = UserUpdate(first_name="A", last_name="B", email="a@b.com", password="pw")

        assert await validate_update(session, user.id, data) == []

    async def test_update_rejects_other_users_email(self, session):
        await self._add_user(session, "other@b.com")
        user = await self._add_user(session, "a@b.com")
        data = UserUpdate(first_name="A", last_name="B", email="other@b.com", password="pw")

        assert await validate_update(session, user.id, data) == [FieldError("email", EMAIL_TAKEN)]


class TestUserResponse:

    def test_address_omitted_when_absent(self):
        payload = UserResponse(
            id="1", first_name="A", last_name="B", email="a@b.com",
            created_at="2026-01-01T00:00:00", updated_at="2026-01-01T00:00:00",
        ).to_payload()
        assert "address" not in payload

    def test_address_included_when_present(self):
        payload = UserResponse(
            id="1", first_name="A", last_name="B", email="a@b.com", address="Here",
            created_at="2026-01-01T00:00:00", updated_at="2026-01-01T00:00:00",
        ).to_payload()
        assert payload["address"] == "Here"
