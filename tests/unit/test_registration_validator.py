"""Unit tests for the registration rule chain.

Message and location strings are asserted verbatim because clients
depend on them.
"""

import pytest

from registration_api.domain.services.registration_validator import (
    DEFAULT_FIELD_BOUNDS,
    Accepted,
    FieldBounds,
    Rejected,
    validate,
)

pytestmark = pytest.mark.unit

TOO_SMALL_MESSAGE = (
    "Username needs to be at least 1 character long and "
    "Password needs to be at least 8 characters long"
)


def submission(**overrides):
    data = {
        "username": "exampleUser",
        "password": "examplePass",
        "fullname": "Example User",
        "email": "example@example.com",
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not ...}


# === ACCEPTANCE ===


def test_valid_submission_is_accepted():
    assert validate(submission()) == Accepted()


def test_fullname_is_optional():
    assert validate(submission(fullname=...)) == Accepted()


def test_null_fullname_counts_as_absent():
    assert validate(submission(fullname=None)) == Accepted()


def test_email_format_is_not_checked():
    assert validate(submission(email="not-an-email")) == Accepted()


def test_fullname_whitespace_is_not_checked():
    assert validate(submission(fullname="  padded  ")) == Accepted()


def test_password_at_exact_minimum_is_accepted():
    assert validate(submission(password="hello123")) == Accepted()


def test_extra_fields_are_ignored():
    data = submission()
    data["role"] = ["admin"]

    assert validate(data) == Accepted()


# === hasFields ===


@pytest.mark.parametrize("field", ["username", "password", "email"])
def test_missing_required_field(field):
    result = validate(submission(**{field: ...}))

    assert result == Rejected(message="Missing field", location="hasFields")
    assert result.reason == "ValidationError"


@pytest.mark.parametrize("field", ["username", "password", "email"])
def test_null_required_field_counts_as_missing(field):
    result = validate(submission(**{field: None}))

    assert result.location == "hasFields"


def test_empty_submission():
    assert validate({}).location == "hasFields"


# === stringField ===


@pytest.mark.parametrize(
    "field, value",
    [
        ("password", []),
        ("username", 42),
        ("email", {"address": "x"}),
        ("fullname", True),
        ("password", 12345678),
    ],
)
def test_non_string_field(field, value):
    result = validate(submission(**{field: value}))

    assert result == Rejected(
        message="Incorrect field type: expected string", location="stringField"
    )


def test_presence_is_checked_before_type():
    result = validate(submission(username=..., password=[]))

    assert result.location == "hasFields"


# === trimmedField ===


@pytest.mark.parametrize(
    "field, value",
    [
        ("password", "hello123 "),
        ("password", " hello123"),
        ("username", " exampleUser"),
        ("username", "exampleUser\t"),
        ("password", "hello123\n"),
    ],
)
def test_untrimmed_field(field, value):
    result = validate(submission(**{field: value}))

    assert result == Rejected(
        message="Field cannot start or end with whitespace", location="trimmedField"
    )


@pytest.mark.parametrize("value", ["examplePass\ufeff", "\u00a0examplePass", "examplePass\u3000"])
def test_unicode_whitespace_counts_as_untrimmed(value):
    assert validate(submission(password=value)).location == "trimmedField"


@pytest.mark.parametrize("value", ["examplePass\x1f", "\x1cexamplePass", "examplePass\x85"])
def test_control_separators_are_not_whitespace(value):
    assert validate(submission(password=value)) == Accepted()


def test_inner_whitespace_is_allowed():
    assert validate(submission(password="hello 123")) == Accepted()


def test_type_is_checked_before_trim():
    result = validate(submission(username=" padded ", password=[]))

    assert result.location == "stringField"


# === tooSmallField ===


def test_short_password():
    result = validate(submission(password="hello12"))

    assert result == Rejected(message=TOO_SMALL_MESSAGE, location="tooSmallField")


def test_empty_username_gets_the_same_combined_message():
    result = validate(submission(username=""))

    assert result == Rejected(message=TOO_SMALL_MESSAGE, location="tooSmallField")


def test_whitespace_only_password_fails_trim_before_length():
    result = validate(submission(password="   "))

    assert result.location == "trimmedField"


def test_length_counts_characters_not_bytes():
    # 8 characters, 24 UTF-8 bytes
    assert validate(submission(password="パスワードです。")) == Accepted()
    assert validate(submission(password="パスワード")).location == "tooSmallField"


# === configurable bounds ===


def test_custom_minimums_drive_threshold_and_message():
    bounds = {
        "username": FieldBounds(min_length=3),
        "password": FieldBounds(min_length=10),
    }

    result = validate(submission(password="examplePas"), bounds)
    assert result == Accepted()

    result = validate(submission(username="ab"), bounds)
    assert result == Rejected(
        message="Username needs to be at least 3 characters long and "
        "Password needs to be at least 10 characters long",
        location="tooSmallField",
    )


def test_maximum_violation():
    bounds = {
        "username": FieldBounds(min_length=1),
        "password": FieldBounds(min_length=8, max_length=72),
    }

    result = validate(submission(password="x" * 73), bounds)

    assert result == Rejected(
        message="Password needs to be at most 72 characters long",
        location="tooLargeField",
    )


def test_minimums_are_checked_before_maximums():
    bounds = {
        "username": FieldBounds(min_length=1, max_length=5),
        "password": FieldBounds(min_length=8),
    }

    result = validate(submission(username="toolongname", password="short"), bounds)

    assert result.location == "tooSmallField"


def test_no_maximum_by_default():
    assert all(limits.max_length is None for limits in DEFAULT_FIELD_BOUNDS.values())
    assert validate(submission(password="p" * 10_000)) == Accepted()


# === purity ===


def test_validation_is_repeatable():
    data = submission(password="hello12")

    first = validate(data)
    second = validate(data)

    assert first == second


def test_validation_does_not_mutate_submission():
    data = submission(fullname="  Example  ")
    snapshot = dict(data)

    validate(data)

    assert data == snapshot


def test_rejection_to_dict():
    result = validate(submission(password="hello123 "))

    assert result.to_dict() == {
        "reason": "ValidationError",
        "message": "Field cannot start or end with whitespace",
        "location": "trimmedField",
    }
