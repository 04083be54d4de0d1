"""Registration submission validator - ordered rule chain.

A submission is the raw, decoded request body. It is checked by a fixed
sequence of rules and the FIRST failing rule decides the outcome; rules
after it are never evaluated.

    1. hasFields      required fields present and not null
    2. stringField    every present field is a string
    3. trimmedField   username/password have no surrounding whitespace
    4. tooSmallField  length minimums from the bounds table
    5. tooLargeField  length maximums from the bounds table (if configured)

The message and location strings are a public contract: clients assert on
them verbatim.

Everything here is pure: no I/O, no shared state, safe to call from any
number of concurrent requests.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

VALIDATION_ERROR_REASON = "ValidationError"

REQUIRED_FIELDS = ("username", "password", "email")
STRING_FIELDS = ("username", "password", "fullname", "email")
TRIMMED_FIELDS = ("username", "password")

# Whitespace and line terminators as JavaScript clients trim them. Unlike
# str.strip() with no argument this includes U+FEFF and excludes the
# U+001C..U+001F separators.
TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class FieldBounds:
    """Inclusive length bounds for one field. ``max_length=None`` means unbounded."""

    min_length: int = 0
    max_length: Optional[int] = None


DEFAULT_FIELD_BOUNDS: Mapping[str, FieldBounds] = {
    "username": FieldBounds(min_length=1),
    "password": FieldBounds(min_length=8),
}


@dataclass(frozen=True)
class Accepted:
    """The submission passed every rule."""


@dataclass(frozen=True)
class Rejected:
    """The first rule that failed, as reported to the client."""

    message: str
    location: str
    reason: str = VALIDATION_ERROR_REASON

    def to_dict(self) -> dict[str, str]:
        return {
            "reason": self.reason,
            "message": self.message,
            "location": self.location,
        }


ValidationOutcome = Union[Accepted, Rejected]

Rule = Callable[[Mapping[str, Any], Mapping[str, FieldBounds]], Optional[Rejected]]


def _present(submission: Mapping[str, Any], field: str) -> bool:
    return submission.get(field) is not None


def _characters(count: int) -> str:
    return f"{count} character" if count == 1 else f"{count} characters"


def check_required_fields(
    submission: Mapping[str, Any], bounds: Mapping[str, FieldBounds]
) -> Optional[Rejected]:
    missing = [field for field in REQUIRED_FIELDS if not _present(submission, field)]
    if missing:
        return Rejected(message="Missing field", location="hasFields")
    return None


def check_string_fields(
    submission: Mapping[str, Any], bounds: Mapping[str, FieldBounds]
) -> Optional[Rejected]:
    # A null optional field (fullname) is treated as absent.
    non_string = [
        field
        for field in STRING_FIELDS
        if _present(submission, field) and not isinstance(submission[field], str)
    ]
    if non_string:
        return Rejected(
            message="Incorrect field type: expected string", location="stringField"
        )
    return None


def check_trimmed_fields(
    submission: Mapping[str, Any], bounds: Mapping[str, FieldBounds]
) -> Optional[Rejected]:
    non_trimmed = [
        field
        for field in TRIMMED_FIELDS
        if submission[field].strip(TRIM_CHARACTERS) != submission[field]
    ]
    if non_trimmed:
        return Rejected(
            message="Field cannot start or end with whitespace", location="trimmedField"
        )
    return None


def check_min_lengths(
    submission: Mapping[str, Any], bounds: Mapping[str, FieldBounds]
) -> Optional[Rejected]:
    too_small = [
        field
        for field, limits in bounds.items()
        if _present(submission, field) and len(submission[field]) < limits.min_length
    ]
    if not too_small:
        return None

    # One combined message naming every minimum, whichever field failed.
    message = " and ".join(
        f"{field.capitalize()} needs to be at least {_characters(limits.min_length)} long"
        for field, limits in bounds.items()
    )
    return Rejected(message=message, location="tooSmallField")


def check_max_lengths(
    submission: Mapping[str, Any], bounds: Mapping[str, FieldBounds]
) -> Optional[Rejected]:
    capped = {
        field: limits for field, limits in bounds.items() if limits.max_length is not None
    }
    too_large = [
        field
        for field, limits in capped.items()
        if _present(submission, field) and len(submission[field]) > limits.max_length
    ]
    if not too_large:
        return None

    message = " and ".join(
        f"{field.capitalize()} needs to be at most {_characters(limits.max_length)} long"
        for field, limits in capped.items()
    )
    return Rejected(message=message, location="tooLargeField")


RULES: tuple[Rule, ...] = (
    check_required_fields,
    check_string_fields,
    check_trimmed_fields,
    check_min_lengths,
    check_max_lengths,
)


def validate(
    submission: Mapping[str, Any],
    bounds: Mapping[str, FieldBounds] = DEFAULT_FIELD_BOUNDS,
) -> ValidationOutcome:
    """
    Run the rule chain against a raw submission.

    Args:
        submission: Decoded request body (any mapping of field -> value)
        bounds: Length bounds table keyed by field name

    Returns:
        Accepted() if every rule passes, otherwise the Rejected produced
        by the first failing rule

    Example:
        >>> validate({"username": "bob", "password": "hello12", "email": "b@x.io"})
        Rejected(message='Username needs to be at least 1 character long and '
                 'Password needs to be at least 8 characters long',
                 location='tooSmallField', reason='ValidationError')
    """
    for rule in RULES:
        rejection = rule(submission, bounds)
        if rejection is not None:
            return rejection
    return Accepted()
