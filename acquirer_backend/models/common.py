"""
Common response models and utilities.

Generic response wrappers and shared field types.

Dependencies: pydantic
System role: Common API response structures
"""

import re
from typing import Annotated, Any, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, StringConstraints

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9\s\-()]{5,19}$")


class DataResponse(BaseModel, Generic[T]):
    """Generic success response wrapper: {"message": ..., "data": ...}."""

    message: str = "OK"
    data: T


class MessageResponse(BaseModel):
    """Success response carrying only a message."""

    message: str


def blank_strings_to_none(values: Any) -> Any:
    """
    Turn empty form/JSON strings into None before field validation.

    Multipart forms send "" for untouched inputs, which would otherwise
    fail enum and number parsing.
    """
    if isinstance(values, dict):
        return {
            key: (None if isinstance(value, str) and not value.strip() else value)
            for key, value in values.items()
        }
    return values


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


def _check_phone_number(value: str) -> str:
    if not PHONE_PATTERN.match(value):
        raise ValueError("Invalid phone number")
    return value


EmailAddress = Annotated[
    str, StringConstraints(strip_whitespace=True, max_length=255), AfterValidator(_check_email)
]
PhoneNumber = Annotated[
    str, StringConstraints(strip_whitespace=True, max_length=64), AfterValidator(_check_phone_number)
]
