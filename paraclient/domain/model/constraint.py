"""Validation constraints applied by the server to object fields."""

from typing import Any

from pydantic import Field

from paraclient.domain.error import InvalidConstraintError
from paraclient.domain.value.common import ValueObject


class Constraint(ValueObject):
    """A named validation rule and its parameters.

    Use the named constructors rather than building payloads by hand:

        >>> Constraint.size(1, 10).payload
        {'min': 1, 'max': 10, 'message': 'messages.size'}
    """

    name: str
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def _with_message(cls, name: str, **params: Any) -> "Constraint":
        return cls(name=name, payload={**params, "message": f"messages.{name}"})

    @classmethod
    def required(cls) -> "Constraint":
        """The field must have a value."""
        return cls._with_message("required")

    @classmethod
    def min(cls, value: int) -> "Constraint":
        """The field must be a number no smaller than ``value``."""
        return cls._with_message("min", value=value)

    @classmethod
    def max(cls, value: int) -> "Constraint":
        """The field must be a number no larger than ``value``."""
        return cls._with_message("max", value=value)

    @classmethod
    def size(cls, min: int, max: int) -> "Constraint":
        """The field length (string, array or map) must be within bounds.

        Raises:
            InvalidConstraintError: If the bounds are negative or reversed
        """
        if min < 0 or max < min:
            raise InvalidConstraintError(f"Invalid size bounds: {min}..{max}")
        return cls._with_message("size", min=min, max=max)

    @classmethod
    def digits(cls, integer: int, fraction: int) -> "Constraint":
        """The field must be a number with at most this many digits."""
        if integer < 0 or fraction < 0:
            raise InvalidConstraintError(
                f"Invalid digit counts: {integer}.{fraction}"
            )
        return cls._with_message("digits", integer=integer, fraction=fraction)

    @classmethod
    def pattern(cls, regex: str) -> "Constraint":
        """The field must match a regular expression."""
        return cls._with_message("pattern", value=regex)

    @classmethod
    def email(cls) -> "Constraint":
        return cls._with_message("email")

    @classmethod
    def falsy(cls) -> "Constraint":
        """The field must be false."""
        return cls._with_message("false")

    @classmethod
    def truthy(cls) -> "Constraint":
        """The field must be true."""
        return cls._with_message("true")

    @classmethod
    def future(cls) -> "Constraint":
        """The field must be a timestamp in the future."""
        return cls._with_message("future")

    @classmethod
    def past(cls) -> "Constraint":
        """The field must be a timestamp in the past."""
        return cls._with_message("past")

    @classmethod
    def url(cls) -> "Constraint":
        return cls._with_message("url")
