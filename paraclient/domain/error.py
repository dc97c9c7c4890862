"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidConstraintError(DomainError):
    """Raised when a validation constraint is built with inconsistent bounds."""

    pass
