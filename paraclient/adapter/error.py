"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class SigningError(AdapterError):
    """Request could not be signed with the configured credentials."""

    pass
