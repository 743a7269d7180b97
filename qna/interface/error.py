"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ValidationError(InterfaceError):
    """Request validation error. Always answered with 400, never retried."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFieldError(ValidationError):
    """A required body field is absent or empty."""

    pass


class InvalidDirectionError(ValidationError):
    """A vote direction does not match the endpoint it was sent to."""

    pass


class ContentTooLongError(ValidationError):
    """Submitted text exceeds its length limit."""

    pass


class UnsupportedQueryError(ValidationError):
    """A query string carries a parameter outside the allow-list."""

    pass
