"""Error taxonomy shared by actions and the HTTP layer."""


class ResumeLMError(Exception):
    """Base class for errors raised by ResumeLM actions."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(ResumeLMError):
    """No valid session for the caller."""

    status_code = 401

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class InvalidInputError(ResumeLMError):
    """Malformed or missing input object."""

    status_code = 422


class NotFoundError(ResumeLMError):
    status_code = 404


class RateLimitError(ResumeLMError):
    """Caller exceeded its quota. `retry_after` is in whole seconds."""

    status_code = 429

    def __init__(self, retry_after: int):
        super().__init__(f"Rate limit exceeded. Try again in {retry_after} seconds.")
        self.retry_after = retry_after


class UpstreamError(ResumeLMError):
    """The database or AI provider failed."""

    status_code = 502


class StorageError(UpstreamError):
    pass


class AIServiceError(UpstreamError):
    pass
