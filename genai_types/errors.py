"""Generative API error hierarchy.

Every failure surfaced by this package is one of these exceptions. Callers
decide whether to retry, re-authenticate or give up; nothing here recovers
locally.
"""


class GenAIError(Exception):
    """Base exception for generative API operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class HttpError(GenAIError):
    """Transport failure before a response was received.

    Retryable. The transport layer owns the retry schedule.
    """

    def __init__(self, message: str):
        super().__init__(f"HTTP error: {message}")
        self.message = message


class JsonError(GenAIError):
    """Encoding or decoding of a wire payload failed.

    Non-retryable. The payload does not match the schema.
    """

    def __init__(self, message: str):
        super().__init__(f"JSON error: {message}")
        self.message = message

    @classmethod
    def wrap(cls, error: Exception) -> "JsonError":
        """Wrap a parser or validator failure, keeping its full text."""
        return cls(str(error))


class ApiError(GenAIError):
    """Upstream API answered with an error status."""

    def __init__(self, status: int, message: str):
        super().__init__(f"API error ({status}): {message}")
        self.status = status
        self.message = message


class InvalidResponseError(GenAIError):
    """Upstream returned something that is not a valid response."""

    def __init__(self, message: str):
        super().__init__(f"Invalid response: {message}")
        self.message = message


class InvalidRoleError(InvalidResponseError):
    """Role token outside the closed user/assistant/system set."""

    def __init__(self, role: str):
        super().__init__(f"unknown role {role!r}, expected one of 'user', 'assistant', 'system'")
        self.role = role


class RateLimitExceeded(GenAIError):
    """429 - Rate limit exceeded.

    Retryable. ``retry_after`` is in seconds; None leaves the delay to the caller.
    """

    def __init__(self, retry_after: int | None = None):
        if retry_after is not None:
            message = f"Rate limit exceeded. Retry after {retry_after} seconds"
        else:
            message = "Rate limit exceeded"
        super().__init__(message)
        self.retry_after = retry_after


class AuthenticationError(GenAIError):
    """401/403 - Invalid or missing credentials.

    Non-retryable. Check API key configuration.
    """

    def __init__(self, message: str):
        super().__init__(f"Authentication error: {message}")
        self.message = message


def error_from_status(status: int, message: str, retry_after: int | None = None) -> GenAIError:
    """Classify an upstream error status into the matching error kind.

    Args:
        status: HTTP status returned by the upstream API.
        message: Error message from the response body.
        retry_after: Parsed retry-after header in seconds, if any.

    Returns:
        AuthenticationError for 401/403, RateLimitExceeded for 429 and
        ApiError (carrying the status verbatim) for everything else.
    """
    if status in (401, 403):
        return AuthenticationError(message)
    if status == 429:
        return RateLimitExceeded(retry_after=retry_after)
    return ApiError(status, message)


def is_retryable(error: Exception) -> bool:
    """True if the caller may reasonably retry after ``error``."""
    if isinstance(error, RETRYABLE_ERRORS):
        return True
    return isinstance(error, ApiError) and error.status >= 500


# Error classification for retry logic
RETRYABLE_ERRORS = (HttpError, RateLimitExceeded)
NON_RETRYABLE_ERRORS = (JsonError, InvalidResponseError, AuthenticationError)
