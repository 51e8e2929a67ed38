"""GitHub Explorer exception classes."""


class GitHubExplorerError(Exception):
    """Base exception for all GitHub Explorer errors."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitHubExplorerError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class BadURLError(GitHubExplorerError):
    """Raised when a request URL cannot be built."""

    def __init__(self, message: str) -> None:
        super().__init__("BAD_URL", message)


class DecodingError(GitHubExplorerError):
    """Raised when a response does not match the expected shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("DECODING_ERROR", message, status_code)


class APIError(GitHubExplorerError):
    """Raised when the API answers with an error status."""

    pass


class AuthenticationError(APIError):
    """Raised when the token is missing, invalid or expired (401)."""

    pass


class NotFoundError(APIError):
    """Raised when a resource is not found."""

    pass


class RateLimitedError(APIError):
    """Raised when the API rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message, status_code)
        self.retry_after = retry_after


class ValidationError(APIError):
    """Raised on rejected queries and other client errors."""

    pass


class ServerError(APIError):
    """Raised on server errors (5xx) and connection failures."""

    pass
