"""Domain errors raised by services and mapped to HTTP responses in main."""


class RepoSearchError(Exception):
    """Base error carrying a client-safe message and an HTTP status."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(RepoSearchError):
    """Input rejected by a service-level check."""

    status_code = 400
    default_message = "Invalid input"


class DuplicateEmailError(RepoSearchError):
    """A user with the same email is already registered."""

    status_code = 400
    default_message = "User with that email already exists"


class InvalidCredentialsError(RepoSearchError):
    """Email and password did not match a user."""

    status_code = 400
    default_message = "Unknown user"


class AuthenticationError(RepoSearchError):
    """Bearer token missing, unknown or expired."""

    status_code = 401
    default_message = "Authentication error"


class StorageError(RepoSearchError):
    """Persistence failure other than a duplicate email."""

    status_code = 500
    default_message = "Storage error"


class UpstreamError(RepoSearchError):
    """The repository search API answered with a non-success status.

    The raw upstream body is returned to the caller unchanged.
    """

    status_code = 400
    default_message = "Upstream search request failed"

    def __init__(self, body: str, upstream_status: int) -> None:
        super().__init__()
        self.body = body
        self.upstream_status = upstream_status


class UpstreamUnavailableError(RepoSearchError):
    """The repository search API could not be reached or sent an unreadable body."""

    status_code = 502
    default_message = "Search service unavailable"
