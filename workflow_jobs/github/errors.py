"""Error taxonomy for GitHub API failures."""

from http import HTTPStatus


class GitHubApiError(Exception):
    """Base class for every classified GitHub API failure."""


class InvalidTokenError(GitHubApiError):
    """Raised before any request when no token is configured."""

    def __init__(self) -> None:
        super().__init__("Invalid github token. Please check your token and try again.")


class UnauthorizedError(GitHubApiError):
    """Raised when the API rejects the token (HTTP 401)."""

    def __init__(self) -> None:
        super().__init__("Unauthorized github api token.")


class SubjectNotFoundError(GitHubApiError):
    """Raised when the organization or user does not exist (HTTP 422)."""

    def __init__(self) -> None:
        super().__init__("Organization or user not found.")


class ServiceUnavailableError(GitHubApiError):
    """Raised when the API is temporarily down (HTTP 503)."""

    def __init__(self) -> None:
        super().__init__("Github api is unavailable. Please try again later.")


class UnexpectedApiError(GitHubApiError):
    """Raised for any other non-200 status."""

    def __init__(self, subject: str, status: int) -> None:
        self.subject = subject
        self.status = status
        super().__init__(
            f"Unexpected github api error! orgOrUser: {subject} status: {status}."
        )


def raise_for_status(status: int, subject: str) -> None:
    """Translate an HTTP status into the matching GitHubApiError.

    Checks run in a fixed order and the first match wins. Returns normally
    only for 200.

    Args:
        status: HTTP status code of the response
        subject: Organization or user the request was scoped to

    Raises:
        UnauthorizedError: On 401
        SubjectNotFoundError: On 422
        ServiceUnavailableError: On 503
        UnexpectedApiError: On any other status except 200

    """
    if status == HTTPStatus.UNAUTHORIZED:
        raise UnauthorizedError()
    if status == HTTPStatus.UNPROCESSABLE_ENTITY:
        raise SubjectNotFoundError()
    if status == HTTPStatus.SERVICE_UNAVAILABLE:
        raise ServiceUnavailableError()
    if status != HTTPStatus.OK:
        raise UnexpectedApiError(subject, status)
