"""GitHub workflow client module."""

from workflow_jobs.github.client import RepositoryWorkflowClient
from workflow_jobs.github.config import GitHubConfig
from workflow_jobs.github.errors import (
    GitHubApiError,
    InvalidTokenError,
    ServiceUnavailableError,
    SubjectNotFoundError,
    UnauthorizedError,
    UnexpectedApiError,
)

__all__ = [
    "GitHubApiError",
    "GitHubConfig",
    "InvalidTokenError",
    "RepositoryWorkflowClient",
    "ServiceUnavailableError",
    "SubjectNotFoundError",
    "UnauthorizedError",
    "UnexpectedApiError",
]
