"""Configuration for the GitHub workflow client."""

from pydantic import BaseModel, SecretStr


class GitHubConfig(BaseModel):
    """Configuration for RepositoryWorkflowClient."""

    token: SecretStr | None = None
    api_base_url: str = "https://api.github.com"
    raw_base_url: str = "https://raw.githubusercontent.com"
    # Branch segment for raw-content URLs when the repository reports none
    fallback_ref: str = "HEAD"

    def has_token(self) -> bool:
        """Return True when a non-empty token is configured."""
        return self.token is not None and bool(self.token.get_secret_value())
