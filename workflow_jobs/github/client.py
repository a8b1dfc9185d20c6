"""Client for discovering repositories, branches and workflow jobs on GitHub."""

import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

import aiohttp

from workflow_jobs.github.config import GitHubConfig
from workflow_jobs.github.errors import InvalidTokenError, raise_for_status
from workflow_jobs.github.loader import load_workflow
from workflow_jobs.github.models import (
    Repository,
    RepositorySearchResponse,
    WorkflowDocument,
    WorkflowsResponse,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class RepositoryWorkflowClient:
    """Read-only GitHub client for branches, repository search and workflow jobs.

    Every call is issued and awaited before the next one starts, including the
    per-file fetches of list_workflow_job_names. Nothing is shared between
    calls apart from the underlying HTTP session.
    """

    config: GitHubConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: GitHubConfig
    ) -> AsyncGenerator["RepositoryWorkflowClient", None]:
        """Create client with managed session lifecycle."""
        async with aiohttp.ClientSession() as session:
            yield cls(config=config, session=session)

    async def get_default_branch(
        self, repository_name: str, org_or_user: str
    ) -> str | None:
        """Return the default branch of a repository.

        Args:
            repository_name: Repository name (e.g., "octo-repo")
            org_or_user: Owning organization or user

        Returns:
            The branch name, or None when the repository reports none

        Raises:
            GitHubApiError: On a missing token or a non-200 response

        """
        self._ensure_token()

        url = f"{self.config.api_base_url}/repos/{org_or_user}/{repository_name}"
        log.info(
            "Resolving default branch: owner=%s, repo=%s", org_or_user, repository_name
        )

        data = await self._get_json(url, org_or_user)
        repository = Repository.model_validate(data)

        return repository.default_branch or None

    async def search_repositories_by_name(
        self, query: str, org_or_user: str
    ) -> Sequence[str]:
        """Search an organization or user for repositories matching query.

        The server-side search is fuzzy, so results are narrowed locally to the
        names that contain query verbatim. Server order is preserved.

        Raises:
            GitHubApiError: On a missing token or a non-200 response

        """
        self._ensure_token()

        url = (
            f"{self.config.api_base_url}/search/repositories"
            f"?q={quote(query, safe='')}+user:{org_or_user}"
        )
        log.info("Searching repositories: query=%s, owner=%s", query, org_or_user)

        data = await self._get_json(url, org_or_user)
        response = RepositorySearchResponse.model_validate(data)

        names = [item.name for item in response.items if query in item.name]
        log.info(
            "Search returned %d candidate(s), %d matching",
            len(response.items),
            len(names),
        )
        return names

    async def list_workflow_job_names(
        self, repository_name: str, org_or_user: str
    ) -> Sequence[str]:
        """Collect the job identifiers declared across a repository's workflows.

        Workflow files are fetched one after another in listing order from
        the raw-content host. A file that cannot be fetched contributes no
        jobs; a file that fails to parse raises the parser's error.

        Returns:
            Sorted, unique job identifiers

        Raises:
            GitHubApiError: On a missing token, a failed workflow listing or a
                failed default branch lookup
            yaml.YAMLError: When a workflow file is not valid YAML
            pydantic.ValidationError: When a workflow file has no jobs mapping

        """
        self._ensure_token()

        url = (
            f"{self.config.api_base_url}/repos/{org_or_user}/{repository_name}"
            "/actions/workflows"
        )
        log.info("Listing workflows: owner=%s, repo=%s", org_or_user, repository_name)

        data = await self._get_json(url, org_or_user)
        workflows = WorkflowsResponse.model_validate(data).workflows

        branch = await self.get_default_branch(repository_name, org_or_user)
        if branch is None:
            log.warning(
                "No default branch for %s/%s, falling back to ref=%s",
                org_or_user,
                repository_name,
                self.config.fallback_ref,
            )
            branch = self.config.fallback_ref

        jobs: list[str] = []
        for workflow in workflows:
            raw_url = (
                f"{self.config.raw_base_url}/{org_or_user}/{repository_name}"
                f"/{branch}/{workflow.path}"
            )
            async with self.session.get(raw_url, headers=self._headers()) as response:
                if response.status != HTTPStatus.OK:
                    log.warning(
                        "Skipping workflow %s: status=%s",
                        workflow.path,
                        response.status,
                    )
                    continue
                text = await response.text()

            document = WorkflowDocument.model_validate(load_workflow(text))
            log.debug(
                "Workflow %s declares %d job(s)", workflow.path, len(document.jobs)
            )
            jobs.extend(document.jobs.keys())

        job_names = list(dict.fromkeys(sorted(jobs)))
        log.info(
            "Found %d unique job(s) across %d workflow(s)",
            len(job_names),
            len(workflows),
        )
        return job_names

    def _ensure_token(self) -> None:
        if not self.config.has_token():
            raise InvalidTokenError()

    def _headers(self) -> Mapping[str, str]:
        token = self.config.token.get_secret_value() if self.config.token else ""
        return {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github.v3+json",
        }

    async def _get_json(self, url: str, subject: str) -> Any:
        """GET an API URL and return its JSON body after status classification."""
        async with self.session.get(url, headers=self._headers()) as response:
            log.debug("GET %s -> %s", url, response.status)
            raise_for_status(response.status, subject)
            return await response.json()
