"""Pydantic models for GitHub API responses and workflow files."""

from collections.abc import Mapping, Sequence
from typing import Any

from workflow_jobs.models.base import Model


class Repository(Model):
    """Repository metadata from GET /repos/{owner}/{repo}."""

    default_branch: str | None = None


class RepositorySearchItem(Model):
    """A single hit from the repository search API."""

    name: str


class RepositorySearchResponse(Model):
    """Response from GET /search/repositories."""

    items: Sequence[RepositorySearchItem] = ()


class Workflow(Model):
    """A workflow descriptor from the workflow listing API."""

    path: str


class WorkflowsResponse(Model):
    """Response from GET /repos/{owner}/{repo}/actions/workflows."""

    workflows: Sequence[Workflow] = ()


class WorkflowDocument(Model):
    """A parsed workflow file; only the job identifiers are consumed."""

    jobs: Mapping[str, Any]
