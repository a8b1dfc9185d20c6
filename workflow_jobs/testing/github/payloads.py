"""Payload helpers for GitHub API responses in tests."""

from collections.abc import Sequence
from typing import Any


def repository(
    *,
    name: str = "test-repo",
    owner: str = "test-owner",
    default_branch: str | None = "main",
) -> dict[str, Any]:
    """Create a repository payload for testing.

    Omits default_branch entirely when it is None, as an empty repository
    response would.
    """
    payload: dict[str, Any] = {
        "id": 123456789,
        "name": name,
        "full_name": f"{owner}/{name}",
        "private": False,
        "owner": {"login": owner, "id": 1, "type": "Organization"},
        "html_url": f"https://github.com/{owner}/{name}",
        "description": None,
        "fork": False,
    }
    if default_branch is not None:
        payload["default_branch"] = default_branch
    return payload


def search_response(names: Sequence[str] = ()) -> dict[str, Any]:
    """Create a repository search response payload."""
    return {
        "total_count": len(names),
        "incomplete_results": False,
        "items": [repository(name=name) for name in names],
    }


def workflow(
    *,
    path: str = ".github/workflows/ci.yml",
    workflow_id: int = 161335,
    name: str = "CI",
) -> dict[str, Any]:
    """Create a workflow descriptor payload."""
    return {
        "id": workflow_id,
        "node_id": "MDg6V29ya2Zsb3cxNjEzMzU=",
        "name": name,
        "path": path,
        "state": "active",
        "created_at": "2099-01-01T12:00:00.000Z",
        "updated_at": "2099-01-01T12:00:00.000Z",
        "url": (
            "https://api.github.com/repos/test-owner/test-repo"
            f"/actions/workflows/{workflow_id}"
        ),
        "html_url": f"https://github.com/test-owner/test-repo/blob/main/{path}",
        "badge_url": "https://github.com/test-owner/test-repo/workflows/CI/badge.svg",
    }


def workflows_response(paths: Sequence[str] = ()) -> dict[str, Any]:
    """Create a workflow listing response payload."""
    return {
        "total_count": len(paths),
        "workflows": [
            workflow(path=path, workflow_id=161335 + index)
            for index, path in enumerate(paths)
        ],
    }


def workflow_file(*job_names: str, name: str = "CI") -> str:
    """Render a workflow YAML file declaring the given jobs."""
    lines = [
        f"name: {name}",
        "on:",
        "  push:",
        "    branches:",
        "      - main",
        "jobs:",
    ]
    for job_name in job_names:
        lines += [
            f"  {job_name}:",
            "    runs-on: ubuntu-latest",
            "    steps:",
            "      - uses: actions/checkout@v4",
            f"      - run: echo {job_name}",
        ]
    return "\n".join(lines) + "\n"
