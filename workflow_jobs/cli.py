"""CLI entry point for querying GitHub repositories and workflow jobs."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import SecretStr

from workflow_jobs.github import GitHubApiError, GitHubConfig, RepositoryWorkflowClient


def parse_repository(value: str) -> tuple[str, str]:
    """Split an OWNER/REPO argument into its two parts."""
    owner, sep, repo = value.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise argparse.ArgumentTypeError(
            f"Invalid repository '{value}', expected OWNER/REPO"
        )
    return owner, repo


def format_jobs(jobs: Sequence[str]) -> dict[str, Any]:
    """Format job names for JSON output."""
    return {"jobs_count": len(jobs), "jobs": list(jobs)}


def format_repositories(names: Sequence[str]) -> dict[str, Any]:
    """Format repository search results for JSON output."""
    return {"total": len(names), "repositories": list(names)}


async def run(args: argparse.Namespace, config: GitHubConfig) -> dict[str, Any]:
    """Run the selected subcommand and return its JSON-ready output."""
    async with RepositoryWorkflowClient.from_config(config) as client:
        if args.command == "jobs":
            owner, repo = args.repository
            jobs = await client.list_workflow_job_names(repo, owner)
            return format_jobs(jobs)

        if args.command == "branch":
            owner, repo = args.repository
            branch = await client.get_default_branch(repo, owner)
            return {"default_branch": branch}

        names = await client.search_repositories_by_name(args.query, args.owner)
        return format_repositories(names)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Query GitHub repositories and their workflow jobs"
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("GITHUB_TOKEN"),
        help="GitHub token (defaults to $GITHUB_TOKEN)",
    )
    parser.add_argument(
        "--api-base-url",
        default="https://api.github.com",
        help="GitHub API base URL",
    )
    parser.add_argument(
        "--raw-base-url",
        default="https://raw.githubusercontent.com",
        help="Raw content base URL",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    jobs_parser = subparsers.add_parser(
        "jobs", help="List job names declared in the repository's workflows"
    )
    jobs_parser.add_argument(
        "repository", type=parse_repository, help="Repository in OWNER/REPO format"
    )

    branch_parser = subparsers.add_parser(
        "branch", help="Show the repository's default branch"
    )
    branch_parser.add_argument(
        "repository", type=parse_repository, help="Repository in OWNER/REPO format"
    )

    search_parser = subparsers.add_parser(
        "search", help="Search repositories whose name contains QUERY"
    )
    search_parser.add_argument("query", help="Substring to look for in names")
    search_parser.add_argument(
        "--owner", required=True, help="Organization or user to search in"
    )

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("workflow_jobs")

    config = GitHubConfig(
        token=SecretStr(args.token) if args.token else None,
        api_base_url=args.api_base_url,
        raw_base_url=args.raw_base_url,
    )

    try:
        output = asyncio.run(run(args, config))
    except GitHubApiError as e:
        log.error("%s: %s", type(e).__name__, e)
        sys.exit(1)

    print(json.dumps(output, indent=2))
    sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
