"""YAML loading for GitHub Actions workflow files."""

import re
from typing import Any

import yaml

BOOL_TAG = "tag:yaml.org,2002:bool"


class WorkflowLoader(yaml.SafeLoader):
    """SafeLoader that resolves booleans like YAML 1.2 and GitHub do.

    Only true/false spellings become booleans, so keys such as `on`, `off`,
    `yes` and `no` stay strings.
    """


WorkflowLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
WorkflowLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_workflow(text: str) -> Any:
    """Parse a workflow file, raising yaml.YAMLError when it is malformed."""
    return yaml.load(text, Loader=WorkflowLoader)
