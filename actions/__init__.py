"""
CI runtime layer.

Supported runtimes:
- GitHubActionsRuntime: INPUT_* environment, workflow commands, GITHUB_OUTPUT
- RecordingRuntime: in-memory fake (default for tests)

Example usage:
    from actions import RecordingRuntime

    runtime = RecordingRuntime({"project-id": "my-project"})
    runtime.get_input("project-id", required=True)
"""

from .base import ActionRuntime, MissingInputError
from .github import GitHubActionsRuntime
from .stub import RecordingRuntime

__all__ = [
    "ActionRuntime",
    "MissingInputError",
    "GitHubActionsRuntime",
    "RecordingRuntime",
]
