"""
GitHub Actions runtime.

Pure I/O over the runner's contract:
- Inputs arrive as INPUT_<NAME> environment variables
- Log levels map to workflow commands (::debug::, ::warning::, ::error::)
- Outputs are appended to the file named by GITHUB_OUTPUT

ref: https://docs.github.com/en/actions/using-workflows/workflow-commands-for-github-actions
"""

import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

from .base import ActionRuntime


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


class GitHubActionsRuntime(ActionRuntime):
    """
    Runtime backed by the GitHub Actions runner.

    No formatting intelligence. Messages are written as given,
    escaped only where the command format requires it.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Args:
            environ: Environment to read inputs from (defaults to os.environ)
            stream: Where workflow commands go (defaults to sys.stdout)
        """
        self.environ = environ if environ is not None else os.environ
        self.stream = stream or sys.stdout

    def _raw_input(self, name: str) -> Optional[str]:
        return self.environ.get(_input_env_name(name))

    def _command(self, command: str, message: str) -> None:
        self.stream.write(f"::{command}::{_escape_data(message)}\n")
        self.stream.flush()

    def debug(self, message: str) -> None:
        self._command("debug", message)

    def info(self, message: str) -> None:
        self.stream.write(f"{message}\n")
        self.stream.flush()

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def error(self, message: str) -> None:
        self._command("error", message)

    def set_output(self, name: str, value: str) -> None:
        output_file = self.environ.get("GITHUB_OUTPUT", "")
        if not output_file:
            # Runners without GITHUB_OUTPUT still honour the legacy command
            self.stream.write(f"\n::set-output name={name}::{_escape_data(value)}\n")
            self.stream.flush()
            return

        if "\n" in value or "\r" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            entry = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            entry = f"{name}={value}\n"

        with open(output_file, "a", encoding="utf-8") as f:
            f.write(entry)

    def set_failed(self, message: str) -> None:
        self.error(message)
