"""
CI runtime abstract interface.

Role: the action's only window onto the CI system.
- Input: named string parameters
- Output: log lines, a named output value, a terminal failure signal

Glossary code must depend ONLY on this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class MissingInputError(ValueError):
    """A required action input was not supplied."""
    pass


class ActionRuntime(ABC):
    """
    Abstract CI boundary.

    Subclasses supply raw input lookup and the output side;
    required/trim semantics live here so every runtime agrees on them.
    """

    @abstractmethod
    def _raw_input(self, name: str) -> Optional[str]:
        """Return the unprocessed value of an input, or None if not passed."""
        raise NotImplementedError

    def get_input(
        self,
        name: str,
        required: bool = False,
        trim_whitespace: bool = True,
    ) -> str:
        """
        Read an action input.

        Args:
            name: Input name as declared in action.yml (e.g. "project-id")
            required: Fail when the value is missing or blank
            trim_whitespace: Strip surrounding whitespace

        Returns:
            The value, or "" for an absent optional input

        Raises:
            MissingInputError: Required input missing
        """
        value = self._raw_input(name) or ""
        if required and not value.strip():
            raise MissingInputError(f"Input required and not supplied: {name}")
        return value.strip() if trim_whitespace else value

    @abstractmethod
    def debug(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def info(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def warning(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def error(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Expose a value to later workflow steps."""
        raise NotImplementedError

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """Mark the step as failed with a short message."""
        raise NotImplementedError
