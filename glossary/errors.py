"""
Glossary action error types.

Every error here is fatal to the run. Nothing is retried locally.
The top-level entry point turns any of them into a failed CI step.
"""

from typing import Any, Optional


class GlossaryActionError(Exception):
    """Base class for all glossary action failures."""
    pass


class InputValidationError(GlossaryActionError):
    """Action inputs are missing, malformed or contradictory."""
    pass


class RemoteCallError(GlossaryActionError):
    """
    The Translation API answered a delete/create/inspect call with a failure status.

    Attributes:
        operation: Which call failed ("delete", "create" or "inspect")
        status_code: HTTP status, or None for transport-level failures
        body: Raw text or decoded error payload, kept for diagnostics
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.body = body


class ResponseShapeError(GlossaryActionError):
    """A successful response is missing a field the flow depends on."""
    pass


class RemoteOperationFailed(GlossaryActionError):
    """The long-running create operation reported FAILED."""

    def __init__(self, message: str, remote_message: Optional[str] = None):
        super().__init__(message)
        self.remote_message = remote_message
