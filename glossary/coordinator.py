"""
Glossary refresh coordinator.

Sequence (strictly one after another):
  1. delete the existing glossary (404 is fine)
  2. create it again from the gs:// file
  3. optionally wait once (wait-time input, capped)
  4. inspect the returned operation once

It never polls to a terminal state. Whatever the single snapshot says
is the outcome, unless it says FAILED.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from actions.base import ActionRuntime, MissingInputError
from config import Config

from .client import (
    create_glossary,
    delete_glossary,
    get_operation,
    glossary_resource_name,
)
from .errors import InputValidationError, RemoteOperationFailed, ResponseShapeError
from .schemas import GlossaryRequest, OperationState, RemoteOperation

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


@dataclass(frozen=True)
class RequiredInputs:
    access_token: str
    bucket_name: str
    glossary_name: str
    glossary_file_name: str
    project_id: str


def get_required_inputs(runtime: ActionRuntime) -> RequiredInputs:
    """Resolve the inputs every run needs. Missing required ones fail the run."""
    try:
        return RequiredInputs(
            access_token=runtime.get_input("access-token"),
            bucket_name=runtime.get_input("bucket-name", required=True),
            glossary_name=runtime.get_input("glossary-name", required=True),
            glossary_file_name=runtime.get_input("glossary-file-name", required=True),
            project_id=runtime.get_input("project-id", required=True),
        )
    except MissingInputError as e:
        raise InputValidationError(str(e)) from e


def resolve_wait_time(raw: Optional[str], limit: Optional[int] = None) -> int:
    """
    Turn the wait-time input into whole seconds.

    Leading integer wins ("120" -> 120, "15s" -> 15); anything
    unparseable or negative means no wait; values above the limit are capped.
    """
    limit = Config.MAX_WAIT_TIME_S if limit is None else limit
    match = _LEADING_INT_RE.match((raw or "").strip())
    if not match:
        return 0
    digits = match.group(0)
    if digits.startswith("-"):
        return 0
    digits = digits.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        return limit
    return min(int(digits), limit)


def build_request(inputs: RequiredInputs, *inputs_raw: str) -> GlossaryRequest:
    """
    Build the create body for either mode.

    Two values: pair mode, positional (target, source).
    One value: set mode, comma separated language codes.
    """
    name = glossary_resource_name(inputs.project_id, inputs.glossary_name)
    input_uri = f"gs://{inputs.bucket_name}/{inputs.glossary_file_name}"

    if len(inputs_raw) == 2:
        target_language, source_language = inputs_raw
        return GlossaryRequest.for_pair(
            name, input_uri,
            source_language=source_language,
            target_language=target_language,
        )

    return GlossaryRequest.for_codes_set(name, input_uri, inputs_raw[0].split(","))


async def handler(
    *inputs_raw: str,
    runtime: ActionRuntime,
    sleep: Sleep = asyncio.sleep,
) -> RemoteOperation:
    """
    Replace the glossary and report the create operation's state.

    Args:
        *inputs_raw: (target_language, source_language) or (language_codes_set,)
        runtime: CI runtime for inputs and log lines
        sleep: Awaitable delay, swapped out in tests

    Returns:
        RemoteOperation snapshot (RUNNING or SUCCEEDED)

    Raises:
        InputValidationError: Wrong number of inputs or missing required input
        RemoteCallError: Delete/create/inspect answered with a failure status
        ResponseShapeError: Create gave no name, or inspect gave no metadata
        RemoteOperationFailed: The operation reports FAILED
    """
    if len(inputs_raw) > 2:
        raise InputValidationError("input can not be more than 2 string object")
    if not inputs_raw:
        raise InputValidationError("at least one language input is required")

    inputs = get_required_inputs(runtime)

    runtime.info(
        f"try delete existed resource: {inputs.project_id}/{inputs.glossary_name}"
    )
    await delete_glossary(
        inputs.project_id, inputs.glossary_name, inputs.access_token, runtime=runtime
    )

    request = build_request(inputs, *inputs_raw)

    runtime.info(
        f"try create glossary resource: {inputs.project_id}/{inputs.glossary_name}"
    )
    name = await create_glossary(
        request, inputs.project_id, inputs.access_token, runtime=runtime
    )
    if not name:
        runtime.error("failed to parse google response of name field")
        raise ResponseShapeError("failed to parse google response of name field")

    wait_time = resolve_wait_time(runtime.get_input("wait-time"))
    if wait_time != 0:
        runtime.info(f"wait for {wait_time} secs...")
        await sleep(wait_time)

    runtime.info(f"try head operation: {name}")
    operation = await get_operation(name, inputs.access_token, runtime=runtime)

    if operation.metadata is None:
        runtime.error("failed to parse google response of metadata field")
        raise ResponseShapeError("failed to parse google response of metadata field")

    if operation.metadata.state == OperationState.FAILED:
        remote_message = operation.error.message if operation.error else None
        runtime.error(f"create operation has failed. message:{remote_message}")
        logger.error(
            f"Glossary operation {name} failed: {remote_message}",
            extra={"operation_name": name, "state": "FAILED"},
        )
        raise RemoteOperationFailed("create operation failed", remote_message)

    logger.info(
        f"Glossary operation {name} is {operation.metadata.state.value}",
        extra={"operation_name": name, "state": operation.metadata.state.value},
    )
    return operation
