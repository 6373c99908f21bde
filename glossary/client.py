"""
Translation API glossary calls.

One function per remote call, one HTTP request each.
No retries. No polling. No shared client.

Invariants:
- Access token only ever goes into the Authorization header, never into logs
- Every failure is logged with status and body before it is raised
- A 404 on delete is the only non-2xx status treated as success
"""

import json
import logging
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from actions.base import ActionRuntime
from config import Config

from .errors import RemoteCallError, ResponseShapeError
from .schemas import ErrorPayload, GlossaryRequest, RemoteOperation

logger = logging.getLogger(__name__)


def glossaries_url(
    project_id: str,
    base_url: Optional[str] = None,
    location: Optional[str] = None,
) -> str:
    """Collection URL for a project's glossaries."""
    base_url = base_url or Config.TRANSLATION_API_BASE_URL
    location = location or Config.GLOSSARY_LOCATION
    return f"{base_url}projects/{project_id}/locations/{location}/glossaries"


def glossary_resource_name(
    project_id: str,
    glossary_name: str,
    location: Optional[str] = None,
) -> str:
    """Fully-qualified glossary name as the API expects it in request bodies."""
    location = location or Config.GLOSSARY_LOCATION
    return f"projects/{project_id}/locations/{location}/glossaries/{glossary_name}"


def _auth_headers(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}


def _emit(runtime: Optional[ActionRuntime], level: str, message: str) -> None:
    """Forward a log line to the CI runtime, if one was given."""
    if runtime is None:
        return
    getattr(runtime, level)(message)


def _decode_error(response: httpx.Response) -> Union[ErrorPayload, str]:
    """ErrorPayload if the body is the API error envelope, raw text otherwise."""
    try:
        return ErrorPayload.model_validate(response.json())
    except (ValueError, ValidationError):
        return response.text


async def _send(
    operation: str,
    method: str,
    url: str,
    headers: dict,
    content: Optional[str] = None,
    timeout: Optional[float] = None,
) -> httpx.Response:
    timeout = Config.HTTP_TIMEOUT_S if timeout is None else timeout
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            if method == "DELETE":
                return await client.delete(url, headers=headers)
            if method == "POST":
                return await client.post(url, content=content, headers=headers)
            return await client.get(url, headers=headers)

    except httpx.RequestError as e:
        logger.error(
            f"{operation} glossary request could not be sent: {e}",
            exc_info=True,
            extra={"operation": operation, "url": url},
        )
        raise RemoteCallError(
            operation, f"{operation} request failed", body=str(e)
        ) from e


async def delete_glossary(
    project_id: str,
    glossary_name: str,
    access_token: str,
    runtime: Optional[ActionRuntime] = None,
    timeout: Optional[float] = None,
) -> None:
    """
    Delete a glossary, treating "not found" as success.

    Args:
        project_id: GCP project that owns the glossary
        glossary_name: Short glossary id (last path segment)
        access_token: OAuth bearer token
        runtime: Optional CI runtime for user-facing log lines

    Raises:
        RemoteCallError: Any status >= 300 other than 404
    """
    endpoint = f"{glossaries_url(project_id)}/{glossary_name}"
    response = await _send(
        "delete", "DELETE", endpoint, _auth_headers(access_token), timeout=timeout
    )

    if response.status_code == 404:
        _emit(runtime, "debug", f"response message: {response.text}")
        _emit(runtime, "warning", f"glossary {glossary_name} is not found, continue to create")
        logger.info(
            f"Glossary {glossary_name} not found; nothing to delete",
            extra={"glossary": glossary_name, "status_code": 404},
        )
        return

    if response.status_code >= 300:
        message = response.text
        _emit(runtime, "debug", f"error message: {message}")
        _emit(
            runtime,
            "error",
            f"delete glossary request failed with status:{response.status_code} "
            f"message:{json.dumps(message)}",
        )
        logger.error(
            f"Delete glossary failed: {response.status_code} - {message}",
            extra={
                "operation": "delete",
                "status_code": response.status_code,
                "error_body": message,
            },
        )
        raise RemoteCallError(
            "delete", "delete request failed", response.status_code, message
        )

    _emit(runtime, "debug", f"response message: {response.text}")


async def create_glossary(
    request: Union[GlossaryRequest, str],
    project_id: str,
    access_token: str,
    runtime: Optional[ActionRuntime] = None,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """
    Submit a glossary create request.

    Args:
        request: GlossaryRequest, or an already serialized JSON body
        project_id: GCP project that will own the glossary
        access_token: OAuth bearer token
        runtime: Optional CI runtime for user-facing log lines

    Returns:
        The long-running operation name, or None when the response has none

    Raises:
        RemoteCallError: Status >= 300
        ResponseShapeError: Body is not a JSON object
    """
    body = request.to_wire() if isinstance(request, GlossaryRequest) else request
    headers = {
        **_auth_headers(access_token),
        "Content-Type": "application/json; charset=utf-8",
    }
    response = await _send(
        "create", "POST", glossaries_url(project_id), headers,
        content=body, timeout=timeout,
    )

    if response.status_code >= 300:
        message = response.text
        _emit(runtime, "debug", f"error message: {message}")
        _emit(
            runtime,
            "error",
            f"create glossary request failed with status:{response.status_code} "
            f"message:{message}",
        )
        logger.error(
            f"Create glossary failed: {response.status_code} - {message}",
            extra={
                "operation": "create",
                "status_code": response.status_code,
                "error_body": message,
            },
        )
        raise RemoteCallError(
            "create", "create request failed", response.status_code, message
        )

    try:
        data = response.json()
    except ValueError as e:
        _emit(runtime, "error", f"create glossary response is not JSON: {response.text}")
        raise ResponseShapeError(f"create request failed: {e}") from e

    if not isinstance(data, dict):
        raise ResponseShapeError("create request failed: response is not a JSON object")

    name = data.get("name")
    logger.info(
        f"Glossary create accepted: {name}",
        extra={"operation": "create", "operation_name": name},
    )
    return name


async def get_operation(
    operation_name: str,
    access_token: str,
    runtime: Optional[ActionRuntime] = None,
    timeout: Optional[float] = None,
) -> RemoteOperation:
    """
    Read one snapshot of a long-running operation.

    Args:
        operation_name: Name returned by create_glossary
            (already "projects/.../operations/...")
        access_token: OAuth bearer token
        runtime: Optional CI runtime for user-facing log lines

    Returns:
        RemoteOperation as reported right now

    Raises:
        RemoteCallError: Status >= 300 (body is the ErrorPayload, or raw text
            when the response is not the API error envelope)
        ResponseShapeError: Body does not match the operation shape
    """
    base_url = Config.TRANSLATION_API_BASE_URL
    endpoint = f"{base_url}{operation_name}"
    response = await _send(
        "inspect", "GET", endpoint, _auth_headers(access_token), timeout=timeout
    )

    if response.status_code >= 300:
        payload = _decode_error(response)
        if isinstance(payload, ErrorPayload):
            detail = {
                "error_code": payload.error.code,
                "error_message": payload.error.message,
                "error_status": payload.error.status,
            }
            message = payload.model_dump_json(exclude_none=True)
        else:
            detail = {"error_body": payload}
            message = json.dumps(payload)

        _emit(runtime, "debug", f"error message: {payload}")
        _emit(
            runtime,
            "error",
            f"head operation request failed with status:{response.status_code} "
            f"message:{message}",
        )
        logger.error(
            f"Inspect operation failed: {response.status_code}",
            extra={
                "operation": "inspect",
                "status_code": response.status_code,
                **detail,
            },
        )
        raise RemoteCallError(
            "inspect", "inspect request failed", response.status_code, payload
        )

    try:
        return RemoteOperation.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        _emit(runtime, "error", f"unexpected operation response: {response.text}")
        raise ResponseShapeError(f"inspect request failed: {e}") from e
