"""
Translation API glossary layer.

Schemas, errors and the three remote calls (delete, create, inspect).
The coordinator lives in glossary.coordinator and is imported from there
so that this package stays free of the CI runtime.

Example usage:
    from glossary import GlossaryRequest, create_glossary

    request = GlossaryRequest.for_codes_set(name, "gs://bucket/terms.csv", ["en", "fr"])
    operation_name = await create_glossary(request, "my-project", token)
"""

from .errors import (
    GlossaryActionError,
    InputValidationError,
    RemoteCallError,
    RemoteOperationFailed,
    ResponseShapeError,
)
from .schemas import (
    ErrorMessage,
    ErrorPayload,
    GcsSource,
    GlossaryRequest,
    InputConfig,
    LanguageCodesSet,
    LanguagePair,
    OperationMetadata,
    OperationState,
    RemoteOperation,
)
from .client import (
    create_glossary,
    delete_glossary,
    get_operation,
    glossaries_url,
    glossary_resource_name,
)

__all__ = [
    # Errors
    "GlossaryActionError",
    "InputValidationError",
    "RemoteCallError",
    "ResponseShapeError",
    "RemoteOperationFailed",
    # Schemas
    "GlossaryRequest",
    "LanguagePair",
    "LanguageCodesSet",
    "InputConfig",
    "GcsSource",
    "ErrorMessage",
    "ErrorPayload",
    "OperationState",
    "OperationMetadata",
    "RemoteOperation",
    # Remote calls
    "delete_glossary",
    "create_glossary",
    "get_operation",
    "glossaries_url",
    "glossary_resource_name",
]
