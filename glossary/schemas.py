"""
Translation API glossary - Pydantic Schemas

PURE DATA MODELS - NO I/O
Mirrors the v3 REST shapes used by the action: the glossary create body,
the long-running operation snapshot and the error envelope.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# ============================================================================
# GLOSSARY CREATE REQUEST (OUTPUT)
# ============================================================================

class LanguagePair(BaseModel):
    """Unidirectional glossary: one source and one target language."""

    source_language_code: str = Field(..., alias="sourceLanguageCode")
    target_language_code: str = Field(..., alias="targetLanguageCode")

    class Config:
        populate_by_name = True
        frozen = True


class LanguageCodesSet(BaseModel):
    """Equivalent-term glossary over a set of languages."""

    language_codes: List[str] = Field(..., alias="languageCodes", min_length=1)

    class Config:
        populate_by_name = True
        frozen = True


class GcsSource(BaseModel):
    input_uri: str = Field(..., alias="inputUri")

    class Config:
        populate_by_name = True


class InputConfig(BaseModel):
    gcs_source: GcsSource = Field(..., alias="gcsSource")

    class Config:
        populate_by_name = True


class GlossaryRequest(BaseModel):
    """
    Body of POST .../glossaries.

    Exactly one of language_pair / language_codes_set is set.
    """

    name: str = Field(..., description="projects/{p}/locations/{l}/glossaries/{g}")
    language_pair: Optional[LanguagePair] = Field(None, alias="languagePair")
    language_codes_set: Optional[LanguageCodesSet] = Field(None, alias="languageCodesSet")
    input_config: InputConfig = Field(..., alias="inputConfig")

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def _one_language_variant(self) -> "GlossaryRequest":
        if (self.language_pair is None) == (self.language_codes_set is None):
            raise ValueError(
                "exactly one of languagePair or languageCodesSet must be set"
            )
        return self

    @classmethod
    def for_pair(
        cls,
        name: str,
        input_uri: str,
        source_language: str,
        target_language: str,
    ) -> "GlossaryRequest":
        return cls(
            name=name,
            language_pair=LanguagePair(
                source_language_code=source_language,
                target_language_code=target_language,
            ),
            input_config=InputConfig(gcs_source=GcsSource(input_uri=input_uri)),
        )

    @classmethod
    def for_codes_set(
        cls,
        name: str,
        input_uri: str,
        language_codes: List[str],
    ) -> "GlossaryRequest":
        return cls(
            name=name,
            language_codes_set=LanguageCodesSet(language_codes=language_codes),
            input_config=InputConfig(gcs_source=GcsSource(input_uri=input_uri)),
        )

    def to_wire(self) -> str:
        """Serialize with API field names, leaving out the unused variant."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ============================================================================
# ERROR ENVELOPE (INPUT)
# ============================================================================

class ErrorMessage(BaseModel):
    code: int
    message: str
    status: Optional[str] = None

    class Config:
        extra = "allow"  # details[] and friends


class ErrorPayload(BaseModel):
    """Body returned by the API on failure responses."""

    error: ErrorMessage


# ============================================================================
# LONG-RUNNING OPERATION (INPUT)
# ============================================================================

class OperationState(str, Enum):
    """Glossary operation states reported in metadata.state."""

    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"


class OperationMetadata(BaseModel):
    type: str = Field("", alias="@type")
    name: str = ""
    state: OperationState = OperationState.STATE_UNSPECIFIED

    class Config:
        populate_by_name = True
        extra = "allow"  # submitTime etc.


class RemoteOperation(BaseModel):
    """
    Snapshot of a long-running operation.

    Owned by the remote service; this process only reads it.
    metadata stays None until the service populates it.
    """

    name: Optional[str] = None
    metadata: Optional[OperationMetadata] = None
    error: Optional[ErrorMessage] = None
    done: Optional[bool] = None

    class Config:
        extra = "allow"  # response, etc.

    @property
    def state(self) -> Optional[OperationState]:
        return self.metadata.state if self.metadata else None
