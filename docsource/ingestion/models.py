"""Pydantic models and enums for connector and task configurations."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Generic, List, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Property keys
# ---------------------------------------------------------------------------

SCHEMA_NAME = "schema.name"
TOPIC = "topic"
FILES = "files"
CONTENT_EXTRACTOR = "content.extractor"
OUTPUT_TYPE = "output.type"
PREFIX = "files.prefix"

FILES_SEPARATOR = ","
DEFAULT_CONTENT_EXTRACTOR = "tika"
DEFAULT_PREFIX = ""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class OutputType(str, Enum):
    """Output formats a worker may produce from extracted content."""

    TEXT = "text"
    TEXT_XML = "text_xml"
    XML_TEXT = "xml_text"
    GET_XHTML = "getXHTML"

    @classmethod
    def allowed(cls) -> List[str]:
        return [member.value for member in cls]


DEFAULT_OUTPUT_TYPE = OutputType.TEXT_XML


# ---------------------------------------------------------------------------
# Configuration models
# ---------------------------------------------------------------------------


class ConnectorConfig(BaseModel):
    """Validated connector-level configuration.

    Instances are frozen. Use :func:`docsource.ingestion.validation.validate_config`
    to build one from raw string properties; constructing it directly still
    rejects empty required fields and blank file entries.
    """

    schema_name: str = Field(min_length=1)
    topic: str = Field(min_length=1)
    files: Tuple[str, ...] = Field(min_length=1)
    content_extractor: str = DEFAULT_CONTENT_EXTRACTOR
    output_type: OutputType = DEFAULT_OUTPUT_TYPE
    files_prefix: str = DEFAULT_PREFIX

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("files")
    @classmethod
    def _reject_blank_files(cls, files: Tuple[str, ...]) -> Tuple[str, ...]:
        for position, name in enumerate(files):
            if not name.strip():
                raise ValueError(f"blank file entry at position {position}")
        return files

    @field_validator("content_extractor")
    @classmethod
    def _require_extractor(cls, value: str) -> str:
        if not value:
            raise ValueError("content_extractor must not be empty")
        return value

    def to_props(self) -> Dict[str, str]:
        """Render the configuration as connector properties."""

        return {
            SCHEMA_NAME: self.schema_name,
            TOPIC: self.topic,
            FILES: FILES_SEPARATOR.join(self.files),
            CONTENT_EXTRACTOR: self.content_extractor,
            OUTPUT_TYPE: self.output_type.value,
            PREFIX: self.files_prefix,
        }


class TaskConfig(ConnectorConfig):
    """Configuration handed to a single worker task.

    Carries every connector field verbatim; ``files`` holds only the group of
    files assigned to this task.
    """


# ---------------------------------------------------------------------------
# API payloads
# ---------------------------------------------------------------------------


class ValidateRequest(BaseModel):
    """Raw connector properties submitted for validation."""

    config: Dict[str, str]


class ValidateResponse(BaseModel):
    """Connector properties after defaults have been applied."""

    config: Dict[str, str]


class TaskConfigsRequest(BaseModel):
    """Request to partition a connector configuration into task configs."""

    config: Dict[str, str]
    max_tasks: int | None = Field(default=None, ge=1)


T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """Generic container for list responses."""

    items: List[T]
    total: int


__all__ = [
    "CONTENT_EXTRACTOR",
    "ConnectorConfig",
    "DEFAULT_CONTENT_EXTRACTOR",
    "DEFAULT_OUTPUT_TYPE",
    "DEFAULT_PREFIX",
    "FILES",
    "FILES_SEPARATOR",
    "ListResponse",
    "OUTPUT_TYPE",
    "OutputType",
    "PREFIX",
    "SCHEMA_NAME",
    "TOPIC",
    "TaskConfig",
    "TaskConfigsRequest",
    "ValidateRequest",
    "ValidateResponse",
]
