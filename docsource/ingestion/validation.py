"""Validation of raw connector properties into a :class:`ConnectorConfig`."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .errors import InvalidEnumValue, MissingRequiredField
from .models import (
    CONTENT_EXTRACTOR,
    DEFAULT_CONTENT_EXTRACTOR,
    DEFAULT_OUTPUT_TYPE,
    DEFAULT_PREFIX,
    FILES,
    FILES_SEPARATOR,
    OUTPUT_TYPE,
    PREFIX,
    SCHEMA_NAME,
    TOPIC,
    ConnectorConfig,
    OutputType,
)

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset(
    {SCHEMA_NAME, TOPIC, FILES, CONTENT_EXTRACTOR, OUTPUT_TYPE, PREFIX}
)


def split_files(value: str) -> list[str]:
    """Split a comma-separated file list, rejecting blank entries."""

    files = value.split(FILES_SEPARATOR)
    for position, name in enumerate(files):
        if not name.strip():
            raise MissingRequiredField(
                FILES, f"blank entry at position {position}"
            )
    return files


def join_files(files: Iterable[str]) -> str:
    return FILES_SEPARATOR.join(files)


def _required(props: Mapping[str, str], key: str) -> str:
    value = props.get(key)
    if value is None or value == "":
        raise MissingRequiredField(key)
    return value


def _optional(props: Mapping[str, str], key: str, default: str) -> str:
    value = props.get(key)
    if value is None or value == "":
        return default
    return value


def validate_config(props: Mapping[str, str] | ConnectorConfig) -> ConnectorConfig:
    """Validate connector properties and apply defaults.

    Required keys are checked in the order ``schema.name``, ``topic``,
    ``files``. Passing an already validated :class:`ConnectorConfig` returns
    an equal instance.

    Raises:
        MissingRequiredField: a required key is absent or empty, or the file
            list contains a blank entry.
        InvalidEnumValue: ``output.type`` is not one of the allowed formats.
    """

    if isinstance(props, ConnectorConfig):
        props = props.to_props()

    schema_name = _required(props, SCHEMA_NAME)
    topic = _required(props, TOPIC)
    files = split_files(_required(props, FILES))

    content_extractor = _optional(props, CONTENT_EXTRACTOR, DEFAULT_CONTENT_EXTRACTOR)
    output_value = _optional(props, OUTPUT_TYPE, DEFAULT_OUTPUT_TYPE.value)
    allowed = OutputType.allowed()
    if output_value not in allowed:
        raise InvalidEnumValue(OUTPUT_TYPE, output_value, allowed)
    files_prefix = _optional(props, PREFIX, DEFAULT_PREFIX)

    unknown = sorted(set(props) - KNOWN_KEYS)
    if unknown:
        logger.debug("ignoring unknown connector properties: %s", ", ".join(unknown))

    return ConnectorConfig(
        schema_name=schema_name,
        topic=topic,
        files=tuple(files),
        content_extractor=content_extractor,
        output_type=OutputType(output_value),
        files_prefix=files_prefix,
    )


__all__ = ["join_files", "split_files", "validate_config"]
