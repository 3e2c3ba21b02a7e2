"""Connector configuration validation and task partitioning."""

from __future__ import annotations

from .connector import ConnectorState, DocumentSourceConnector
from .errors import ConnectorConfigError, InvalidEnumValue, MissingRequiredField
from .models import ConnectorConfig, OutputType, TaskConfig
from .partition import build_task_configs, group_partitions, task_config_props
from .validation import join_files, split_files, validate_config

__all__ = [
    "ConnectorConfig",
    "ConnectorConfigError",
    "ConnectorState",
    "DocumentSourceConnector",
    "InvalidEnumValue",
    "MissingRequiredField",
    "OutputType",
    "TaskConfig",
    "build_task_configs",
    "group_partitions",
    "join_files",
    "split_files",
    "task_config_props",
    "validate_config",
]
