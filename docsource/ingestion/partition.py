"""Balanced partitioning of a connector's file list into task configs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Dict, List, TypeVar

from .models import ConnectorConfig, TaskConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def group_partitions(items: Sequence[T], num_groups: int) -> List[List[T]]:
    """Split ``items`` into ``num_groups`` contiguous, balanced groups.

    Group sizes differ by at most one and the first ``len(items) % num_groups``
    groups take the extra item. Order is preserved within and across groups,
    so concatenating the result gives back ``items``.
    """

    if num_groups <= 0:
        raise ValueError("number of groups must be positive")

    per_group, leftover = divmod(len(items), num_groups)
    groups: List[List[T]] = []
    start = 0
    for index in range(num_groups):
        size = per_group + 1 if index < leftover else per_group
        groups.append(list(items[start : start + size]))
        start += size
    return groups


def build_task_configs(config: ConnectorConfig, max_tasks: int) -> List[TaskConfig]:
    """Return one :class:`TaskConfig` per file group, group 0 first."""

    if isinstance(max_tasks, bool) or not isinstance(max_tasks, int):
        raise ValueError(f"max_tasks must be an integer, got {max_tasks!r}")
    if max_tasks < 1:
        raise ValueError(f"max_tasks must be at least 1, got {max_tasks}")

    num_groups = min(len(config.files), max_tasks)
    groups = group_partitions(config.files, num_groups)
    logger.debug(
        "partitioned %d file(s) into %d group(s) (max_tasks=%d)",
        len(config.files),
        num_groups,
        max_tasks,
    )
    return [
        TaskConfig(
            schema_name=config.schema_name,
            topic=config.topic,
            files=tuple(group),
            content_extractor=config.content_extractor,
            output_type=config.output_type,
            files_prefix=config.files_prefix,
        )
        for group in groups
    ]


def task_config_props(config: ConnectorConfig, max_tasks: int) -> List[Dict[str, str]]:
    """Render :func:`build_task_configs` as connector property mappings."""

    return [task.to_props() for task in build_task_configs(config, max_tasks)]


__all__ = ["build_task_configs", "group_partitions", "task_config_props"]
