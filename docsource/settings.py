"""Runtime settings loaded from the environment."""

from __future__ import annotations

import dataclasses
import os
from functools import lru_cache


@dataclasses.dataclass(frozen=True)
class ConnectorSettings:
    """Runtime configuration shared by the API and the CLI."""

    default_max_tasks: int = 1


@lru_cache(maxsize=1)
def get_settings() -> ConnectorSettings:
    """Load settings from the environment with defaults for development."""

    raw_max_tasks = os.getenv("CONNECTOR_MAX_TASKS", "1")
    try:
        default_max_tasks = int(raw_max_tasks)
    except ValueError as exc:
        raise RuntimeError(
            f"CONNECTOR_MAX_TASKS must be an integer, got {raw_max_tasks!r}"
        ) from exc
    if default_max_tasks < 1:
        raise RuntimeError("CONNECTOR_MAX_TASKS must be at least 1")
    return ConnectorSettings(default_max_tasks=default_max_tasks)


def reset_settings_cache() -> None:
    """Clear cached settings; useful in tests when env vars change."""

    get_settings.cache_clear()
