"""Lifecycle wrapper that turns connector properties into task configs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from ..__version__ import __version__
from .errors import ConnectorConfigError
from .models import ConnectorConfig
from .partition import task_config_props
from .validation import validate_config


class ConnectorState(str, Enum):
    """Lifecycle states of a :class:`DocumentSourceConnector`."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    STOPPED = "stopped"


class DocumentSourceConnector:
    """Validate connector properties and hand out per-task configurations.

    ``start`` may only be called on a clean connector, i.e. one that was just
    created or has been stopped. The connector holds no resources, so
    ``stop`` only forgets the validated configuration.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._config: ConnectorConfig | None = None
        self._state = ConnectorState.UNCONFIGURED

    @property
    def state(self) -> ConnectorState:
        return self._state

    @property
    def config(self) -> ConnectorConfig | None:
        return self._config

    def version(self) -> str:
        return __version__

    def start(self, props: Mapping[str, str]) -> None:
        """Validate ``props`` and move to the configured state."""

        if self._state is ConnectorState.CONFIGURED:
            raise RuntimeError("connector already started; call stop() first")

        self._state = ConnectorState.UNCONFIGURED
        self._config = None
        try:
            config = validate_config(props)
        except ConnectorConfigError as exc:
            self.logger.error("invalid connector configuration: %s", exc)
            raise

        self._config = config
        self._state = ConnectorState.CONFIGURED
        self.logger.info(
            "connector configured topic=%s files=%d output_type=%s",
            config.topic,
            len(config.files),
            config.output_type.value,
        )

    def task_configs(self, max_tasks: int) -> list[dict[str, str]]:
        """Return up to ``max_tasks`` task configurations."""

        if self._state is not ConnectorState.CONFIGURED or self._config is None:
            raise RuntimeError(
                f"connector is {self._state.value}; call start() before task_configs()"
            )
        configs = task_config_props(self._config, max_tasks)
        self.logger.info("generated %d task config(s)", len(configs))
        return configs

    def stop(self) -> None:
        self._config = None
        self._state = ConnectorState.STOPPED


__all__ = ["ConnectorState", "DocumentSourceConnector"]
