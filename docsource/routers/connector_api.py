"""Connector configuration API endpoints.

An orchestrator posts raw connector properties here to have them validated
or partitioned into per-task configurations. Configuration errors are
reported as HTTP 422 with a structured ``detail`` payload.
"""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import APIRouter, HTTPException

from ..ingestion.errors import ConnectorConfigError
from ..ingestion.models import (
    ListResponse,
    TaskConfigsRequest,
    ValidateRequest,
    ValidateResponse,
)
from ..ingestion.partition import task_config_props
from ..ingestion.validation import validate_config
from ..settings import get_settings

router = APIRouter(prefix="/api/connector", tags=["connector"])

logger = logging.getLogger(__name__)


def _config_error(exc: ConnectorConfigError) -> HTTPException:
    logger.warning("rejected connector configuration: %s", exc)
    return HTTPException(status_code=422, detail=exc.to_detail())


@router.post("/validate", response_model=ValidateResponse)
def validate(req: ValidateRequest) -> ValidateResponse:
    """Validate connector properties and return them with defaults applied."""

    try:
        config = validate_config(req.config)
    except ConnectorConfigError as exc:
        raise _config_error(exc) from exc
    return ValidateResponse(config=config.to_props())


@router.post("/task_configs", response_model=ListResponse[Dict[str, str]])
def task_configs(req: TaskConfigsRequest) -> ListResponse[Dict[str, str]]:
    """Partition the file list into at most ``max_tasks`` task configs."""

    max_tasks = req.max_tasks
    if max_tasks is None:
        try:
            max_tasks = get_settings().default_max_tasks
        except RuntimeError as exc:
            logger.error("connector settings are invalid: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
    try:
        config = validate_config(req.config)
    except ConnectorConfigError as exc:
        raise _config_error(exc) from exc
    items = task_config_props(config, max_tasks)
    logger.info(
        "generated %d task config(s) for topic=%s", len(items), config.topic
    )
    return ListResponse[Dict[str, str]](items=items, total=len(items))
