"""FastAPI application wiring for the document source connector.

Exposes health/version/config probes and includes the connector router,
which validates connector properties and partitions them into task
configurations for an orchestrator.
"""

from dotenv import load_dotenv
from fastapi import FastAPI

from .__version__ import __build_date__, __commit_sha__, __version__
from .app_logging import init_logging
from .ingestion.models import (
    DEFAULT_CONTENT_EXTRACTOR,
    DEFAULT_OUTPUT_TYPE,
    DEFAULT_PREFIX,
    OutputType,
)
from .routers import connector_api
from .settings import get_settings

load_dotenv()

app = FastAPI(title="Document Source Connector", version=__version__)
init_logging(app)
app.include_router(connector_api.router)


@app.get("/api/health")
async def health():
    """Liveness/readiness probe with a minimal JSON body."""
    return {"status": "ok"}


@app.get("/api/version")
async def version():
    """Return version information for the connector."""
    return {
        "version": __version__,
        "build_date": __build_date__,
        "commit_sha": __commit_sha__,
    }


@app.get("/api/config")
async def config():
    """Expose runtime settings and configuration defaults."""
    settings = get_settings()
    return {
        "default_max_tasks": settings.default_max_tasks,
        "allowed_output_types": OutputType.allowed(),
        "defaults": {
            "content.extractor": DEFAULT_CONTENT_EXTRACTOR,
            "output.type": DEFAULT_OUTPUT_TYPE.value,
            "files.prefix": DEFAULT_PREFIX,
        },
    }
