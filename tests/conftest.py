import os
import pathlib
import sys
import tempfile

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

# docsource.main initialises logging at import time; keep log files out of the repo.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="docsource-logs-"))

from docsource.settings import reset_settings_cache


@pytest.fixture
def base_props() -> dict[str, str]:
    return {
        "schema.name": "documents",
        "topic": "extracted-docs",
        "files": "a.pdf,b.docx,c.txt",
    }


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()
