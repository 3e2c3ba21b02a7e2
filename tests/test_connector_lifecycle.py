import logging

import pytest

from docsource import __version__
from docsource.ingestion import (
    ConnectorState,
    DocumentSourceConnector,
    InvalidEnumValue,
    MissingRequiredField,
)


def test_start_and_generate_task_configs(base_props):
    connector = DocumentSourceConnector()
    assert connector.state is ConnectorState.UNCONFIGURED

    connector.start(base_props)

    assert connector.state is ConnectorState.CONFIGURED
    configs = connector.task_configs(2)
    assert [c["files"] for c in configs] == ["a.pdf,b.docx", "c.txt"]


def test_version_matches_package():
    assert DocumentSourceConnector().version() == __version__


def test_task_configs_requires_start():
    connector = DocumentSourceConnector()

    with pytest.raises(RuntimeError):
        connector.task_configs(1)


def test_start_twice_requires_stop(base_props):
    connector = DocumentSourceConnector()
    connector.start(base_props)

    with pytest.raises(RuntimeError):
        connector.start(base_props)


def test_stop_then_restart(base_props):
    connector = DocumentSourceConnector()
    connector.start(base_props)
    connector.stop()

    assert connector.state is ConnectorState.STOPPED
    assert connector.config is None
    with pytest.raises(RuntimeError):
        connector.task_configs(1)

    base_props["files"] = "z"
    connector.start(base_props)
    assert connector.state is ConnectorState.CONFIGURED
    assert connector.task_configs(3) == [
        {
            "schema.name": "documents",
            "topic": "extracted-docs",
            "files": "z",
            "content.extractor": "tika",
            "output.type": "text_xml",
            "files.prefix": "",
        }
    ]


def test_stop_is_idempotent():
    connector = DocumentSourceConnector()
    connector.stop()
    connector.stop()

    assert connector.state is ConnectorState.STOPPED


def test_missing_topic_produces_no_task_configs(base_props, caplog):
    del base_props["topic"]
    connector = DocumentSourceConnector()

    with caplog.at_level(logging.ERROR):
        with pytest.raises(MissingRequiredField) as excinfo:
            connector.start(base_props)

    assert excinfo.value.field == "topic"
    assert connector.state is ConnectorState.UNCONFIGURED
    assert connector.config is None
    assert "missing topic" in caplog.text
    with pytest.raises(RuntimeError):
        connector.task_configs(1)


def test_failed_restart_leaves_connector_unconfigured(base_props):
    connector = DocumentSourceConnector()
    connector.start(base_props)
    connector.stop()

    base_props["output.type"] = "pdf"
    with pytest.raises(InvalidEnumValue):
        connector.start(base_props)

    assert connector.state is ConnectorState.UNCONFIGURED


def test_version_has_no_build_suffix():
    assert all(part.isdigit() for part in DocumentSourceConnector().version().split("."))
