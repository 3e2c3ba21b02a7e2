import pytest
from pydantic import ValidationError

from docsource.ingestion import (
    ConnectorConfig,
    InvalidEnumValue,
    MissingRequiredField,
    OutputType,
    join_files,
    split_files,
    validate_config,
)


def test_validate_applies_defaults(base_props):
    config = validate_config(base_props)

    assert config.schema_name == "documents"
    assert config.topic == "extracted-docs"
    assert config.files == ("a.pdf", "b.docx", "c.txt")
    assert config.content_extractor == "tika"
    assert config.output_type is OutputType.TEXT_XML
    assert config.files_prefix == ""


def test_validate_treats_empty_optionals_as_absent(base_props):
    base_props.update({"content.extractor": "", "output.type": "", "files.prefix": ""})

    config = validate_config(base_props)

    assert config.content_extractor == "tika"
    assert config.output_type is OutputType.TEXT_XML
    assert config.files_prefix == ""


def test_validate_keeps_explicit_values(base_props):
    base_props.update(
        {
            "content.extractor": "custom",
            "output.type": "getXHTML",
            "files.prefix": "/data/",
        }
    )

    config = validate_config(base_props)

    assert config.content_extractor == "custom"
    assert config.output_type is OutputType.GET_XHTML
    assert config.files_prefix == "/data/"


@pytest.mark.parametrize("output_type", ["text", "text_xml", "xml_text", "getXHTML"])
def test_validate_is_idempotent(base_props, output_type):
    base_props["output.type"] = output_type
    config = validate_config(base_props)

    assert validate_config(config.to_props()) == config
    assert validate_config(config) == config


@pytest.mark.parametrize("key", ["schema.name", "topic", "files"])
def test_missing_required_field(base_props, key):
    del base_props[key]

    with pytest.raises(MissingRequiredField) as excinfo:
        validate_config(base_props)

    assert excinfo.value.field == key
    assert str(excinfo.value) == f"missing {key}"


@pytest.mark.parametrize("key", ["schema.name", "topic", "files"])
def test_empty_required_field(base_props, key):
    base_props[key] = ""

    with pytest.raises(MissingRequiredField) as excinfo:
        validate_config(base_props)

    assert excinfo.value.field == key


def test_required_fields_checked_in_order():
    with pytest.raises(MissingRequiredField) as excinfo:
        validate_config({"files": "a"})

    assert excinfo.value.field == "schema.name"


@pytest.mark.parametrize("files", ["a,b,", ",a", "a,,b", "a, ,b"])
def test_blank_file_entries_rejected(base_props, files):
    base_props["files"] = files

    with pytest.raises(MissingRequiredField) as excinfo:
        validate_config(base_props)

    assert excinfo.value.field == "files"
    assert "blank entry" in str(excinfo.value)


@pytest.mark.parametrize("value", ["pdf", "TEXT", "xml", " text"])
def test_invalid_output_type(base_props, value):
    base_props["output.type"] = value

    with pytest.raises(InvalidEnumValue) as excinfo:
        validate_config(base_props)

    err = excinfo.value
    assert err.field == "output.type"
    assert err.value == value
    assert err.allowed == ["text", "text_xml", "xml_text", "getXHTML"]
    assert str(err) == "output.type has to be one of [text, text_xml, xml_text, getXHTML]"
    assert err.to_detail()["error"] == "invalid_enum_value"


def test_duplicates_and_order_preserved(base_props):
    base_props["files"] = "b,a,b"

    assert validate_config(base_props).files == ("b", "a", "b")


def test_unknown_keys_ignored(base_props):
    base_props["tasks.max"] = "4"

    config = validate_config(base_props)

    assert "tasks.max" not in config.to_props()


def test_split_files_single_entry():
    assert split_files("only.pdf") == ["only.pdf"]


def test_config_is_frozen(base_props):
    config = validate_config(base_props)

    with pytest.raises(ValidationError):
        config.topic = "other"


def test_direct_construction_rejects_invalid_values():
    with pytest.raises(ValidationError):
        ConnectorConfig(schema_name="", topic="t", files=("a",))
    with pytest.raises(ValidationError):
        ConnectorConfig(schema_name="s", topic="t", files=())
    with pytest.raises(ValidationError):
        ConnectorConfig(schema_name="s", topic="t", files=("a", " "))
    with pytest.raises(ValidationError):
        ConnectorConfig(schema_name="s", topic="t", files=("a",), output_type="pdf")


def test_join_files_restores_separator():
    assert join_files(split_files("a.pdf,b.pdf")) == "a.pdf,b.pdf"
