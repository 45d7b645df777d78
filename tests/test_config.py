import json

import pytest

from rfcdoctool.config.document_config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    DocumentConfig,
    load_config,
)
from rfcdoctool.models import ConfigurationError, NumberingStyle


def test_defaults():
    config = DocumentConfig()
    assert config.file_extensions == [".rfc"]
    assert config.toc_header == "TABLE OF CONTENTS"
    assert config.toc_underline == "-" * 17
    assert config.toc_indent == "    "
    assert config.metadata_key_width == 14
    assert config.list_indent_width == 4
    assert config.list_styles == [NumberingStyle.NUMERIC, NumberingStyle.LETTERED]


def test_extensions_are_normalized():
    assert DocumentConfig(file_extensions=[".RFC", ".txt"]).file_extensions == [".rfc", ".txt"]


@pytest.mark.parametrize(
    "data",
    [
        {"file_extensions": ["rfc"]},
        {"file_extensions": []},
        {"toc_header": "   "},
        {"metadata_key_width": 0},
        {"list_indent_width": -1},
        {"list_styles": []},
        {"list_styles": ["section_dotted"]},
        {"list_styles": ["hex"]},
    ],
)
def test_invalid_values_raise_configuration_error(data):
    with pytest.raises(ConfigurationError):
        DocumentConfig.from_dict(data)


def test_from_json():
    config = DocumentConfig.from_json('{"list_styles": ["roman", "numeric"]}')
    assert config.list_styles == [NumberingStyle.ROMAN, NumberingStyle.NUMERIC]


@pytest.mark.parametrize("payload", ["not json", "[1, 2]"])
def test_from_json_rejects_bad_payloads(payload):
    with pytest.raises(ConfigurationError):
        DocumentConfig.from_json(payload)


def test_load_config_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config() is DEFAULT_CONFIG


def test_load_config_from_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"metadata_key_width": 20}))
    assert load_config(str(path)).metadata_key_width == 20


def test_load_config_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"toc_indent": "\t"}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().toc_indent == "\t"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))
