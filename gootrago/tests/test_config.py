from pathlib import Path

import pytest

from ..src.utils.config import (
    TranslationSettings,
    build_default_map,
    default_config_path,
    load_config,
    validate_config,
)
from ..src.utils.errors import ConfigurationError


def test_load_config_reads_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("target: uk\nadvanced: true\ncolumn: [A, C]\n", encoding="utf-8")
    assert load_config(path) == {"target": "uk", "advanced": True, "column": ["A", "C"]}


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


@pytest.mark.parametrize("content", ["- a\n- b\n", "target: [unclosed\n"])
def test_load_config_rejects_bad_documents(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="config file not found"):
        load_config(tmp_path / "missing.yaml")


def test_default_config_path_is_in_home(isolated_home):
    assert default_config_path() == isolated_home / ".gootrago.yaml"


def test_validate_config_accepts_known_keys():
    validate_config({"target": "es", "csv-delimiter": ";", "column": "A", "verbose": 2, "project": None})


@pytest.mark.parametrize("config,message", [
    ({"unknown": 1}, "Unknown config value"),
    ({"advanced": "yes"}, "Invalid type for advanced"),
    ({"verbose": True}, "Invalid type for verbose"),
    ({"column": 3}, "Invalid type for column"),
])
def test_validate_config_rejects(config, message):
    with pytest.raises(ConfigurationError, match=message):
        validate_config(config)


def test_build_default_map_splits_csv_options():
    default_map = build_default_map({
        "target": "de",
        "advanced": True,
        "column": "B",
        "csv-delimiter": ";",
        "project": None,
    })
    assert default_map == {
        "target": "de",
        "advanced": True,
        "csv": {"column": ["B"], "csv_delimiter": ";"},
    }


def test_resolve_defaults(tmp_path):
    settings = TranslationSettings.resolve(tmp_path / "in.txt", tmp_path / "out.txt", "es")
    assert settings.source_lang == "auto"
    assert settings.auto_detect
    assert not settings.use_advanced
    assert settings.api_name == "Basic"
    assert settings.csv_delimiter == ","
    assert settings.csv_comment is None
    assert settings.columns == ()


def test_resolve_rejects_same_input_and_output(tmp_path):
    with pytest.raises(ConfigurationError, match="are the same"):
        TranslationSettings.resolve(tmp_path / "a.csv", tmp_path / "." / "a.csv", "es")


@pytest.mark.parametrize("kwargs,message", [
    ({"input_file": None}, "input file is required"),
    ({"output_file": ""}, "output file is required"),
    ({"target_lang": " "}, "target language is required"),
    ({"use_advanced": True}, "project ID is required"),
    ({"csv_delimiter": "#", "csv_comment": "#"}, "must differ"),
])
def test_resolve_rejects_incomplete_settings(tmp_path, kwargs, message):
    params = {"input_file": tmp_path / "in.txt", "output_file": tmp_path / "out.txt", "target_lang": "es"}
    params.update(kwargs)
    with pytest.raises(ConfigurationError, match=message):
        TranslationSettings.resolve(**params)


def test_resolve_advanced_with_project(tmp_path):
    settings = TranslationSettings.resolve("in.txt", "out.txt", "es", use_advanced=True,
                                           project_id=" my-project ", credentials_file="key.json")
    assert settings.project_id == "my-project"
    assert settings.api_name == "Advanced"
    assert settings.credentials_file == Path("key.json")


def test_resolve_csv_options():
    settings = TranslationSettings.resolve("in.csv", "out.csv", "es", columns=("A,c", "2"),
                                           csv_delimiter=";;", csv_comment="#x", has_header=True)
    assert settings.columns == ("A", "c", "2")
    assert settings.csv_delimiter == ";"
    assert settings.csv_comment == "#"
    assert settings.has_header


def test_resolve_tab_delimiter():
    settings = TranslationSettings.resolve("in.tsv", "out.tsv", "es", csv_delimiter="\\t")
    assert settings.csv_delimiter == "\t"
