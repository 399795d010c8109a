# tests/test_input/test_config.py

"""
Unit tests for ReaderConfig.
"""
import os

import pytest

from scarcomp.constants import DEFAULT_FILENAMES, Technology
from scarcomp.input import ReaderConfig


def test_defaults():
    config = ReaderConfig(data_dir="data")
    assert config.delimiter == ";"
    assert config.decimal == ","
    assert config.regions == ("BE", "PT")
    assert config.normalization[Technology.LOAD] == 1000.0
    assert config.normalization[Technology.SOLAR] == 100.0
    assert config.filenames == DEFAULT_FILENAMES


def test_path_for_substitutes_region():
    config = ReaderConfig(data_dir="data")
    assert config.path_for("BE", "Load") == os.path.join("data", "BE_LOAD_NT.2025.csv")
    assert config.path_for("PT", Technology.WIND_ONSHORE) == os.path.join("data", "WindOn_TYNDP2020_PT.csv")


def test_partial_overrides_keep_defaults():
    config = ReaderConfig(data_dir="data", filenames={"Solar": "pv_{region}.csv"})
    assert config.path_for("BE", "Solar") == os.path.join("data", "pv_BE.csv")
    assert config.filenames[Technology.LOAD] == DEFAULT_FILENAMES[Technology.LOAD]


def test_invalid_normalization():
    with pytest.raises(ValueError, match="must be positive"):
        ReaderConfig(data_dir="data", normalization={"WindOff": 0})


def test_delimiter_equals_decimal():
    with pytest.raises(ValueError, match="must differ"):
        ReaderConfig(data_dir="data", delimiter=",", decimal=",")


def test_from_dict_unknown_key():
    with pytest.raises(ValueError, match="Unknown reader config keys"):
        ReaderConfig.from_dict({"data_dir": "data", "colour": "red"})


def test_from_dict_requires_data_dir():
    with pytest.raises(ValueError, match="requires 'data_dir'"):
        ReaderConfig.from_dict({"delimiter": ";"})


def test_from_yaml(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "data_dir: inputs\n"
        "delimiter: ','\n"
        "decimal: '.'\n"
        "regions: [BE, NL]\n"
        "normalization:\n"
        "  Load: 1\n"
    )
    config = ReaderConfig.from_yaml(str(config_path))
    assert config.data_dir == os.path.join(str(tmp_path), "inputs")
    assert config.delimiter == ","
    assert config.regions == ("BE", "NL")
    assert config.normalization[Technology.LOAD] == 1.0
    assert config.normalization[Technology.SOLAR] == 100.0


def test_from_yaml_override_wins(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("data_dir: inputs\n")
    config = ReaderConfig.from_yaml(str(config_path), data_dir="elsewhere", delimiter=None)
    assert config.data_dir == "elsewhere"
    assert config.delimiter == ";"


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Reader config file not found"):
        ReaderConfig.from_yaml(str(tmp_path / "nope.yaml"))
