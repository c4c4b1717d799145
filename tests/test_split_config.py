import json
import os

import pytest

import split_config
from csv_splitter import DEFAULT_OPTIONS
from split_config import get_output_folder, load_config, load_split_options


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_missing_config_uses_defaults(tmp_path):
    path = str(tmp_path / "missing.json")
    assert load_config(path) == {}
    assert load_split_options(path) == DEFAULT_OPTIONS


def test_config_values_merge_over_defaults(tmp_path):
    path = write_config(tmp_path, {"LINES_PER_FILE": 500})

    options = load_split_options(path)

    assert options.rows_per_chunk == 500
    assert options.name_template == DEFAULT_OPTIONS.name_template


def test_overrides_win_over_config(tmp_path):
    path = write_config(tmp_path, {"LINES_PER_FILE": 500, "FILE_NAME_PATTERN": "{name}-{num}.csv"})

    options = load_split_options(path, rows_per_chunk=7, name_template=None)

    assert options.rows_per_chunk == 7
    assert options.name_template == "{name}-{num}.csv"


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_non_object_config_raises(tmp_path):
    path = write_config(tmp_path, [1, 2, 3])

    with pytest.raises(ValueError):
        load_config(path)


def test_invalid_lines_per_file_raises(tmp_path):
    path = write_config(tmp_path, {"LINES_PER_FILE": 0})

    with pytest.raises(ValueError):
        load_split_options(path)


def test_bundled_config_matches_defaults():
    assert load_split_options(split_config.config_path) == DEFAULT_OPTIONS


def test_get_output_folder_creates_absolute_folder(tmp_path):
    target = str(tmp_path / "extracted")

    assert get_output_folder(folder_name=target) == target
    assert os.path.isdir(target)


def test_get_output_folder_reads_config(tmp_path):
    target = str(tmp_path / "from-config")

    assert get_output_folder({"OUTPUT_FOLDER": target}) == target
    assert os.path.isdir(target)
