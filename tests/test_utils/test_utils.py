"""Tests for /utils.

Run just these tests using `pytest tests/test_utils/test_utils.py`
"""

import json

import pytest
import toml
import yaml

from gtfs_reader.errors import DictionaryMergeError
from gtfs_reader.utils import is_ascii_digits, load_dict, load_merge_dict, merge_dicts

merge_test_list = [
    # Test case format: (right, left, expected)
    ({"a": 1}, {"b": 2}, {"a": 1, "b": 2}),
    ({"a": {"b": 1}}, {"a": {"c": 2}}, {"a": {"b": 1, "c": 2}}),
    ({}, {"a": {"b": 1}}, {"a": {"b": 1}}),
]


@pytest.mark.parametrize(("right", "left", "expected"), merge_test_list)
def test_merge_dicts(right, left, expected):
    merge_dicts(right, left)
    assert right == expected


def test_merge_dicts_conflict():
    with pytest.raises(DictionaryMergeError) as e:
        merge_dicts({"a": {"b": 1}}, {"a": {"b": 2}})
    assert "a.b" in str(e.value)


def test_load_dict(tmp_path):
    data = {"LOADING": {"ENCODING": "latin-1"}}
    (tmp_path / "c.yml").write_text(yaml.safe_dump(data))
    (tmp_path / "c.json").write_text(json.dumps(data))
    (tmp_path / "c.toml").write_text(toml.dumps(data))

    for suffix in ["yml", "json", "toml"]:
        assert load_dict(tmp_path / f"c.{suffix}") == data


def test_load_dict_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dict(tmp_path / "missing.yml")
    (tmp_path / "c.ini").write_text("[LOADING]")
    with pytest.raises(NotImplementedError):
        load_dict(tmp_path / "c.ini")


def test_load_merge_dict(tmp_path):
    (tmp_path / "a.yml").write_text("LOADING:\n  ENCODING: latin-1\n")
    (tmp_path / "b.toml").write_text("[PARSING]\nWARN_ON_FIELD_COUNT_MISMATCH = false\n")
    merged = load_merge_dict([tmp_path / "a.yml", tmp_path / "b.toml"])
    assert merged == {
        "LOADING": {"ENCODING": "latin-1"},
        "PARSING": {"WARN_ON_FIELD_COUNT_MISMATCH": False},
    }


ascii_digits_cases = [
    # Test case format: (text, expected)
    ("0042", True),
    ("7", True),
    ("", False),
    ("+5", False),
    ("1_000", False),
    (" 7", False),
    ("\u00b2", False),
    ("\u0663", False),
]


@pytest.mark.parametrize(("text", "expected"), ascii_digits_cases)
def test_is_ascii_digits(text, expected):
    assert is_ascii_digits(text) == expected
