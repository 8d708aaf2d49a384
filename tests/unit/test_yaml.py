"""
Tests for the moddocs YAML loader.
"""

import datetime
from pathlib import Path

import pytest
import yaml

from moddocs.yaml import load


@pytest.mark.unit
class TestLoad:
    """Test load()."""

    def test_plain_document(self):
        assert load("a: 1\nb: [x, y]\n") == {"a": 1, "b": ["x", "y"]}

    def test_empty_document(self):
        assert load("") is None

    def test_numeric_and_date_keys_become_strings(self):
        data = load("1: one\n2.5: two\n2024-01-02: date\ntrue: yes\n")

        assert data["1"] == "one"
        assert data["2.5"] == "two"
        assert data[str(datetime.date(2024, 1, 2))] == "date"
        assert data[True] is True

    def test_keys_equal_in_python_kept_apart(self):
        data = load("1: one\ntrue: two\n1.0: three\n")

        assert data == {"1": "one", True: "two", "1.0": "three"}

    def test_merge_keys(self):
        data = load("base: &base\n  a: 1\nchild:\n  <<: *base\n  b: 2\n")

        assert data["child"] == {"a": 1, "b": 2}

    def test_unsafe_tags_rejected(self):
        with pytest.raises(yaml.YAMLError):
            load("!!python/object/apply:os.system ['true']")


@pytest.mark.unit
class TestFileTag:
    """Test the !file tag."""

    def test_reads_relative_to_current_file(self, temp_dir: Path):
        (temp_dir / "HEADER.md").write_text("# Title\n")
        manifest = temp_dir / "module.yaml"

        data = load("header: !file HEADER.md\n", current_file=manifest)

        assert data == {"header": "# Title\n"}

    def test_relative_without_current_file(self):
        with pytest.raises(yaml.YAMLError, match="without a current file"):
            load("header: !file HEADER.md\n")

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(yaml.YAMLError, match="Cannot read file"):
            load("header: !file nope.md\n", current_file=temp_dir / "module.yaml")

    def test_absolute_path(self, temp_dir: Path):
        target = temp_dir / "abs.md"
        target.write_text("absolute")

        assert load(f"header: !file {target}\n") == {"header": "absolute"}
