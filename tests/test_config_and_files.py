"""Tests for configuration loading and file helpers."""

import io

import pytest

from linetransforms.config import DEFAULT_CONFIG, load_config
from linetransforms.utils.file_handler import iter_lines, read_first_line, read_yaml, strip_terminator


class TestConfig:
    """Test default and YAML-backed configuration."""

    def test_defaults_without_file(self):
        """Test that the defaults are returned as an independent copy."""
        config = load_config()

        assert config == DEFAULT_CONFIG
        config["respell"]["articles"].append("of")
        assert DEFAULT_CONFIG["respell"]["articles"] == ["the", "a", "an"]

    def test_yaml_sections_merge_over_defaults(self, tmp_path):
        """Test that YAML values override only the keys they name."""
        path = tmp_path / "config.yaml"
        path.write_text("respell:\n  joiner: ' '\nswap:\n  command: point\n", encoding="utf-8")

        config = load_config(path)

        assert config["respell"]["joiner"] == " "
        assert config["respell"]["articles"] == ["the", "a", "an"]
        assert config["swap"]["command"] == "point"

    def test_unknown_section_ignored(self, tmp_path):
        """Test that unknown sections are skipped."""
        path = tmp_path / "config.yaml"
        path.write_text("extra:\n  key: 1\n", encoding="utf-8")

        assert load_config(path) == DEFAULT_CONFIG

    def test_invalid_values_rejected(self, tmp_path):
        """Test that badly typed config values raise ValueError."""
        test_cases = [
            "respell:\n  articles: the\n",
            "respell:\n  joiner: 3\n",
            "swap:\n  command: ''\n",
            "respell: [1, 2]\n",
            "- just a list\n",
        ]

        for content in test_cases:
            path = tmp_path / "config.yaml"
            path.write_text(content, encoding="utf-8")
            with pytest.raises(ValueError):
                load_config(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")


class TestFileHandler:
    """Test reading lines from files and streams."""

    def test_read_first_line_from_stream(self):
        """Test reading one line from a stream."""
        assert read_first_line(stream=io.StringIO("abc\r\ndef\n")) == "abc"
        assert read_first_line(stream=io.StringIO("")) == ""

    def test_read_first_line_from_file(self, tmp_path):
        """Test reading the first line of a file."""
        path = tmp_path / "input.txt"
        path.write_text("first\nsecond\n", encoding="utf-8")

        assert read_first_line(path) == "first"

    def test_read_first_line_from_empty_file(self, tmp_path):
        """Test reading from an empty file."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        assert read_first_line(path) == ""

    def test_iter_lines_from_file(self, tmp_path):
        """Test iterating over the lines of a file."""
        path = tmp_path / "input.txt"
        path.write_text("a\nb\n", encoding="utf-8")

        assert list(iter_lines(path)) == ["a\n", "b\n"]

    def test_iter_lines_missing_file(self, tmp_path):
        """Test that a missing input file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            list(iter_lines(tmp_path / "missing.txt"))

    def test_read_empty_yaml(self, tmp_path):
        """Test that an empty YAML file loads as an empty dict."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert read_yaml(path) == {}

    def test_read_first_line_does_not_read_whole_file(self, tmp_path, monkeypatch):
        """Test that only the first line of the input file is read."""
        path = tmp_path / "input.txt"
        path.write_text("first\r\n" + "x" * 10000 + "\n", encoding="utf-8")

        def fail(*args, **kwargs):
            raise AssertionError("whole file read")

        monkeypatch.setattr("linetransforms.utils.file_handler.read_file", fail)

        assert read_first_line(path) == "first"

    def test_strip_terminator_removes_one_terminator(self):
        """Test stripping exactly one line terminator."""
        test_cases = [
            ("abc\n", "abc"),
            ("abc\r\n", "abc"),
            ("abc\r", "abc"),
            ("abc\r\r\n", "abc\r"),
            ("abc\n\n", "abc\n"),
            ("abc", "abc"),
            ("", ""),
        ]

        for line, expected in test_cases:
            assert strip_terminator(line) == expected
