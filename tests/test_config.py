# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the codec configuration module."""

from pathlib import Path

import pytest

from searchdsl.config import CodecConfig, CodecConfigError, load_codec_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a codec config file and return its path."""
    config_file = tmp_path / "searchdsl.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    """A default config emits compact JSON and revalidates decoded variants."""
    config = CodecConfig()

    assert config.compact is True
    assert config.sort_keys is False
    assert config.indent is None
    assert config.revalidate_on_decode is True


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty YAML file is treated as the default configuration."""
    config = load_codec_config(_write_config(tmp_path, ""))

    assert config == CodecConfig()


def test_kebab_case_keys(tmp_path: Path) -> None:
    """Keys use kebab-case in the file and snake_case on the model."""
    content = """\
compact: false
sort-keys: true
indent: 4
revalidate-on-decode: false
"""
    config = load_codec_config(_write_config(tmp_path, content))

    assert config.compact is False
    assert config.sort_keys is True
    assert config.indent == 4
    assert config.revalidate_on_decode is False


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing file raises CodecConfigError naming the file."""
    with pytest.raises(CodecConfigError, match="Cannot read codec config"):
        load_codec_config(tmp_path / "absent.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Unparseable YAML raises CodecConfigError."""
    with pytest.raises(CodecConfigError, match="Invalid YAML"):
        load_codec_config(_write_config(tmp_path, "sort-keys: [unclosed\n"))


def test_unknown_key(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(CodecConfigError, match="Invalid codec config"):
        load_codec_config(_write_config(tmp_path, "pretty: true\n"))


def test_negative_indent(tmp_path: Path) -> None:
    """Indentation must not be negative."""
    with pytest.raises(CodecConfigError):
        load_codec_config(_write_config(tmp_path, "indent: -1\n"))
