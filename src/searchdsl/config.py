# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Codec settings and their YAML loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############


class CodecConfigError(Exception):
    """Raised when a codec configuration file cannot be read or is invalid."""


class CodecConfig(BaseModel):
    """Options controlling JSON text output and decode-time validation.

    Attributes:
        compact: Emit JSON without insignificant whitespace.
        sort_keys: Sort object keys in the emitted JSON.
        indent: Indentation width for pretty output; overrides ``compact``.
        revalidate_on_decode: Run the resolver checks after decoding.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    compact: bool = True
    sort_keys: bool = Field(alias="sort-keys", default=False)
    indent: int | None = Field(default=None, ge=0)
    revalidate_on_decode: bool = Field(alias="revalidate-on-decode", default=True)


def load_codec_config(path: Path) -> CodecConfig:
    """Load and validate a codec configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated CodecConfig instance.

    Raises:
        CodecConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CodecConfigError(f"Cannot read codec config '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CodecConfigError(f"Invalid YAML in codec config '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        return CodecConfig.model_validate(data)
    except ValidationError as exc:
        raise CodecConfigError(f"Invalid codec config '{path}': {exc}") from exc
