# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed models and a JSON codec for search engine field mappings, query clauses and ingest pipelines.

Importing the package registers every built-in field, query, score function
and processor kind.
"""

from searchdsl import ingest, mapping, query
from searchdsl.codec import (
    Clauses,
    Domain,
    Fields,
    Params,
    SearchDSLError,
    Variant,
    decode,
    dumps,
    encode,
    loads,
    register,
    resolve,
)
from searchdsl.config import CodecConfig, CodecConfigError, load_codec_config

__all__ = [
    "ingest",
    "mapping",
    "query",
    "Clauses",
    "Domain",
    "Fields",
    "Params",
    "SearchDSLError",
    "Variant",
    "decode",
    "dumps",
    "encode",
    "loads",
    "register",
    "resolve",
    "CodecConfig",
    "CodecConfigError",
    "load_codec_config",
]
