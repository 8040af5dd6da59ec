# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter traits used by field mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from searchdsl.codec.containers import Fields
from searchdsl.codec.errors import InvalidValueError
from searchdsl.codec.params import (
    BoolParam,
    FlexParam,
    NumberParam,
    Param,
    StringMapParam,
    StringParam,
)

# ###############
# Public Interface
# ###############


class PathParam(StringParam):
    """Target field of an alias. Must name a concrete field, not an object or another alias."""

    __slots__ = ()
    attr = "path"
    wire_name = "path"


class NormalizerParam(StringParam):
    """Like ``analyzer`` for keyword fields, but guarantees the chain produces a single token."""

    __slots__ = ()
    attr = "normalizer"
    wire_name = "normalizer"


class AnalyzerParam(StringParam):
    __slots__ = ()
    attr = "analyzer"
    wire_name = "analyzer"


class SearchAnalyzerParam(StringParam):
    __slots__ = ()
    attr = "search_analyzer"
    wire_name = "search_analyzer"


class FormatParam(StringParam):
    """Date format(s), e.g. ``"strict_date_optional_time||epoch_millis"``."""

    __slots__ = ()
    attr = "format"
    wire_name = "format"


class BoostParam(NumberParam):
    """Index-time field boost applied to queries on this field. Defaults to 1.0."""

    __slots__ = ()
    attr = "boost"
    wire_name = "boost"
    default = 1.0


class IgnoreAboveParam(NumberParam):
    """Strings longer than this are not indexed or stored."""

    __slots__ = ()
    attr = "ignore_above"
    wire_name = "ignore_above"


class DocValuesParam(BoolParam):
    __slots__ = ()
    attr = "doc_values"
    wire_name = "doc_values"
    default = True


class IndexParam(BoolParam):
    """Whether the field is searchable. Defaults to true."""

    __slots__ = ()
    attr = "index"
    wire_name = "index"
    default = True


class StoreParam(BoolParam):
    __slots__ = ()
    attr = "store"
    wire_name = "store"
    default = False


class CoerceParam(BoolParam):
    """Whether to clean up dirty values such as numeric strings. Defaults to true."""

    __slots__ = ()
    attr = "coerce"
    wire_name = "coerce"
    default = True


class IgnoreMalformedParam(BoolParam):
    """If true, malformed values are ignored instead of rejecting the whole document."""

    __slots__ = ()
    attr = "ignore_malformed"
    wire_name = "ignore_malformed"
    default = False


class PositiveScoreImpactParam(BoolParam):
    """Rank features that correlate negatively with the score should set this to false."""

    __slots__ = ()
    attr = "positive_score_impact"
    wire_name = "positive_score_impact"
    default = True


class EnabledParam(BoolParam):
    __slots__ = ()
    attr = "enabled"
    wire_name = "enabled"
    default = True


class NullValueParam(FlexParam):
    """Value indexed in place of an explicit ``null``."""

    __slots__ = ()
    attr = "null_value"
    wire_name = "null_value"


class MetaParam(StringMapParam):
    __slots__ = ()
    attr = "meta"
    wire_name = "meta"


class ScalingFactorParam(NumberParam):
    """Multiplier applied to ``scaled_float`` values before rounding to a long. Must be >= 1."""

    __slots__ = ()
    attr = "scaling_factor"
    wire_name = "scaling_factor"
    target = "number >= 1"

    def _coerce(self, value: Any) -> Any:
        scalar = super()._coerce(value)
        if scalar is not None and scalar.as_float()[0] < 1:
            raise InvalidValueError(value, self.target)
        return scalar


class DynamicParam(Param):
    """How unmapped fields of an object are handled: true, false, ``"strict"`` or ``"runtime"``."""

    __slots__ = ()
    attr = "dynamic"
    wire_name = "dynamic"
    default = True
    target = "true, false, strict or runtime"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in ("true", "false"):
                return lowered == "true"
            if lowered in ("strict", "runtime"):
                return lowered
        raise InvalidValueError(value, self.target)


class FieldsParam(Param):
    """Multi-fields: the same value indexed in additional ways under sub-field names."""

    __slots__ = ()
    attr = "fields"
    wire_name = "fields"
    target = "object of field mappings"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, Fields):
            fields = value.copy()
        elif isinstance(value, Mapping):
            fields = Fields(value)
        else:
            raise InvalidValueError(value, self.target)
        return fields if len(fields) else None

    def _to_json(self, value: Any, path: str) -> Any:
        return value.to_json(path=path)

    def _from_json(self, raw: Any, path: str, revalidate: bool) -> Any:
        return Fields.from_json(raw, path=path, revalidate=revalidate)


class PropertiesParam(FieldsParam):
    """Sub-fields of an object field."""

    __slots__ = ()
    attr = "properties"
    wire_name = "properties"
