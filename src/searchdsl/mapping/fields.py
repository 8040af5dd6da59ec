# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field mapping kinds.

Each kind is a composition of parameter traits registered under its
``"type"`` discriminator. The matching ``*Params`` model is the loose input
accepted when building a mapping.
"""

from __future__ import annotations

import enum
from typing import Any

from searchdsl.codec.registry import Domain, registered
from searchdsl.codec.variant import BoolLike, NumberLike, Params, ScalarLike, Variant
from searchdsl.mapping.params import (
    AnalyzerParam,
    BoostParam,
    CoerceParam,
    DocValuesParam,
    DynamicParam,
    EnabledParam,
    FieldsParam,
    FormatParam,
    IgnoreAboveParam,
    IgnoreMalformedParam,
    IndexParam,
    MetaParam,
    NormalizerParam,
    NullValueParam,
    PathParam,
    PositiveScoreImpactParam,
    PropertiesParam,
    ScalingFactorParam,
    SearchAnalyzerParam,
    StoreParam,
)

# ###############
# Public Interface
# ###############


class FieldType(enum.Enum):
    """Field mapping discriminators (the ``"type"`` property)."""

    ALIAS = "alias"
    BINARY = "binary"
    BOOLEAN = "boolean"
    BYTE = "byte"
    COMPLETION = "completion"
    CONSTANT_KEYWORD = "constant_keyword"
    DATE = "date"
    DATE_NANOS = "date_nanos"
    DATE_RANGE = "date_range"
    DENSE_VECTOR = "dense_vector"
    DOUBLE = "double"
    DOUBLE_RANGE = "double_range"
    FLATTENED = "flattened"
    FLOAT = "float"
    FLOAT_RANGE = "float_range"
    GEO_POINT = "geo_point"
    GEO_SHAPE = "geo_shape"
    HALF_FLOAT = "half_float"
    INTEGER = "integer"
    INTEGER_RANGE = "integer_range"
    IP = "ip"
    IP_RANGE = "ip_range"
    JOIN = "join"
    KEYWORD = "keyword"
    LONG = "long"
    LONG_RANGE = "long_range"
    NESTED = "nested"
    OBJECT = "object"
    PERCOLATOR = "percolator"
    RANK_FEATURE = "rank_feature"
    RANK_FEATURES = "rank_features"
    SCALED_FLOAT = "scaled_float"
    SEARCH_AS_YOU_TYPE = "search_as_you_type"
    SHAPE = "shape"
    SHORT = "short"
    TEXT = "text"
    TOKEN_COUNT = "token_count"
    UNSIGNED_LONG = "unsigned_long"
    VERSION = "version"
    WILDCARD = "wildcard"


class FieldMapping(Variant):
    """Base class of all field mappings, encoded as ``{"type": kind, ...}``."""

    domain = Domain.FIELD


@registered
class AliasField(FieldMapping):
    """An alternate name for a concrete field, usable in place of the target in searches."""

    kind = FieldType.ALIAS
    params = (PathParam,)
    required = ("path",)


@registered
class KeywordField(FieldMapping):
    """Structured content such as IDs, tags or status codes; used for sorting and aggregations."""

    kind = FieldType.KEYWORD
    params = (
        BoostParam,
        DocValuesParam,
        FieldsParam,
        IgnoreAboveParam,
        IndexParam,
        NormalizerParam,
        NullValueParam,
        StoreParam,
        MetaParam,
    )


@registered
class TextField(FieldMapping):
    """Full-text content, analyzed into terms before indexing."""

    kind = FieldType.TEXT
    params = (
        AnalyzerParam,
        BoostParam,
        FieldsParam,
        IndexParam,
        SearchAnalyzerParam,
        StoreParam,
        MetaParam,
    )


class NumericField(FieldMapping):
    """Shared parameters of the numeric field kinds."""

    params = (
        BoostParam,
        CoerceParam,
        DocValuesParam,
        IgnoreMalformedParam,
        IndexParam,
        NullValueParam,
        StoreParam,
        MetaParam,
    )


@registered
class ByteField(NumericField):
    kind = FieldType.BYTE


@registered
class ShortField(NumericField):
    kind = FieldType.SHORT


@registered
class IntegerField(NumericField):
    kind = FieldType.INTEGER


@registered
class LongField(NumericField):
    kind = FieldType.LONG


@registered
class FloatField(NumericField):
    kind = FieldType.FLOAT


@registered
class DoubleField(NumericField):
    kind = FieldType.DOUBLE


@registered
class HalfFloatField(NumericField):
    kind = FieldType.HALF_FLOAT


@registered
class ScaledFloatField(NumericField):
    """A float stored as a long scaled by a fixed ``scaling_factor``."""

    kind = FieldType.SCALED_FLOAT
    params = NumericField.params + (ScalingFactorParam,)
    required = ("scaling_factor",)


@registered
class DateField(FieldMapping):
    """Dates with millisecond resolution."""

    kind = FieldType.DATE
    params = (
        DocValuesParam,
        FormatParam,
        IgnoreMalformedParam,
        IndexParam,
        NullValueParam,
        StoreParam,
        MetaParam,
    )


@registered
class DateNanosField(DateField):
    """Dates with nanosecond resolution, limited to roughly 1970 through 2262."""

    kind = FieldType.DATE_NANOS


@registered
class BooleanField(FieldMapping):
    kind = FieldType.BOOLEAN
    params = (BoostParam, DocValuesParam, IndexParam, NullValueParam, StoreParam, MetaParam)


@registered
class RankFeatureField(FieldMapping):
    """A numeric feature used by ``rank_feature`` queries to boost document scores."""

    kind = FieldType.RANK_FEATURE
    params = (PositiveScoreImpactParam,)


@registered
class ObjectField(FieldMapping):
    """A JSON object whose sub-fields are declared in ``properties``."""

    kind = FieldType.OBJECT
    params = (PropertiesParam, EnabledParam, DynamicParam)


# Params


class AliasFieldParams(Params):
    variant = AliasField

    path: str | None = None


class KeywordFieldParams(Params):
    variant = KeywordField

    boost: NumberLike = None
    doc_values: BoolLike = None
    fields: Any = None
    ignore_above: NumberLike = None
    index: BoolLike = None
    normalizer: str | None = None
    null_value: ScalarLike = None
    store: BoolLike = None
    meta: dict[str, str] | None = None


class TextFieldParams(Params):
    variant = TextField

    analyzer: str | None = None
    boost: NumberLike = None
    fields: Any = None
    index: BoolLike = None
    search_analyzer: str | None = None
    store: BoolLike = None
    meta: dict[str, str] | None = None


class NumericFieldParams(Params):
    """Shared fields of the numeric Params models; use one of the concrete subclasses."""

    boost: NumberLike = None
    coerce: BoolLike = None
    doc_values: BoolLike = None
    ignore_malformed: BoolLike = None
    index: BoolLike = None
    null_value: ScalarLike = None
    store: BoolLike = None
    meta: dict[str, str] | None = None


class ByteFieldParams(NumericFieldParams):
    variant = ByteField


class ShortFieldParams(NumericFieldParams):
    variant = ShortField


class IntegerFieldParams(NumericFieldParams):
    variant = IntegerField


class LongFieldParams(NumericFieldParams):
    variant = LongField


class FloatFieldParams(NumericFieldParams):
    variant = FloatField


class DoubleFieldParams(NumericFieldParams):
    variant = DoubleField


class HalfFloatFieldParams(NumericFieldParams):
    variant = HalfFloatField


class ScaledFloatFieldParams(NumericFieldParams):
    variant = ScaledFloatField

    scaling_factor: NumberLike = None


class DateFieldParams(Params):
    variant = DateField

    doc_values: BoolLike = None
    format: str | None = None
    ignore_malformed: BoolLike = None
    index: BoolLike = None
    null_value: ScalarLike = None
    store: BoolLike = None
    meta: dict[str, str] | None = None


class DateNanosFieldParams(DateFieldParams):
    variant = DateNanosField


class BooleanFieldParams(Params):
    variant = BooleanField

    boost: NumberLike = None
    doc_values: BoolLike = None
    index: BoolLike = None
    null_value: ScalarLike = None
    store: BoolLike = None
    meta: dict[str, str] | None = None


class RankFeatureFieldParams(Params):
    variant = RankFeatureField

    positive_score_impact: BoolLike = None


class ObjectFieldParams(Params):
    variant = ObjectField

    properties: Any = None
    enabled: BoolLike = None
    dynamic: BoolLike = None
