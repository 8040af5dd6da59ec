# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field mapping domain: field kinds, their traits and their Params models."""

from searchdsl.mapping.fields import (
    AliasField,
    AliasFieldParams,
    BooleanField,
    BooleanFieldParams,
    ByteField,
    ByteFieldParams,
    DateField,
    DateFieldParams,
    DateNanosField,
    DateNanosFieldParams,
    DoubleField,
    DoubleFieldParams,
    FieldMapping,
    FieldType,
    FloatField,
    FloatFieldParams,
    HalfFloatField,
    HalfFloatFieldParams,
    IntegerField,
    IntegerFieldParams,
    KeywordField,
    KeywordFieldParams,
    LongField,
    LongFieldParams,
    NumericField,
    ObjectField,
    ObjectFieldParams,
    RankFeatureField,
    RankFeatureFieldParams,
    ScaledFloatField,
    ScaledFloatFieldParams,
    ShortField,
    ShortFieldParams,
    TextField,
    TextFieldParams,
)

__all__ = [
    "FieldType",
    "FieldMapping",
    "NumericField",
    "AliasField",
    "AliasFieldParams",
    "BooleanField",
    "BooleanFieldParams",
    "ByteField",
    "ByteFieldParams",
    "DateField",
    "DateFieldParams",
    "DateNanosField",
    "DateNanosFieldParams",
    "DoubleField",
    "DoubleFieldParams",
    "FloatField",
    "FloatFieldParams",
    "HalfFloatField",
    "HalfFloatFieldParams",
    "IntegerField",
    "IntegerFieldParams",
    "KeywordField",
    "KeywordFieldParams",
    "LongField",
    "LongFieldParams",
    "ObjectField",
    "ObjectFieldParams",
    "RankFeatureField",
    "RankFeatureFieldParams",
    "ScaledFloatField",
    "ScaledFloatFieldParams",
    "ShortField",
    "ShortFieldParams",
    "TextField",
    "TextFieldParams",
]
