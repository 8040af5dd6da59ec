# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tagged-union codec: flexible scalars, parameter traits, registries, resolver and containers."""

from searchdsl.codec.containers import Clauses, Fields
from searchdsl.codec.errors import (
    DuplicateDiscriminatorError,
    ExclusiveParamsError,
    FieldExistsError,
    FieldRequiredError,
    FunctionsRequiredError,
    InvalidParamError,
    InvalidValueError,
    MalformedJSONError,
    MissingTypeError,
    OriginRequiredError,
    ParamRequiredError,
    PathRequiredError,
    QueryRequiredError,
    ScaleRequiredError,
    ScalingFactorRequiredError,
    SearchDSLError,
    UnsupportedTypeError,
    ValueRequiredError,
)
from searchdsl.codec.params import (
    BoolParam,
    EnumParam,
    FlexParam,
    NumberOrStringParam,
    NumberParam,
    Param,
    ScalarParam,
    StringListParam,
    StringMapParam,
    StringParam,
)
from searchdsl.codec.registry import Domain, Registry, WireStyle, construct, get_registry, lookup, register, registered
from searchdsl.codec.scalar import Bool, Flex, Number, NumberOrString, Scalar, ScalarKind
from searchdsl.codec.variant import Params, Variant, resolve
from searchdsl.codec.wire import decode, dumps, encode, loads, parse_json

__all__ = [
    # Scalars
    "Scalar",
    "ScalarKind",
    "Number",
    "Bool",
    "Flex",
    "NumberOrString",
    # Traits
    "Param",
    "StringParam",
    "ScalarParam",
    "NumberParam",
    "BoolParam",
    "FlexParam",
    "NumberOrStringParam",
    "EnumParam",
    "StringListParam",
    "StringMapParam",
    # Registry
    "Domain",
    "WireStyle",
    "Registry",
    "get_registry",
    "register",
    "registered",
    "lookup",
    "construct",
    # Variants and resolver
    "Variant",
    "Params",
    "resolve",
    # Containers and wire
    "Fields",
    "Clauses",
    "encode",
    "decode",
    "dumps",
    "loads",
    "parse_json",
    # Errors
    "SearchDSLError",
    "MalformedJSONError",
    "UnsupportedTypeError",
    "MissingTypeError",
    "DuplicateDiscriminatorError",
    "FieldExistsError",
    "InvalidValueError",
    "InvalidParamError",
    "ExclusiveParamsError",
    "ParamRequiredError",
    "FieldRequiredError",
    "QueryRequiredError",
    "ValueRequiredError",
    "PathRequiredError",
    "OriginRequiredError",
    "ScaleRequiredError",
    "ScalingFactorRequiredError",
    "FunctionsRequiredError",
]
