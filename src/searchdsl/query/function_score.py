# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""The ``function_score`` query and its score functions.

A score function object carries exactly one function key next to the shared
``weight`` and ``filter`` siblings::

    {"gauss": {"date": {"origin": "now", "scale": "10d"}}, "weight": 2, "filter": {...}}

A function object holding only ``weight`` is a weight function.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, ClassVar

from searchdsl.codec.containers import Clauses
from searchdsl.codec.errors import MalformedJSONError
from searchdsl.codec.params import EnumParam, FlexParam, NumberOrStringParam, NumberParam, Param, StringParam
from searchdsl.codec.registry import Domain, registered
from searchdsl.codec.variant import NumberLike, Params, ScalarLike, Variant
from searchdsl.query.clauses import QueryClause, QueryKind
from searchdsl.query.params import BoostParam, ClausesParam, FilterParam, InnerQueryParam, NameParam

# ###############
# Public Interface
# ###############


class ScoreFunctionKind(enum.Enum):
    EXP = "exp"
    GAUSS = "gauss"
    LINEAR = "linear"
    WEIGHT = "weight"
    FIELD_VALUE_FACTOR = "field_value_factor"


class ScoreMode(enum.Enum):
    """How the scores of the individual functions are combined."""

    MULTIPLY = "multiply"
    SUM = "sum"
    AVG = "avg"
    FIRST = "first"
    MAX = "max"
    MIN = "min"


class BoostMode(enum.Enum):
    """How the combined function score is merged with the query score."""

    MULTIPLY = "multiply"
    REPLACE = "replace"
    SUM = "sum"
    AVG = "avg"
    MAX = "max"
    MIN = "min"


class MultiValueMode(enum.Enum):
    MIN = "min"
    MAX = "max"
    AVG = "avg"
    SUM = "sum"


class Modifier(enum.Enum):
    """Transformation applied to a field value by ``field_value_factor``."""

    NONE = "none"
    LOG = "log"
    LOG1P = "log1p"
    LOG2P = "log2p"
    LN = "ln"
    LN1P = "ln1p"
    LN2P = "ln2p"
    SQUARE = "square"
    SQRT = "sqrt"
    RECIPROCAL = "reciprocal"


class ScoreFunctions(Clauses):
    """Ordered score functions; their results are combined in this order by ``score_mode``."""

    domain = Domain.SCORE_FUNCTION


class WeightParam(NumberParam):
    __slots__ = ()
    attr = "weight"
    wire_name = "weight"


class OriginParam(FlexParam):
    """Point from which distances are computed: a number, a date or a geo point string."""

    __slots__ = ()
    attr = "origin"
    wire_name = "origin"


class ScaleParam(NumberOrStringParam):
    """Distance from ``origin`` + ``offset`` at which the score equals ``decay``, e.g. ``"10d"``."""

    __slots__ = ()
    attr = "scale"
    wire_name = "scale"


class OffsetParam(NumberOrStringParam):
    __slots__ = ()
    attr = "offset"
    wire_name = "offset"


class DecayParam(NumberParam):
    __slots__ = ()
    attr = "decay"
    wire_name = "decay"
    default = 0.5


class MultiValueModeParam(EnumParam):
    __slots__ = ()
    attr = "multi_value_mode"
    wire_name = "multi_value_mode"
    enum_type = MultiValueMode
    default = MultiValueMode.MIN


class FieldParam(StringParam):
    __slots__ = ()
    attr = "field"
    wire_name = "field"


class FactorParam(NumberParam):
    __slots__ = ()
    attr = "factor"
    wire_name = "factor"
    default = 1


class ModifierParam(EnumParam):
    __slots__ = ()
    attr = "modifier"
    wire_name = "modifier"
    enum_type = Modifier
    default = Modifier.NONE


class MissingParam(NumberParam):
    """Value used for documents that lack the field."""

    __slots__ = ()
    attr = "missing"
    wire_name = "missing"


class ScoreModeParam(EnumParam):
    __slots__ = ()
    attr = "score_mode"
    wire_name = "score_mode"
    enum_type = ScoreMode
    default = ScoreMode.MULTIPLY


class BoostModeParam(EnumParam):
    __slots__ = ()
    attr = "boost_mode"
    wire_name = "boost_mode"
    enum_type = BoostMode
    default = BoostMode.MULTIPLY


class MaxBoostParam(NumberParam):
    __slots__ = ()
    attr = "max_boost"
    wire_name = "max_boost"


class MinScoreParam(NumberParam):
    __slots__ = ()
    attr = "min_score"
    wire_name = "min_score"


class FunctionsParam(ClausesParam):
    __slots__ = ()
    attr = "functions"
    wire_name = "functions"
    container = ScoreFunctions
    target = "score function or list of score functions"


class ScoreFunction(Variant):
    """Base class of score functions.

    ``weight`` and ``filter`` are written next to the function key; every
    other trait goes inside the function object.
    """

    domain = Domain.SCORE_FUNCTION
    siblings: ClassVar[tuple[str, ...]] = ("weight", "filter")

    def encode_body(self, path: str = "$") -> dict[str, Any]:
        body: dict[str, Any] = {}
        function = self._encode_function(f"{path}.{self.kind_name}")
        if function is not None:
            body[self.kind_name] = function
        for attr in self.siblings:
            self._params[attr].encode_into(body, path)
        return body

    def decode_body(self, obj: Any, path: str = "$", *, revalidate: bool = True) -> None:
        if not isinstance(obj, Mapping):
            raise MalformedJSONError(f"expected an object for {self.kind_name}, got {type(obj).__name__}", path=path)
        for attr in self.siblings:
            self._params[attr].decode_from(obj, path, revalidate=revalidate)
        self._decode_function(obj.get(self.kind_name), f"{path}.{self.kind_name}", revalidate)

    def _function_params(self) -> list[Param]:
        return [param for attr, param in self._params.items() if attr not in self.siblings]

    def _encode_function(self, path: str) -> dict[str, Any] | None:
        function: dict[str, Any] = {}
        for param in self._function_params():
            param.encode_into(function, path)
        return function

    def _decode_function(self, raw: Any, path: str, revalidate: bool) -> None:
        if not isinstance(raw, Mapping):
            raise MalformedJSONError(f"expected an object for {self.kind_name}, got {type(raw).__name__}", path=path)
        for param in self._function_params():
            param.decode_from(raw, path, revalidate=revalidate)


class DecayFunction(ScoreFunction):
    """Score that decays with the distance of a field value from ``origin``.

    Encoded as ``{"<kind>": {"<field>": {origin, scale, offset, decay}, "multi_value_mode": ...}}``.
    """

    core = ("field",)
    required = ("field", "origin", "scale")
    params = (
        OriginParam,
        ScaleParam,
        OffsetParam,
        DecayParam,
        MultiValueModeParam,
        WeightParam,
        FilterParam,
    )

    field: str = ""

    def _encode_function(self, path: str) -> dict[str, Any] | None:
        curve: dict[str, Any] = {}
        for attr in _CURVE:
            self._params[attr].encode_into(curve, f"{path}.{self.field}")
        function: dict[str, Any] = {self.field: curve}
        self._params["multi_value_mode"].encode_into(function, path)
        return function

    def _decode_function(self, raw: Any, path: str, revalidate: bool) -> None:
        if not isinstance(raw, Mapping):
            raise MalformedJSONError(f"expected an object for {self.kind_name}, got {type(raw).__name__}", path=path)
        mode = self._params["multi_value_mode"]
        fields = [key for key in raw if key != mode.wire_name]
        if len(fields) != 1:
            raise MalformedJSONError(f"expected a single field key for {self.kind_name}, got {len(fields)}", path=path)
        self.field = fields[0]
        curve = raw[self.field]
        curve_path = f"{path}.{self.field}"
        if not isinstance(curve, Mapping):
            raise MalformedJSONError(f"expected an object for field {self.field}", path=curve_path)
        for attr in _CURVE:
            self._params[attr].decode_from(curve, curve_path, revalidate=revalidate)
        mode.decode_from(raw, path, revalidate=revalidate)


@registered
class ExpFunction(DecayFunction):
    kind = ScoreFunctionKind.EXP


@registered
class GaussFunction(DecayFunction):
    kind = ScoreFunctionKind.GAUSS


@registered
class LinearFunction(DecayFunction):
    kind = ScoreFunctionKind.LINEAR


@registered
class WeightFunction(ScoreFunction):
    """Multiplies the score by ``weight``, optionally only for documents matching ``filter``."""

    kind = ScoreFunctionKind.WEIGHT
    required = ("weight",)
    params = (WeightParam, FilterParam)

    def _encode_function(self, path: str) -> dict[str, Any] | None:
        return None

    def _decode_function(self, raw: Any, path: str, revalidate: bool) -> None:
        pass


@registered
class FieldValueFactorFunction(ScoreFunction):
    """Scores by a numeric field of the document, e.g. ``sqrt(1.2 * doc['likes'])``."""

    kind = ScoreFunctionKind.FIELD_VALUE_FACTOR
    required = ("field",)
    params = (FieldParam, FactorParam, ModifierParam, MissingParam, WeightParam, FilterParam)


@registered
class FunctionScoreQuery(QueryClause):
    """Modifies the score of the documents retrieved by ``query`` with score functions."""

    kind = QueryKind.FUNCTION_SCORE
    required = ("functions",)
    params = (
        InnerQueryParam,
        FunctionsParam,
        ScoreModeParam,
        BoostModeParam,
        MaxBoostParam,
        MinScoreParam,
        BoostParam,
        NameParam,
    )


# Params


class DecayFunctionParams(Params):
    """Shared fields of the decay function Params models."""

    field: str | None = None
    origin: ScalarLike = None
    scale: NumberLike = None
    offset: NumberLike = None
    decay: NumberLike = None
    multi_value_mode: MultiValueMode | str | None = None
    weight: NumberLike = None
    filter: Any = None


class ExpFunctionParams(DecayFunctionParams):
    variant = ExpFunction


class GaussFunctionParams(DecayFunctionParams):
    variant = GaussFunction


class LinearFunctionParams(DecayFunctionParams):
    variant = LinearFunction


class WeightFunctionParams(Params):
    variant = WeightFunction

    weight: NumberLike = None
    filter: Any = None


class FieldValueFactorFunctionParams(Params):
    variant = FieldValueFactorFunction

    field: str | None = None
    factor: NumberLike = None
    modifier: Modifier | str | None = None
    missing: NumberLike = None
    weight: NumberLike = None
    filter: Any = None


class FunctionScoreQueryParams(Params):
    variant = FunctionScoreQuery

    query: Any = None
    functions: Any = None
    score_mode: ScoreMode | str | None = None
    boost_mode: BoostMode | str | None = None
    max_boost: NumberLike = None
    min_score: NumberLike = None
    boost: NumberLike = None
    name: str | None = None


# ################
# Implementation
# ################

_CURVE = ("origin", "scale", "offset", "decay")
