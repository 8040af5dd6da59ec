# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Query clause kinds.

Clauses are encoded as ``{"<kind>": {...}}``. Field-level clauses nest their
parameters one level deeper under the field name::

    {"match": {"title": {"query": "quick fox", "operator": "AND"}}}

and also accept the shorthand ``{"match": {"title": "quick fox"}}`` on decode.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, ClassVar

from searchdsl.codec.errors import MalformedJSONError
from searchdsl.codec.registry import Domain, registered
from searchdsl.codec.variant import BoolLike, NumberLike, Params, ScalarLike, Variant
from searchdsl.query.params import (
    AllowLeadingWildcardParam,
    AnalyzerParam,
    AnalyzeWildcardParam,
    AutoGenerateSynonymsPhraseQueryParam,
    BoostParam,
    CaseInsensitiveParam,
    CutoffFrequencyParam,
    DefaultFieldParam,
    DefaultOperatorParam,
    EnablePositionIncrementsParam,
    FieldsParam,
    FilterClausesParam,
    FuzzinessParam,
    FuzzyMaxExpansionsParam,
    FuzzyRewriteParam,
    FuzzyTranspositionsParam,
    LenientParam,
    MaxDeterminizedStatesParam,
    MaxExpansionsParam,
    MinimumShouldMatchParam,
    MustNotParam,
    MustParam,
    NameParam,
    Operator,
    OperatorParam,
    PhraseSlopParam,
    PrefixLengthParam,
    QueryParam,
    QueryStringParam,
    QuoteAnalyzerParam,
    QuoteFieldSuffixParam,
    RelationParam,
    RewriteParam,
    ShapeParam,
    ShapeRelation,
    ShouldParam,
    TieBreakerParam,
    TimeZoneParam,
    ValueParam,
    ZeroTerms,
    ZeroTermsQueryParam,
)

# ###############
# Public Interface
# ###############


class QueryKind(enum.Enum):
    """Query clause discriminators (the sole key of the clause object)."""

    BOOL = "bool"
    BOOSTING = "boosting"
    CONSTANT_SCORE = "constant_score"
    DIS_MAX = "dis_max"
    EXISTS = "exists"
    FUNCTION_SCORE = "function_score"
    FUZZY = "fuzzy"
    GEO_BOUNDING_BOX = "geo_bounding_box"
    GEO_DISTANCE = "geo_distance"
    GEO_POLYGON = "geo_polygon"
    GEO_SHAPE = "geo_shape"
    IDS = "ids"
    INTERVALS = "intervals"
    MATCH = "match"
    MATCH_ALL = "match_all"
    MATCH_BOOL_PREFIX = "match_bool_prefix"
    MATCH_NONE = "match_none"
    MATCH_PHRASE = "match_phrase"
    MATCH_PHRASE_PREFIX = "match_phrase_prefix"
    MORE_LIKE_THIS = "more_like_this"
    MULTI_MATCH = "multi_match"
    NESTED = "nested"
    PREFIX = "prefix"
    QUERY_STRING = "query_string"
    RANGE = "range"
    REGEXP = "regexp"
    SCRIPT = "script"
    SCRIPT_SCORE = "script_score"
    SIMPLE_QUERY_STRING = "simple_query_string"
    TERM = "term"
    TERMS = "terms"
    TERMS_SET = "terms_set"
    WILDCARD = "wildcard"


class QueryClause(Variant):
    """Base class of all query clauses."""

    domain = Domain.QUERY


class FieldClause(QueryClause):
    """A clause whose parameters are keyed by the target field name.

    ``shorthand`` names the trait that receives a non-object value in the
    ``{"<kind>": {"<field>": value}}`` short form.
    """

    core = ("field",)
    shorthand: ClassVar[str | None] = None

    field: str = ""

    def _encode_core(self) -> dict[str, Any]:
        return {self.field: {}}

    def _params_target(self, body: dict[str, Any], path: str) -> tuple[dict[str, Any], str]:
        return body[self.field], f"{path}.{self.field}"

    def _decode_core(self, obj: Mapping[str, Any], path: str) -> tuple[Mapping[str, Any], str]:
        if len(obj) != 1:
            raise MalformedJSONError(
                f"expected a single field key for {self.kind_name}, got {len(obj)} keys", path=path
            )
        field, inner = next(iter(obj.items()))
        self.field = field
        inner_path = f"{path}.{field}"
        if isinstance(inner, Mapping):
            return inner, inner_path
        if self.shorthand is None:
            raise MalformedJSONError(
                f"expected an object for {self.kind_name}, got {type(inner).__name__}", path=inner_path
            )
        return {self.param(self.shorthand).wire_name: inner}, inner_path


@registered
class MatchQuery(FieldClause):
    """Full-text query; the query text is analyzed before matching."""

    kind = QueryKind.MATCH
    shorthand = "query"
    required = ("field", "query")
    params = (
        QueryParam,
        AnalyzerParam,
        AutoGenerateSynonymsPhraseQueryParam,
        FuzzinessParam,
        FuzzyRewriteParam,
        FuzzyTranspositionsParam,
        LenientParam,
        OperatorParam,
        MaxExpansionsParam,
        PrefixLengthParam,
        MinimumShouldMatchParam,
        ZeroTermsQueryParam,
        CutoffFrequencyParam,
        BoostParam,
        NameParam,
    )


@registered
class MatchAllQuery(QueryClause):
    """Matches every document, giving each a score of ``boost``."""

    kind = QueryKind.MATCH_ALL
    params = (BoostParam, NameParam)


@registered
class MatchNoneQuery(QueryClause):
    kind = QueryKind.MATCH_NONE
    params = (NameParam,)


@registered
class TermQuery(FieldClause):
    """Documents containing an exact term in the field. The value is not analyzed."""

    kind = QueryKind.TERM
    shorthand = "value"
    required = ("field", "value")
    params = (ValueParam, BoostParam, CaseInsensitiveParam, NameParam)


@registered
class QueryStringQuery(QueryClause):
    """Query parsed with the strict query string syntax (``"(new york city) OR (big apple)"``)."""

    kind = QueryKind.QUERY_STRING
    required = ("query",)
    params = (
        QueryStringParam,
        DefaultFieldParam,
        AllowLeadingWildcardParam,
        AnalyzeWildcardParam,
        AnalyzerParam,
        AutoGenerateSynonymsPhraseQueryParam,
        BoostParam,
        DefaultOperatorParam,
        EnablePositionIncrementsParam,
        FieldsParam,
        FuzzinessParam,
        FuzzyMaxExpansionsParam,
        FuzzyTranspositionsParam,
        LenientParam,
        MaxDeterminizedStatesParam,
        MinimumShouldMatchParam,
        QuoteAnalyzerParam,
        PhraseSlopParam,
        QuoteFieldSuffixParam,
        RewriteParam,
        TimeZoneParam,
        TieBreakerParam,
        NameParam,
    )


@registered
class BoolQuery(QueryClause):
    """Boolean combination of clause lists. Clause order within each list is preserved."""

    kind = QueryKind.BOOL
    params = (
        MustParam,
        FilterClausesParam,
        ShouldParam,
        MustNotParam,
        MinimumShouldMatchParam,
        BoostParam,
        NameParam,
    )


@registered
class GeoShapeQuery(FieldClause):
    """Documents whose geo shape relates to an inline shape."""

    kind = QueryKind.GEO_SHAPE
    required = ("field", "shape")
    params = (ShapeParam, RelationParam)


# Params


class MatchQueryParams(Params):
    variant = MatchQuery

    field: str | None = None
    query: ScalarLike = None
    analyzer: str | None = None
    auto_generate_synonyms_phrase_query: BoolLike = None
    fuzziness: int | str | None = None
    fuzzy_rewrite: str | None = None
    fuzzy_transpositions: BoolLike = None
    lenient: BoolLike = None
    operator: Operator | str | None = None
    max_expansions: NumberLike = None
    prefix_length: NumberLike = None
    minimum_should_match: NumberLike = None
    zero_terms_query: ZeroTerms | str | None = None
    cutoff_frequency: NumberLike = None
    boost: NumberLike = None
    name: str | None = None


class MatchAllQueryParams(Params):
    variant = MatchAllQuery

    boost: NumberLike = None
    name: str | None = None


class MatchNoneQueryParams(Params):
    variant = MatchNoneQuery

    name: str | None = None


class TermQueryParams(Params):
    variant = TermQuery

    field: str | None = None
    value: ScalarLike = None
    boost: NumberLike = None
    case_insensitive: BoolLike = None
    name: str | None = None


class QueryStringQueryParams(Params):
    variant = QueryStringQuery

    query: str | None = None
    default_field: str | None = None
    allow_leading_wildcard: BoolLike = None
    analyze_wildcard: BoolLike = None
    analyzer: str | None = None
    auto_generate_synonyms_phrase_query: BoolLike = None
    boost: NumberLike = None
    default_operator: Operator | str | None = None
    enable_position_increments: BoolLike = None
    fields: list[str] | str | None = None
    fuzziness: int | str | None = None
    fuzzy_max_expansions: NumberLike = None
    fuzzy_transpositions: BoolLike = None
    lenient: BoolLike = None
    max_determinized_states: NumberLike = None
    minimum_should_match: NumberLike = None
    quote_analyzer: str | None = None
    phrase_slop: NumberLike = None
    quote_field_suffix: str | None = None
    rewrite: str | None = None
    time_zone: str | None = None
    tie_breaker: NumberLike = None
    name: str | None = None


class BoolQueryParams(Params):
    variant = BoolQuery

    must: Any = None
    filter: Any = None
    should: Any = None
    must_not: Any = None
    minimum_should_match: NumberLike = None
    boost: NumberLike = None
    name: str | None = None


class GeoShapeQueryParams(Params):
    variant = GeoShapeQuery

    field: str | None = None
    shape: dict[str, Any] | None = None
    relation: ShapeRelation | str | None = None
