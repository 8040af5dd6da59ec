# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter traits used by query clauses and score functions."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from searchdsl.codec.containers import Clauses
from searchdsl.codec.errors import InvalidValueError
from searchdsl.codec.params import (
    BoolParam,
    EnumParam,
    FlexParam,
    NumberOrStringParam,
    NumberParam,
    Param,
    StringListParam,
    StringParam,
)
from searchdsl.codec.registry import Domain
from searchdsl.codec.variant import Params, Variant, resolve
from searchdsl.codec.wire import decode, encode

# ###############
# Public Interface
# ###############


class Operator(enum.Enum):
    """Boolean logic used to interpret the terms of a query string."""

    OR = "OR"
    AND = "AND"


class ZeroTerms(enum.Enum):
    """What to return when the analyzer removes every token."""

    NONE = "none"
    ALL = "all"


class ShapeRelation(enum.Enum):
    INTERSECTS = "intersects"
    DISJOINT = "disjoint"
    WITHIN = "within"
    CONTAINS = "contains"


class NameParam(StringParam):
    """Query name reported in ``matched_queries`` of each hit."""

    __slots__ = ()
    attr = "name"
    wire_name = "_name"


class BoostParam(NumberParam):
    """Relevance multiplier. Values between 0 and 1 decrease the score; defaults to 1.0."""

    __slots__ = ()
    attr = "boost"
    wire_name = "boost"
    default = 1.0


class AnalyzerParam(StringParam):
    __slots__ = ()
    attr = "analyzer"
    wire_name = "analyzer"


class QueryParam(FlexParam):
    """Text, number, boolean or date to find in the field."""

    __slots__ = ()
    attr = "query"
    wire_name = "query"


class QueryStringParam(StringParam):
    """Query text written in the query string syntax."""

    __slots__ = ()
    attr = "query"
    wire_name = "query"


class ValueParam(FlexParam):
    """Exact term to find in the field."""

    __slots__ = ()
    attr = "value"
    wire_name = "value"


class OperatorParam(EnumParam):
    __slots__ = ()
    attr = "operator"
    wire_name = "operator"
    enum_type = Operator
    default = Operator.OR


class DefaultOperatorParam(OperatorParam):
    __slots__ = ()
    attr = "default_operator"
    wire_name = "default_operator"


class ZeroTermsQueryParam(EnumParam):
    __slots__ = ()
    attr = "zero_terms_query"
    wire_name = "zero_terms_query"
    enum_type = ZeroTerms
    default = ZeroTerms.NONE


class FuzzinessParam(StringParam):
    """Maximum edit distance: ``0``, ``1``, ``2``, ``"AUTO"`` or ``"AUTO:<low>,<high>"``."""

    __slots__ = ()
    attr = "fuzziness"
    wire_name = "fuzziness"
    target = "fuzziness (0, 1, 2, AUTO or AUTO:low,high)"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool) and value in (0, 1, 2):
            return value
        if not isinstance(value, str) or not _FUZZINESS.fullmatch(value):
            raise InvalidValueError(value, self.target)
        if value.upper().startswith("AUTO"):
            return "AUTO" + value[4:]
        return value


class FuzzyTranspositionsParam(BoolParam):
    __slots__ = ()
    attr = "fuzzy_transpositions"
    wire_name = "fuzzy_transpositions"
    default = True


class FuzzyRewriteParam(StringParam):
    __slots__ = ()
    attr = "fuzzy_rewrite"
    wire_name = "fuzzy_rewrite"


class RewriteParam(StringParam):
    """Method used to rewrite multi-term queries, e.g. ``"constant_score"``."""

    __slots__ = ()
    attr = "rewrite"
    wire_name = "rewrite"


class LenientParam(BoolParam):
    """If true, format-based errors such as a text query on a numeric field are ignored."""

    __slots__ = ()
    attr = "lenient"
    wire_name = "lenient"
    default = False


class MaxExpansionsParam(NumberParam):
    __slots__ = ()
    attr = "max_expansions"
    wire_name = "max_expansions"
    default = 50


class FuzzyMaxExpansionsParam(MaxExpansionsParam):
    __slots__ = ()
    attr = "fuzzy_max_expansions"
    wire_name = "fuzzy_max_expansions"


class PrefixLengthParam(NumberParam):
    __slots__ = ()
    attr = "prefix_length"
    wire_name = "prefix_length"
    default = 0


class MinimumShouldMatchParam(NumberOrStringParam):
    """Minimum number of optional clauses that must match, e.g. ``2``, ``"75%"`` or ``"3<90%"``."""

    __slots__ = ()
    attr = "minimum_should_match"
    wire_name = "minimum_should_match"


class CutoffFrequencyParam(NumberParam):
    __slots__ = ()
    attr = "cutoff_frequency"
    wire_name = "cutoff_frequency"


class AutoGenerateSynonymsPhraseQueryParam(BoolParam):
    __slots__ = ()
    attr = "auto_generate_synonyms_phrase_query"
    wire_name = "auto_generate_synonyms_phrase_query"
    default = True


class CaseInsensitiveParam(BoolParam):
    __slots__ = ()
    attr = "case_insensitive"
    wire_name = "case_insensitive"
    default = False


class DefaultFieldParam(StringParam):
    """Field searched when the query string names none. Defaults to ``index.query.default_field``."""

    __slots__ = ()
    attr = "default_field"
    wire_name = "default_field"


class FieldsParam(StringListParam):
    """Fields to search, optionally boosted with ``^``, e.g. ``["title^3", "body"]``."""

    __slots__ = ()
    attr = "fields"
    wire_name = "fields"


class AllowLeadingWildcardParam(BoolParam):
    __slots__ = ()
    attr = "allow_leading_wildcard"
    wire_name = "allow_leading_wildcard"
    default = True


class AnalyzeWildcardParam(BoolParam):
    __slots__ = ()
    attr = "analyze_wildcard"
    wire_name = "analyze_wildcard"
    default = False


class EnablePositionIncrementsParam(BoolParam):
    __slots__ = ()
    attr = "enable_position_increments"
    wire_name = "enable_position_increments"
    default = True


class MaxDeterminizedStatesParam(NumberParam):
    __slots__ = ()
    attr = "max_determinized_states"
    wire_name = "max_determinized_states"
    default = 10000


class QuoteAnalyzerParam(StringParam):
    __slots__ = ()
    attr = "quote_analyzer"
    wire_name = "quote_analyzer"


class QuoteFieldSuffixParam(StringParam):
    __slots__ = ()
    attr = "quote_field_suffix"
    wire_name = "quote_field_suffix"


class PhraseSlopParam(NumberParam):
    __slots__ = ()
    attr = "phrase_slop"
    wire_name = "phrase_slop"
    default = 0


class TimeZoneParam(StringParam):
    """UTC offset or IANA zone used to convert dates in the query, e.g. ``"+01:00"``."""

    __slots__ = ()
    attr = "time_zone"
    wire_name = "time_zone"


class TieBreakerParam(NumberParam):
    __slots__ = ()
    attr = "tie_breaker"
    wire_name = "tie_breaker"


class ShapeParam(Param):
    """An inline GeoJSON-like shape, e.g. ``{"type": "envelope", "coordinates": [...]}``."""

    __slots__ = ()
    attr = "shape"
    wire_name = "shape"
    target = "shape object with a type"

    def _coerce(self, value: Any) -> Any:
        if not isinstance(value, Mapping) or not isinstance(value.get("type"), str):
            raise InvalidValueError(value, self.target)
        return dict(value)


class RelationParam(EnumParam):
    __slots__ = ()
    attr = "relation"
    wire_name = "relation"
    enum_type = ShapeRelation
    default = ShapeRelation.INTERSECTS


class ClauseParam(Param):
    """A single nested query clause, e.g. the ``query`` of a function score."""

    __slots__ = ()
    target = "query clause"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, (Variant, Params)):
            return resolve(value, Domain.QUERY)
        raise InvalidValueError(value, self.target)

    def _to_json(self, value: Any, path: str) -> Any:
        return encode(value, path=path)

    def _from_json(self, raw: Any, path: str, revalidate: bool) -> Any:
        return decode(raw, Domain.QUERY, path=path, revalidate=revalidate)


class InnerQueryParam(ClauseParam):
    __slots__ = ()
    attr = "query"
    wire_name = "query"


class FilterParam(ClauseParam):
    """Clause restricting which documents a score function applies to."""

    __slots__ = ()
    attr = "filter"
    wire_name = "filter"


class ClausesParam(Param):
    """An ordered list of nested variants held in a :class:`Clauses` container."""

    __slots__ = ()
    container: ClassVar[type[Clauses]] = Clauses
    target = "clause or list of clauses"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, self.container):
            clauses = value.copy()
        elif isinstance(value, (Variant, Params)):
            clauses = self.container(value)
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping)):
            clauses = self.container(list(value))
        else:
            raise InvalidValueError(value, self.target)
        return clauses if len(clauses) else None

    def _to_json(self, value: Any, path: str) -> Any:
        return value.to_json(path=path)

    def _from_json(self, raw: Any, path: str, revalidate: bool) -> Any:
        return self.container.from_json(raw, path=path, revalidate=revalidate)


class MustParam(ClausesParam):
    """Clauses that must match and contribute to the score."""

    __slots__ = ()
    attr = "must"
    wire_name = "must"


class FilterClausesParam(ClausesParam):
    """Clauses that must match but do not contribute to the score."""

    __slots__ = ()
    attr = "filter"
    wire_name = "filter"


class ShouldParam(ClausesParam):
    __slots__ = ()
    attr = "should"
    wire_name = "should"


class MustNotParam(ClausesParam):
    __slots__ = ()
    attr = "must_not"
    wire_name = "must_not"


# ################
# Implementation
# ################

_FUZZINESS = re.compile(r"[012]|(?i:auto)(:\d+,\d+)?")
