# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Query clause domain: clause kinds, score functions, their traits and Params models."""

from searchdsl.query.clauses import (
    BoolQuery,
    BoolQueryParams,
    FieldClause,
    GeoShapeQuery,
    GeoShapeQueryParams,
    MatchAllQuery,
    MatchAllQueryParams,
    MatchNoneQuery,
    MatchNoneQueryParams,
    MatchQuery,
    MatchQueryParams,
    QueryClause,
    QueryKind,
    QueryStringQuery,
    QueryStringQueryParams,
    TermQuery,
    TermQueryParams,
)
from searchdsl.query.function_score import (
    BoostMode,
    DecayFunction,
    ExpFunction,
    ExpFunctionParams,
    FieldValueFactorFunction,
    FieldValueFactorFunctionParams,
    FunctionScoreQuery,
    FunctionScoreQueryParams,
    GaussFunction,
    GaussFunctionParams,
    LinearFunction,
    LinearFunctionParams,
    Modifier,
    MultiValueMode,
    ScoreFunction,
    ScoreFunctionKind,
    ScoreFunctions,
    ScoreMode,
    WeightFunction,
    WeightFunctionParams,
)
from searchdsl.query.params import Operator, ShapeRelation, ZeroTerms

__all__ = [
    # Clauses
    "QueryKind",
    "QueryClause",
    "FieldClause",
    "BoolQuery",
    "BoolQueryParams",
    "GeoShapeQuery",
    "GeoShapeQueryParams",
    "MatchAllQuery",
    "MatchAllQueryParams",
    "MatchNoneQuery",
    "MatchNoneQueryParams",
    "MatchQuery",
    "MatchQueryParams",
    "QueryStringQuery",
    "QueryStringQueryParams",
    "TermQuery",
    "TermQueryParams",
    "Operator",
    "ShapeRelation",
    "ZeroTerms",
    # Function score
    "FunctionScoreQuery",
    "FunctionScoreQueryParams",
    "ScoreFunctionKind",
    "ScoreFunction",
    "ScoreFunctions",
    "DecayFunction",
    "ExpFunction",
    "ExpFunctionParams",
    "GaussFunction",
    "GaussFunctionParams",
    "LinearFunction",
    "LinearFunctionParams",
    "WeightFunction",
    "WeightFunctionParams",
    "FieldValueFactorFunction",
    "FieldValueFactorFunctionParams",
    "ScoreMode",
    "BoostMode",
    "MultiValueMode",
    "Modifier",
]
