# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the function_score query and its score functions."""

import pytest

from searchdsl.codec import (
    Domain,
    FieldRequiredError,
    FunctionsRequiredError,
    InvalidValueError,
    MalformedJSONError,
    OriginRequiredError,
    ParamRequiredError,
    ScaleRequiredError,
    decode,
    encode,
)
from searchdsl.query import (
    BoostMode,
    ExpFunction,
    ExpFunctionParams,
    FieldValueFactorFunction,
    FieldValueFactorFunctionParams,
    FunctionScoreQuery,
    FunctionScoreQueryParams,
    GaussFunction,
    GaussFunctionParams,
    MatchAllQueryParams,
    Modifier,
    MultiValueMode,
    ScoreFunctions,
    ScoreMode,
    TermQuery,
    TermQueryParams,
    WeightFunction,
    WeightFunctionParams,
)

# ###############
# Helpers
# ###############


def _function_score(*functions: object) -> FunctionScoreQueryParams:
    return FunctionScoreQueryParams(functions=list(functions))


# ###############
# Decay functions
# ###############


class TestDecayFunctions:
    def test_required_attributes_are_checked_in_order(self) -> None:
        with pytest.raises(FieldRequiredError):
            _function_score(ExpFunctionParams()).resolve()
        with pytest.raises(OriginRequiredError):
            _function_score(ExpFunctionParams(field="field")).resolve()
        with pytest.raises(ScaleRequiredError, match="scale is required for exp on field field"):
            _function_score(ExpFunctionParams(field="field", origin="sdf")).resolve()

    def test_full_function_score(self) -> None:
        params = FunctionScoreQueryParams(
            query=TermQueryParams(
                field="query_term_field",
                value="query_term_value",
                boost=3,
                case_insensitive=True,
                name="query_term",
            ),
            functions=[
                ExpFunctionParams(
                    field="fieldName",
                    origin="sdf",
                    scale=34,
                    weight=21,
                    offset=7,
                    decay="34",
                    filter=TermQueryParams(
                        field="term_field",
                        value="term_value",
                        boost=34,
                        case_insensitive=True,
                        name="term_name",
                    ),
                )
            ],
        )
        expected = {
            "function_score": {
                "query": {
                    "term": {
                        "query_term_field": {
                            "value": "query_term_value",
                            "boost": 3,
                            "case_insensitive": True,
                            "_name": "query_term",
                        }
                    }
                },
                "functions": [
                    {
                        "exp": {"fieldName": {"origin": "sdf", "scale": 34, "offset": 7, "decay": 34}},
                        "weight": 21,
                        "filter": {
                            "term": {
                                "term_field": {
                                    "value": "term_value",
                                    "boost": 34,
                                    "case_insensitive": True,
                                    "_name": "term_name",
                                }
                            }
                        },
                    }
                ],
            }
        }
        assert encode(params) == expected

        decoded = decode(expected, Domain.QUERY)
        assert isinstance(decoded, FunctionScoreQuery)
        assert isinstance(decoded.query, TermQuery)
        function = decoded.functions[0]
        assert isinstance(function, ExpFunction)
        assert function.field == "fieldName"
        assert function.decay == 34
        assert isinstance(function.filter, TermQuery)
        assert encode(decoded) == expected

    def test_multi_value_mode_sits_next_to_the_field(self) -> None:
        data = {"gauss": {"date": {"origin": "2013-09-17", "scale": "10d"}, "multi_value_mode": "avg"}}
        function = decode(data, Domain.SCORE_FUNCTION)
        assert isinstance(function, GaussFunction)
        assert function.multi_value_mode is MultiValueMode.AVG
        assert encode(function) == data

    def test_defaults(self) -> None:
        function = GaussFunctionParams(field="price", origin=0, scale=20).resolve()
        assert function.decay == 0.5
        assert function.multi_value_mode is MultiValueMode.MIN
        assert encode(function) == {"gauss": {"price": {"origin": 0, "scale": 20}}}

    def test_field_key_required_on_decode(self) -> None:
        with pytest.raises(MalformedJSONError) as exc_info:
            decode({"linear": {"multi_value_mode": "max"}}, Domain.SCORE_FUNCTION)
        assert exc_info.value.path == "$.linear"

    def test_error_path_inside_functions(self) -> None:
        data = {"function_score": {"functions": [{"weight": 1}, {"exp": {"date": {"origin": "now"}}}]}}
        with pytest.raises(ScaleRequiredError) as exc_info:
            decode(data, Domain.QUERY)
        assert exc_info.value.path == "$.function_score.functions[1]"


# ###############
# Other score functions
# ###############


class TestWeightFunction:
    def test_object_without_function_key_is_a_weight_function(self) -> None:
        data = {"filter": {"match_all": {}}, "weight": 23}
        function = decode(data, Domain.SCORE_FUNCTION)
        assert isinstance(function, WeightFunction)
        assert function.weight == 23
        assert encode(function) == {"weight": 23, "filter": {"match_all": {}}}

    def test_weight_required(self) -> None:
        with pytest.raises(ParamRequiredError, match="weight is required"):
            WeightFunctionParams(filter=MatchAllQueryParams()).resolve()


class TestFieldValueFactorFunction:
    def test_round_trip(self) -> None:
        data = {"field_value_factor": {"field": "likes", "factor": 1.2, "modifier": "sqrt", "missing": 1}}
        function = decode(data, Domain.SCORE_FUNCTION)
        assert isinstance(function, FieldValueFactorFunction)
        assert function.modifier is Modifier.SQRT
        assert encode(function) == data

    def test_params(self) -> None:
        params = FieldValueFactorFunctionParams(field="likes", modifier="LOG1P", weight=2)
        assert encode(params) == {"field_value_factor": {"field": "likes", "modifier": "log1p"}, "weight": 2}

    def test_field_required(self) -> None:
        with pytest.raises(FieldRequiredError):
            FieldValueFactorFunctionParams(factor=2).resolve()


# ###############
# Function score query
# ###############


class TestFunctionScoreQuery:
    def test_functions_required(self) -> None:
        with pytest.raises(FunctionsRequiredError):
            FunctionScoreQueryParams(query=MatchAllQueryParams()).resolve()
        with pytest.raises(FunctionsRequiredError):
            FunctionScoreQueryParams(functions=[]).resolve()

    def test_modes(self) -> None:
        params = FunctionScoreQueryParams(
            functions=[WeightFunctionParams(weight=2)],
            score_mode="Sum",
            boost_mode="replace",
            max_boost=42,
            min_score=0.5,
        )
        query = params.resolve()
        assert query.score_mode is ScoreMode.SUM
        assert query.boost_mode is BoostMode.REPLACE
        assert encode(query) == {
            "function_score": {
                "functions": [{"weight": 2}],
                "score_mode": "sum",
                "boost_mode": "replace",
                "max_boost": 42,
                "min_score": 0.5,
            }
        }

    def test_function_order_is_preserved(self) -> None:
        functions = ScoreFunctions(
            [
                GaussFunctionParams(field="price", origin=0, scale=20),
                WeightFunctionParams(weight=3),
                ExpFunctionParams(field="date", origin="now", scale="10d"),
            ]
        )
        query = FunctionScoreQueryParams(functions=functions).resolve()
        assert [function.kind_name for function in query.functions] == ["gauss", "weight", "exp"]
        assert [next(iter(item)) for item in encode(query)["function_score"]["functions"]] == [
            "gauss",
            "weight",
            "exp",
        ]

    def test_query_clauses_are_not_score_functions(self) -> None:
        with pytest.raises(InvalidValueError, match="score function variant"):
            ScoreFunctions([MatchAllQueryParams()])
