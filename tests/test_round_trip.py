# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encode/decode round trips for every registered kind of every domain."""

import pytest

from searchdsl import dumps, loads
from searchdsl.codec import Domain, Params, decode, encode, get_registry
from searchdsl.ingest import (
    LowercaseProcessorParams,
    RemoveProcessorParams,
    RenameProcessorParams,
    SetProcessorParams,
    TrimProcessorParams,
    UppercaseProcessorParams,
)
from searchdsl.mapping import (
    AliasFieldParams,
    BooleanFieldParams,
    ByteFieldParams,
    DateFieldParams,
    DateNanosFieldParams,
    DoubleFieldParams,
    FloatFieldParams,
    HalfFloatFieldParams,
    IntegerFieldParams,
    KeywordFieldParams,
    LongFieldParams,
    ObjectFieldParams,
    RankFeatureFieldParams,
    ScaledFloatFieldParams,
    ShortFieldParams,
    TextFieldParams,
)
from searchdsl.query import (
    BoolQueryParams,
    ExpFunctionParams,
    FieldValueFactorFunctionParams,
    FunctionScoreQueryParams,
    GaussFunctionParams,
    GeoShapeQueryParams,
    LinearFunctionParams,
    MatchAllQueryParams,
    MatchNoneQueryParams,
    MatchQueryParams,
    QueryStringQueryParams,
    TermQueryParams,
    WeightFunctionParams,
)

# ###############
# Samples
# ###############

_META = {"owner": "search-team"}


def _numeric(params_cls: type[Params]) -> Params:
    return params_cls(
        boost=2,
        coerce=False,
        doc_values=False,
        ignore_malformed=True,
        index=False,
        null_value=0,
        store=True,
        meta=_META,
    )


def _decay(params_cls: type[Params]) -> Params:
    return params_cls(
        field="published",
        origin="2024-01-01",
        scale="10d",
        offset="2d",
        decay=0.25,
        multi_value_mode="avg",
        weight=3,
        filter=TermQueryParams(field="status", value="live"),
    )


def _field_transform(params_cls: type[Params]) -> Params:
    return params_cls(
        field="name",
        target_field="name_normalized",
        ignore_missing=True,
        tag="normalize-name",
        description="normalize the display name",
        condition="ctx.name != null",
        ignore_failure=False,
        on_failure=[SetProcessorParams(field="error", value="normalize failed")],
    )


_SAMPLES: dict[tuple[Domain, str], Params] = {
    (Domain.FIELD, "alias"): AliasFieldParams(path="distance"),
    (Domain.FIELD, "keyword"): KeywordFieldParams(
        boost=1.5,
        doc_values=True,
        fields={"text": TextFieldParams(analyzer="standard")},
        ignore_above=256,
        index=True,
        normalizer="lowercase",
        null_value="NULL",
        store=False,
        meta=_META,
    ),
    (Domain.FIELD, "text"): TextFieldParams(
        analyzer="english",
        boost=2,
        fields={"raw": KeywordFieldParams(ignore_above=128), "route": AliasFieldParams(path="title_route")},
        index=True,
        search_analyzer="standard",
        store=True,
        meta=_META,
    ),
    (Domain.FIELD, "byte"): _numeric(ByteFieldParams),
    (Domain.FIELD, "short"): _numeric(ShortFieldParams),
    (Domain.FIELD, "integer"): _numeric(IntegerFieldParams),
    (Domain.FIELD, "long"): _numeric(LongFieldParams),
    (Domain.FIELD, "float"): _numeric(FloatFieldParams),
    (Domain.FIELD, "double"): _numeric(DoubleFieldParams),
    (Domain.FIELD, "half_float"): _numeric(HalfFloatFieldParams),
    (Domain.FIELD, "scaled_float"): ScaledFloatFieldParams(
        scaling_factor=100, boost=1, coerce=True, doc_values=True, index=True, null_value=1.5, store=False
    ),
    (Domain.FIELD, "date"): DateFieldParams(
        doc_values=True,
        format="yyyy-MM-dd",
        ignore_malformed=False,
        index=True,
        null_value="1970-01-01",
        store=False,
        meta=_META,
    ),
    (Domain.FIELD, "date_nanos"): DateNanosFieldParams(format="strict_date_optional_time_nanos", index=False),
    (Domain.FIELD, "boolean"): BooleanFieldParams(
        boost=1, doc_values=True, index=True, null_value=False, store=True, meta=_META
    ),
    (Domain.FIELD, "rank_feature"): RankFeatureFieldParams(positive_score_impact=False),
    (Domain.FIELD, "object"): ObjectFieldParams(
        properties={"city": KeywordFieldParams(), "zip": IntegerFieldParams(index=False)},
        enabled=True,
        dynamic="strict",
    ),
    (Domain.QUERY, "match"): MatchQueryParams(
        field="title",
        query="quick brown fox",
        analyzer="standard",
        auto_generate_synonyms_phrase_query=False,
        fuzziness="AUTO:3,6",
        fuzzy_rewrite="constant_score",
        fuzzy_transpositions=False,
        lenient=True,
        operator="and",
        max_expansions=20,
        prefix_length=1,
        minimum_should_match="75%",
        zero_terms_query="all",
        cutoff_frequency=0.01,
        boost=2,
        name="title_match",
    ),
    (Domain.QUERY, "match_all"): MatchAllQueryParams(boost=1.2, name="everything"),
    (Domain.QUERY, "match_none"): MatchNoneQueryParams(name="nothing"),
    (Domain.QUERY, "term"): TermQueryParams(
        field="user", value="kimchy", boost=1.0, case_insensitive=True, name="by_user"
    ),
    (Domain.QUERY, "query_string"): QueryStringQueryParams(
        query="(new york city) OR (big apple)",
        default_field="content",
        allow_leading_wildcard=False,
        analyze_wildcard=True,
        analyzer="standard",
        auto_generate_synonyms_phrase_query=True,
        boost=1.5,
        default_operator="AND",
        enable_position_increments=True,
        fields=["content", "name^5"],
        fuzziness=1,
        fuzzy_max_expansions=10,
        fuzzy_transpositions=True,
        lenient=False,
        max_determinized_states=5000,
        minimum_should_match=2,
        quote_analyzer="whitespace",
        phrase_slop=1,
        quote_field_suffix=".exact",
        rewrite="constant_score",
        time_zone="+01:00",
        tie_breaker=0,
        name="city_search",
    ),
    (Domain.QUERY, "bool"): BoolQueryParams(
        must=[MatchQueryParams(field="title", query="fox")],
        filter=[TermQueryParams(field="status", value="live")],
        should=[TermQueryParams(field="tag", value="b"), TermQueryParams(field="tag", value="a")],
        must_not=[MatchNoneQueryParams()],
        minimum_should_match=1,
        boost=1,
        name="combined",
    ),
    (Domain.QUERY, "geo_shape"): GeoShapeQueryParams(
        field="location",
        shape={"type": "envelope", "coordinates": [[13, 53], [14, 52]]},
        relation="within",
    ),
    (Domain.QUERY, "function_score"): FunctionScoreQueryParams(
        query=MatchAllQueryParams(),
        functions=[
            GaussFunctionParams(field="price", origin=0, scale=20),
            WeightFunctionParams(weight=2, filter=TermQueryParams(field="promoted", value=True)),
        ],
        score_mode="sum",
        boost_mode="replace",
        max_boost=42,
        min_score=0.5,
        boost=5,
        name="scored",
    ),
    (Domain.SCORE_FUNCTION, "exp"): _decay(ExpFunctionParams),
    (Domain.SCORE_FUNCTION, "gauss"): _decay(GaussFunctionParams),
    (Domain.SCORE_FUNCTION, "linear"): _decay(LinearFunctionParams),
    (Domain.SCORE_FUNCTION, "weight"): WeightFunctionParams(weight=23, filter=MatchAllQueryParams()),
    (Domain.SCORE_FUNCTION, "field_value_factor"): FieldValueFactorFunctionParams(
        field="likes",
        factor=1.2,
        modifier="sqrt",
        missing=1,
        weight=2,
        filter=TermQueryParams(field="visible", value=True),
    ),
    (Domain.PROCESSOR, "set"): SetProcessorParams(
        field="count",
        value=1,
        override=False,
        ignore_empty_value=True,
        media_type="text/plain",
        tag="init-count",
        description="start counting",
        condition="ctx.count == null",
        ignore_failure=True,
    ),
    (Domain.PROCESSOR, "remove"): RemoveProcessorParams(
        field=["user_agent", "url"], ignore_missing=True, tag="strip"
    ),
    (Domain.PROCESSOR, "rename"): RenameProcessorParams(
        field="provider",
        target_field="cloud.provider",
        ignore_missing=False,
        on_failure=[
            SetProcessorParams(field="error.message", value="{{ _ingest.on_failure_message }}"),
            RemoveProcessorParams(field="provider"),
        ],
    ),
    (Domain.PROCESSOR, "lowercase"): _field_transform(LowercaseProcessorParams),
    (Domain.PROCESSOR, "uppercase"): _field_transform(UppercaseProcessorParams),
    (Domain.PROCESSOR, "trim"): _field_transform(TrimProcessorParams),
}

_REGISTERED = [(domain, kind) for domain in Domain for kind in get_registry(domain).kinds()]


# ###############
# Round trips
# ###############


def test_every_registered_kind_has_a_sample() -> None:
    assert set(_SAMPLES) == set(_REGISTERED)


@pytest.mark.parametrize(("domain", "kind"), _REGISTERED, ids=[f"{d.name}-{k}" for d, k in _REGISTERED])
class TestRoundTrip:
    def test_decoded_variant_equals_original(self, domain: Domain, kind: str) -> None:
        original = _SAMPLES[(domain, kind)].resolve()
        assert original.kind_name == kind

        decoded = decode(encode(original), domain)
        assert type(decoded) is type(original)
        assert decoded == original

    def test_text_is_stable(self, domain: Domain, kind: str) -> None:
        text = dumps(_SAMPLES[(domain, kind)])
        assert dumps(loads(text, domain)) == text

    def test_every_parameter_is_written(self, domain: Domain, kind: str) -> None:
        params = _SAMPLES[(domain, kind)]
        variant = params.resolve()
        for name in params.model_fields_set:
            if name in variant.core:
                continue
            assert variant.param(name).is_explicit(), name
