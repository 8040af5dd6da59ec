# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Ingest pipeline processors.

Processors use the wrapped convention, ``{"set": {"field": "a", "value": 1}}``,
and a pipeline is an ordered :class:`Processors` sequence. Every processor
accepts the common ``tag``, ``description``, ``if``, ``ignore_failure`` and
``on_failure`` parameters.
"""

from __future__ import annotations

import enum
from typing import Any

from searchdsl.codec.containers import Clauses
from searchdsl.codec.errors import ExclusiveParamsError
from searchdsl.codec.params import BoolParam, FlexParam, StringListParam, StringParam
from searchdsl.codec.registry import Domain, registered
from searchdsl.codec.variant import BoolLike, Params, ScalarLike, Variant
from searchdsl.query.params import ClausesParam

# ###############
# Public Interface
# ###############


class ProcessorKind(enum.Enum):
    """Ingest processor discriminators."""

    APPEND = "append"
    BYTES = "bytes"
    CIRCLE = "circle"
    COMMUNITY_ID = "community_id"
    CONVERT = "convert"
    CSV = "csv"
    DATE = "date"
    DATE_INDEX_NAME = "date_index_name"
    DISSECT = "dissect"
    DOT_EXPANDER = "dot_expander"
    DROP = "drop"
    ENRICH = "enrich"
    FAIL = "fail"
    FINGERPRINT = "fingerprint"
    FOREACH = "foreach"
    GEOIP = "geoip"
    GROK = "grok"
    GSUB = "gsub"
    HTML_STRIP = "html_strip"
    INFERENCE = "inference"
    JOIN = "join"
    JSON = "json"
    KV = "kv"
    LOWERCASE = "lowercase"
    NETWORK_DIRECTION = "network_direction"
    PIPELINE = "pipeline"
    REMOVE = "remove"
    RENAME = "rename"
    SCRIPT = "script"
    SET = "set"
    SET_SECURITY_USER = "set_security_user"
    SORT = "sort"
    SPLIT = "split"
    TRIM = "trim"
    UPPERCASE = "uppercase"
    URL_DECODE = "urldecode"
    URI_PARTS = "uri_parts"
    USER_AGENT = "user_agent"


class Processors(Clauses):
    """An ordered pipeline of processors, encoded as ``[{"<kind>": {...}}, ...]``."""

    domain = Domain.PROCESSOR


class TagParam(StringParam):
    """Identifier of the processor, reported in errors and stats."""

    __slots__ = ()
    attr = "tag"
    wire_name = "tag"


class DescriptionParam(StringParam):
    __slots__ = ()
    attr = "description"
    wire_name = "description"


class ConditionParam(StringParam):
    """Painless condition; the processor only runs when it evaluates to true."""

    __slots__ = ()
    attr = "condition"
    wire_name = "if"


class IgnoreFailureParam(BoolParam):
    __slots__ = ()
    attr = "ignore_failure"
    wire_name = "ignore_failure"
    default = False


class OnFailureParam(ClausesParam):
    """Processors run, in order, when this processor fails."""

    __slots__ = ()
    attr = "on_failure"
    wire_name = "on_failure"
    container = Processors
    target = "processor or list of processors"


class FieldParam(StringParam):
    __slots__ = ()
    attr = "field"
    wire_name = "field"


class FieldsParam(StringListParam):
    """One field or a list of fields."""

    __slots__ = ()
    attr = "field"
    wire_name = "field"


class TargetFieldParam(StringParam):
    __slots__ = ()
    attr = "target_field"
    wire_name = "target_field"


class IgnoreMissingParam(BoolParam):
    """If true, a missing field leaves the document unmodified instead of failing."""

    __slots__ = ()
    attr = "ignore_missing"
    wire_name = "ignore_missing"
    default = False


class ValueParam(FlexParam):
    __slots__ = ()
    attr = "value"
    wire_name = "value"


class CopyFromParam(StringParam):
    __slots__ = ()
    attr = "copy_from"
    wire_name = "copy_from"


class OverrideParam(BoolParam):
    __slots__ = ()
    attr = "override"
    wire_name = "override"
    default = True


class IgnoreEmptyValueParam(BoolParam):
    __slots__ = ()
    attr = "ignore_empty_value"
    wire_name = "ignore_empty_value"
    default = False


class MediaTypeParam(StringParam):
    __slots__ = ()
    attr = "media_type"
    wire_name = "media_type"


COMMON_PARAMS = (TagParam, DescriptionParam, ConditionParam, IgnoreFailureParam, OnFailureParam)


class Processor(Variant):
    """Base class of ingest processors."""

    domain = Domain.PROCESSOR

    def _owner(self) -> str | None:
        if not self.has_param("field"):
            return None
        field = self.param("field").get()
        if isinstance(field, list):
            return ", ".join(field)
        return field or None


@registered
class SetProcessor(Processor):
    """Sets a field to ``value``, or copies it from ``copy_from``."""

    kind = ProcessorKind.SET
    required = ("field",)
    params = (
        FieldParam,
        ValueParam,
        CopyFromParam,
        OverrideParam,
        IgnoreEmptyValueParam,
        MediaTypeParam,
    ) + COMMON_PARAMS

    def _validate(self) -> None:
        _require_one_of(self, ("value", "copy_from"))


@registered
class RemoveProcessor(Processor):
    kind = ProcessorKind.REMOVE
    required = ("field",)
    params = (FieldsParam, IgnoreMissingParam) + COMMON_PARAMS


@registered
class RenameProcessor(Processor):
    kind = ProcessorKind.RENAME
    required = ("field", "target_field")
    params = (FieldParam, TargetFieldParam, IgnoreMissingParam) + COMMON_PARAMS


class FieldTransformProcessor(Processor):
    """A processor rewriting a single string field in place or into ``target_field``."""

    required = ("field",)
    params = (FieldParam, TargetFieldParam, IgnoreMissingParam) + COMMON_PARAMS


@registered
class LowercaseProcessor(FieldTransformProcessor):
    kind = ProcessorKind.LOWERCASE


@registered
class UppercaseProcessor(FieldTransformProcessor):
    kind = ProcessorKind.UPPERCASE


@registered
class TrimProcessor(FieldTransformProcessor):
    """Removes leading and trailing whitespace."""

    kind = ProcessorKind.TRIM


# Params


class ProcessorParams(Params):
    """Common fields of every processor Params model."""

    tag: str | None = None
    description: str | None = None
    condition: str | None = None
    ignore_failure: BoolLike = None
    on_failure: Any = None


class SetProcessorParams(ProcessorParams):
    variant = SetProcessor

    field: str | None = None
    value: ScalarLike = None
    copy_from: str | None = None
    override: BoolLike = None
    ignore_empty_value: BoolLike = None
    media_type: str | None = None


class RemoveProcessorParams(ProcessorParams):
    variant = RemoveProcessor

    field: list[str] | str | None = None
    ignore_missing: BoolLike = None


class RenameProcessorParams(ProcessorParams):
    variant = RenameProcessor

    field: str | None = None
    target_field: str | None = None
    ignore_missing: BoolLike = None


class FieldTransformProcessorParams(ProcessorParams):
    field: str | None = None
    target_field: str | None = None
    ignore_missing: BoolLike = None


class LowercaseProcessorParams(FieldTransformProcessorParams):
    variant = LowercaseProcessor


class UppercaseProcessorParams(FieldTransformProcessorParams):
    variant = UppercaseProcessor


class TrimProcessorParams(FieldTransformProcessorParams):
    variant = TrimProcessor


# ################
# Implementation
# ################


def _require_one_of(processor: Processor, names: tuple[str, ...]) -> None:
    present = [name for name in names if not processor.param(name).is_unset()]
    if len(present) != 1:
        raise ExclusiveParamsError(list(names), kind=processor.kind_name)
