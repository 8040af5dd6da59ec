# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parameter trait framework."""

import enum

import pytest

from searchdsl.codec import (
    BoolParam,
    EnumParam,
    InvalidValueError,
    NumberOrStringParam,
    NumberParam,
    StringListParam,
    StringMapParam,
    StringParam,
)

# ###############
# Helpers
# ###############


class _Color(enum.Enum):
    RED = "red"
    GREEN = "green"


class _BoostParam(NumberParam):
    __slots__ = ()
    attr = "boost"
    wire_name = "boost"
    default = 1.0


class _EnabledParam(BoolParam):
    __slots__ = ()
    attr = "enabled"
    wire_name = "enabled"
    default = True


class _LabelParam(StringParam):
    __slots__ = ()
    attr = "label"
    wire_name = "_label"


class _ColorParam(EnumParam):
    __slots__ = ()
    attr = "color"
    wire_name = "color"
    enum_type = _Color
    default = _Color.RED


class _TagsParam(StringListParam):
    __slots__ = ()
    attr = "tags"
    wire_name = "tags"


class _MetaParam(StringMapParam):
    __slots__ = ()
    attr = "meta"
    wire_name = "meta"


class _MinimumParam(NumberOrStringParam):
    __slots__ = ()
    attr = "minimum"
    wire_name = "minimum"


def _encoded(param: object) -> dict:
    obj: dict = {}
    param.encode_into(obj)  # type: ignore[attr-defined]
    return obj


# ###############
# Three states
# ###############


class TestStates:
    def test_unset_is_zero_and_not_encoded(self) -> None:
        param = _BoostParam()
        assert param.is_unset()
        assert param.is_zero()
        assert param.get() == 1.0
        assert _encoded(param) == {}

    def test_implicit_default_is_not_encoded(self) -> None:
        param = _BoostParam()
        param.set(1.0, explicit=False)
        assert not param.is_unset()
        assert param.is_zero()
        assert not param.is_explicit()
        assert _encoded(param) == {}

    def test_explicit_default_is_encoded(self) -> None:
        param = _BoostParam()
        param.set(1.0)
        assert param.is_explicit()
        assert not param.is_zero()
        assert _encoded(param) == {"boost": 1.0}

    def test_implicit_non_default_is_encoded(self) -> None:
        param = _BoostParam()
        param.set(2, explicit=False)
        assert _encoded(param) == {"boost": 2}

    def test_non_default_boolean_is_encoded(self) -> None:
        param = _EnabledParam()
        param.set(False, explicit=False)
        assert _encoded(param) == {"enabled": False}

    @pytest.mark.parametrize("empty", [None, ""])
    def test_empty_input_clears(self, empty: object) -> None:
        param = _BoostParam()
        param.set(3)
        param.set(empty)
        assert param.is_unset()
        assert not param.is_explicit()


# ###############
# Decode
# ###############


class TestDecode:
    def test_absent_key_leaves_trait_untouched(self) -> None:
        param = _BoostParam()
        param.set(4)
        param.decode_from({"other": 1})
        assert param.get() == 4

    def test_presence_marks_explicit(self) -> None:
        param = _BoostParam()
        param.decode_from({"boost": 1.0})
        assert param.is_explicit()
        assert _encoded(param) == {"boost": 1.0}

    def test_wire_name_differs_from_attribute(self) -> None:
        param = _LabelParam()
        param.decode_from({"_label": "first"})
        assert param.get() == "first"
        assert _encoded(param) == {"_label": "first"}

    def test_invalid_wire_value_reports_path(self) -> None:
        param = _BoostParam()
        with pytest.raises(InvalidValueError) as exc_info:
            param.decode_from({"boost": "high"}, "$.match.title")
        assert exc_info.value.path == "$.match.title.boost"
        assert str(exc_info.value).startswith("$.match.title.boost: ")

    def test_numeric_string_on_the_wire(self) -> None:
        param = _BoostParam()
        param.decode_from({"boost": "2.5"})
        assert param.get() == 2.5
        assert _encoded(param) == {"boost": 2.5}


# ###############
# Equality
# ###############


class TestEquality:
    def test_coerced_values_compare_equal(self) -> None:
        a, b = _BoostParam(), _BoostParam()
        a.set(3)
        b.set("3")
        assert a == b

    def test_explicit_default_differs_from_unset(self) -> None:
        a, b = _BoostParam(), _BoostParam()
        a.set(1.0)
        assert a != b

    def test_implicit_default_equals_unset(self) -> None:
        a, b = _BoostParam(), _BoostParam()
        a.set(1, explicit=False)
        assert a == b


# ###############
# Typed traits
# ###############


class TestTypedTraits:
    def test_string_rejects_numbers(self) -> None:
        with pytest.raises(InvalidValueError):
            _LabelParam().set(5)

    def test_string_accepts_enum_members(self) -> None:
        param = _LabelParam()
        param.set(_Color.GREEN)
        assert param.get() == "green"

    @pytest.mark.parametrize("value", ["GREEN", "green", "Green", _Color.GREEN])
    def test_enum_is_case_insensitive(self, value: object) -> None:
        param = _ColorParam()
        param.set(value)
        assert param.get() is _Color.GREEN
        assert _encoded(param) == {"color": "green"}

    def test_enum_rejects_unknown_member(self) -> None:
        with pytest.raises(InvalidValueError, match=r"one of \[red, green\]"):
            _ColorParam().set("blue")

    def test_enum_default(self) -> None:
        assert _ColorParam().get() is _Color.RED

    def test_string_list_promotes_single_value(self) -> None:
        param = _TagsParam()
        param.set("a")
        assert param.get() == ["a"]

    def test_string_list_empty_is_unset(self) -> None:
        param = _TagsParam()
        param.set([])
        assert param.is_unset()

    def test_string_list_rejects_mixed_items(self) -> None:
        with pytest.raises(InvalidValueError):
            _TagsParam().set(["a", 1])

    def test_string_map(self) -> None:
        param = _MetaParam()
        param.set({"unit": "ms"})
        assert _encoded(param) == {"meta": {"unit": "ms"}}
        with pytest.raises(InvalidValueError):
            param.set({"unit": 5})

    def test_number_or_string(self) -> None:
        param = _MinimumParam()
        param.set("75%")
        assert _encoded(param) == {"minimum": "75%"}
        param.set(2)
        assert _encoded(param) == {"minimum": 2}
