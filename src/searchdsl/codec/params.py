# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter traits: independently composable optional attributes of a variant.

A trait owns exactly one attribute, knows its wire name and default, and
encodes/decodes itself into the variant's JSON body. It is in one of three
states:

* **unset** -- never serialized; decode leaves it untouched.
* **implicit default** -- assigned the default without the caller asking for
  it (``explicit=False``); omitted on encode like an unset trait.
* **explicit** -- assigned by the caller or present on the wire; always
  serialized, even when equal to the default, so decode -> encode is lossless.

Traits never look at each other. Cross-parameter rules live in
``Variant._validate``.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, ClassVar

from searchdsl.codec.errors import InvalidValueError, SearchDSLError
from searchdsl.codec.scalar import Bool, Flex, Number, NumberOrString, Scalar

# ###############
# Public Interface
# ###############


class Param:
    """Base class for all parameter traits.

    Subclasses set ``attr`` (the Python attribute exposed on the variant),
    ``wire_name`` (the JSON key) and ``default``, and override
    :meth:`_coerce` / :meth:`_to_json` / :meth:`_from_json` as needed.
    """

    __slots__ = ("_value", "_explicit")

    attr: ClassVar[str]
    wire_name: ClassVar[str]
    default: ClassVar[Any] = None
    target: ClassVar[str] = "value"

    def __init__(self) -> None:
        self._value: Any = None
        self._explicit = False

    def get(self) -> Any:
        """Return the assigned value, or the default when unset."""
        return self.default if self._value is None else self._value

    def set(self, value: Any, *, explicit: bool = True) -> None:
        """Assign *value*; ``None`` and ``""`` clear the trait.

        Raises:
            InvalidValueError: If *value* cannot be coerced.
        """
        if value is None or (isinstance(value, str) and value == ""):
            self.clear()
            return
        coerced = self._coerce(value)
        if coerced is None:
            self.clear()
            return
        self._value = coerced
        self._explicit = explicit

    def clear(self) -> None:
        self._value = None
        self._explicit = False

    def is_unset(self) -> bool:
        return self._value is None

    def is_explicit(self) -> bool:
        return self._value is not None and self._explicit

    def is_zero(self) -> bool:
        """True iff the trait is unset or holds an implicit default."""
        if self._value is None:
            return True
        return not self._explicit and self._value == self.default

    def encode_into(self, obj: dict[str, Any], path: str = "$") -> None:
        """Write ``obj[wire_name]`` unless :meth:`is_zero`; *path* locates *obj* in the document."""
        if self.is_zero():
            return
        child = f"{path}.{self.wire_name}"
        try:
            obj[self.wire_name] = self._to_json(self._value, child)
        except SearchDSLError as exc:
            raise exc.at(child)

    def decode_from(self, obj: Mapping[str, Any], path: str = "$", *, revalidate: bool = True) -> None:
        """Read ``obj[wire_name]`` if present; presence on the wire makes the value explicit.

        *revalidate* is handed to nested variants decoded by the trait.
        """
        if self.wire_name not in obj:
            return
        child = f"{path}.{self.wire_name}"
        try:
            self.set(self._from_json(obj[self.wire_name], child, revalidate))
        except SearchDSLError as exc:
            raise exc.at(child)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, Param)
        return self.is_zero() == other.is_zero() and self.get() == other.get()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "unset" if self._value is None else ("explicit" if self._explicit else "implicit")
        return f"{type(self).__name__}({self._value!r}, {state})"

    def _coerce(self, value: Any) -> Any:
        return value

    def _to_json(self, value: Any, path: str) -> Any:
        return value

    def _from_json(self, raw: Any, path: str, revalidate: bool) -> Any:
        return raw


class StringParam(Param):
    """A free-text parameter."""

    __slots__ = ()

    target = "string"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, enum.Enum):
            value = value.value
        if not isinstance(value, str):
            raise InvalidValueError(value, self.target)
        return value


class ScalarParam(Param):
    """A parameter backed by a flexible :class:`Scalar`.

    ``get`` returns the scalar's native value; equality uses the scalar's
    coerced comparison so ``3`` and ``"3"`` are the same setting.
    """

    __slots__ = ()

    scalar: ClassVar[type[Scalar]] = Flex

    def get(self) -> Any:
        return self.default if self._value is None else self._value.value

    def is_zero(self) -> bool:
        if self._value is None:
            return True
        return not self._explicit and self._value == self.scalar(self.default)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, ScalarParam)
        if self.is_zero() != other.is_zero():
            return False
        return self._as_scalar() == other._as_scalar()

    def _as_scalar(self) -> Scalar:
        return self.scalar(self.default) if self._value is None else self._value

    def _coerce(self, value: Any) -> Any:
        scalar = self.scalar(value)
        return None if scalar.is_unset() else scalar

    def _to_json(self, value: Any, path: str) -> Any:
        return value.to_json()


class NumberParam(ScalarParam):
    """A numeric parameter accepting numbers or numeric strings."""

    __slots__ = ()

    scalar = Number
    target = "number"


class BoolParam(ScalarParam):
    """A boolean parameter accepting booleans or ``"true"``/``"false"``."""

    __slots__ = ()

    scalar = Bool
    target = "boolean"


class FlexParam(ScalarParam):
    """A parameter accepting any of string, number, boolean or time."""

    __slots__ = ()

    scalar = Flex
    target = Flex.target


class NumberOrStringParam(ScalarParam):
    """A parameter accepting a number or free text such as ``"75%"``."""

    __slots__ = ()

    scalar = NumberOrString
    target = NumberOrString.target


class EnumParam(Param):
    """A parameter restricted to the members of ``enum_type`` (case-insensitive on input)."""

    __slots__ = ()

    enum_type: ClassVar[type[enum.Enum]]

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, self.enum_type):
            return value
        if isinstance(value, str):
            lowered = value.lower()
            for member in self.enum_type:
                if str(member.value).lower() == lowered:
                    return member
        choices = ", ".join(str(m.value) for m in self.enum_type)
        raise InvalidValueError(value, f"one of [{choices}]")

    def _to_json(self, value: Any, path: str) -> Any:
        return value.value


class StringListParam(Param):
    """A list of strings; a single string is promoted to a one-element list."""

    __slots__ = ()

    target = "string or list of strings"

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return list(value) or None
        raise InvalidValueError(value, self.target)

    def _to_json(self, value: Any, path: str) -> Any:
        return list(value)


class StringMapParam(Param):
    """A flat ``string -> string`` mapping such as field ``meta``."""

    __slots__ = ()

    target = "object of strings"

    def _coerce(self, value: Any) -> Any:
        if not isinstance(value, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in value.items()
        ):
            raise InvalidValueError(value, self.target)
        return dict(value) or None

    def _to_json(self, value: Any, path: str) -> Any:
        return dict(value)

