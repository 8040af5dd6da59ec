# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flexible scalars: wire values that may legally arrive as a number, boolean, string or time.

A scalar distinguishes "never assigned" from "assigned the zero value" and
offers coercion accessors that report failure instead of silently returning a
zero. Equality is defined on the coerced value, so ``Number(3)`` equals
``Number("3")``.
"""

from __future__ import annotations

import enum
import math
from datetime import datetime
from typing import Any, ClassVar

from searchdsl.codec.errors import InvalidValueError

# ###############
# Public Interface
# ###############


class ScalarKind(enum.Enum):
    """The carrier kinds a scalar may hold."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    TIME = "time"


class Scalar:
    """Base class for flexible scalars.

    Subclasses restrict the accepted carriers by overriding :meth:`_normalize`.
    ``None`` and the empty string leave the scalar unset.
    """

    __slots__ = ("_value",)

    target: ClassVar[str] = "string, number, boolean or time"

    def __init__(self, value: Any = None) -> None:
        self._value: Any = _UNSET
        self.set(value)

    def set(self, value: Any) -> None:
        """Assign *value*, normalizing it into the scalar's canonical form.

        Raises:
            InvalidValueError: If *value* has an unsupported carrier type or a
                string cannot be parsed as the scalar's sub-kind.
        """
        if isinstance(value, Scalar):
            value = value.value
        if value is None or (isinstance(value, str) and value == ""):
            self._value = _UNSET
            return
        self._value = self._normalize(value)

    def clear(self) -> None:
        self._value = _UNSET

    def is_unset(self) -> bool:
        """Return True if the scalar was never assigned (or was cleared)."""
        return self._value is _UNSET

    @property
    def value(self) -> Any:
        """The canonical native value, or ``None`` when unset."""
        return None if self._value is _UNSET else self._value

    @property
    def carrier(self) -> ScalarKind | None:
        """The kind of the stored value, or ``None`` when unset."""
        if self._value is _UNSET:
            return None
        return _carrier(self._value)

    def as_float(self) -> tuple[float, bool]:
        """Return ``(value, True)`` if the scalar is numeric or a numeric string."""
        value = self._value
        if value is _UNSET or isinstance(value, bool):
            return 0.0, False
        if isinstance(value, (int, float)):
            return float(value), True
        if isinstance(value, str):
            parsed = _parse_number(value)
            if parsed is not None:
                return float(parsed), True
        return 0.0, False

    def as_bool(self) -> tuple[bool, bool]:
        """Return ``(value, True)`` if the scalar is a boolean or ``"true"``/``"false"``."""
        value = self._value
        if isinstance(value, bool):
            return value, True
        if isinstance(value, str):
            parsed = _parse_bool(value)
            if parsed is not None:
                return parsed, True
        return False, False

    def as_string(self) -> tuple[str, bool]:
        """Return the textual form of the scalar; fails only when unset."""
        value = self._value
        if value is _UNSET:
            return "", False
        if isinstance(value, bool):
            return ("true" if value else "false"), True
        if isinstance(value, datetime):
            return value.isoformat(), True
        return str(value), True

    def as_time(self) -> tuple[datetime | None, bool]:
        """Return ``(value, True)`` if the scalar is a time or an ISO 8601 string."""
        value = self._value
        if isinstance(value, datetime):
            return value, True
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value), True
            except ValueError:
                return None, False
        return None, False

    def to_json(self) -> Any:
        """Return the native-typed JSON value (``None`` when unset)."""
        if self._value is _UNSET:
            return None
        if isinstance(self._value, datetime):
            return self._value.isoformat()
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._value!r})"

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, (bool, str, datetime)):
            return value
        if isinstance(value, (int, float)):
            return _finite(value, self.target)
        raise InvalidValueError(value, self.target, reason=f"unsupported type {type(value).__name__}")

    def _key(self) -> tuple[Any, ...]:
        """Comparison key built from the coerced value rather than the wire form."""
        if self._value is _UNSET:
            return (None,)
        number, ok = self.as_float()
        if ok:
            return (ScalarKind.NUMBER, number)
        flag, ok = self.as_bool()
        if ok:
            return (ScalarKind.BOOLEAN, flag)
        moment, ok = self.as_time()
        if ok:
            return (ScalarKind.TIME, moment)
        return (ScalarKind.STRING, self._value)


class Number(Scalar):
    """A numeric scalar. Numeric strings are parsed; booleans are rejected."""

    __slots__ = ()

    target = ScalarKind.NUMBER.value

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, bool):
            raise InvalidValueError(value, self.target)
        if isinstance(value, (int, float)):
            return _finite(value, self.target)
        if isinstance(value, str):
            parsed = _parse_number(value)
            if parsed is None:
                raise InvalidValueError(value, self.target)
            return parsed
        raise InvalidValueError(value, self.target, reason=f"unsupported type {type(value).__name__}")


class Bool(Scalar):
    """A boolean scalar. The strings ``"true"`` and ``"false"`` are accepted."""

    __slots__ = ()

    target = ScalarKind.BOOLEAN.value

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            parsed = _parse_bool(value)
            if parsed is None:
                raise InvalidValueError(value, self.target)
            return parsed
        raise InvalidValueError(value, self.target, reason=f"unsupported type {type(value).__name__}")


class Flex(Scalar):
    """A scalar that keeps whichever of string, number, boolean or time it was given."""

    __slots__ = ()


class NumberOrString(Scalar):
    """A scalar holding either a number or free text (e.g. ``"75%"``, ``"2km"``)."""

    __slots__ = ()

    target = "number or string"

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, bool) or isinstance(value, datetime):
            raise InvalidValueError(value, self.target)
        return super()._normalize(value)


# ################
# Implementation
# ################


class _Unset:
    __slots__ = ()

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Unset:
        return self

    def __repr__(self) -> str:
        return "<unset>"


_UNSET = _Unset()


def _carrier(value: Any) -> ScalarKind:
    if isinstance(value, bool):
        return ScalarKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ScalarKind.NUMBER
    if isinstance(value, datetime):
        return ScalarKind.TIME
    return ScalarKind.STRING


def _finite(value: int | float, target: str) -> int | float:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValueError(value, target, reason="not finite")
    return value


def _parse_number(text: str) -> int | float | None:
    """Parse *text* as an int, falling back to a finite float; ``None`` if neither."""
    text = text.strip()
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def _parse_bool(text: str) -> bool | None:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None
