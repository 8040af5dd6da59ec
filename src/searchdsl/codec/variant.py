# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Composite variants and the resolver that builds them from loose ``Params``.

A variant is a discriminator plus a few required core attributes plus an
explicit, ordered tuple of parameter traits. Its body is encoded by looping
over the traits; its capabilities are exactly the traits it declares.

``Params`` models are the builder-facing side: permissive pydantic models
whose fields mirror the variant's attributes. :func:`resolve` is the only
conversion point between the two.
"""

from __future__ import annotations

import copy
import enum
import logging
from collections.abc import Mapping, Sized
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from searchdsl.codec.errors import (
    InvalidParamError,
    InvalidValueError,
    MalformedJSONError,
    required_error,
)
from searchdsl.codec.params import Param
from searchdsl.codec.registry import Domain, discriminator

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

# Loose input types accepted by Params models; the scalar engine does the real coercion.
NumberLike = int | float | str | None
BoolLike = bool | str | None
ScalarLike = bool | int | float | str | datetime | None


class Variant:
    """Base class for canonical field mappings, query clauses, score functions and processors.

    Class attributes:
        domain: Domain whose registry knows this variant.
        kind: Discriminator, an enum member of the domain's kind enum.
        params: Parameter traits, in wire order.
        core: Names of required core attributes stored as plain strings.
        required: Attribute names (core or trait) checked in order by :meth:`validate`.
    """

    domain: ClassVar[Domain]
    kind: ClassVar[enum.Enum]
    params: ClassVar[tuple[type[Param], ...]] = ()
    core: ClassVar[tuple[str, ...]] = ()
    required: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for param_cls in cls.params:
            if param_cls.attr not in cls.__dict__:
                setattr(cls, param_cls.attr, _ParamAccessor(param_cls.attr))

    def __init__(self, **values: Any) -> None:
        self._params: dict[str, Param] = {param_cls.attr: param_cls() for param_cls in self.params}
        for name, value in values.items():
            self.assign(name, value)

    @property
    def kind_name(self) -> str:
        """The discriminator as it appears on the wire."""
        return discriminator(self.kind)

    @classmethod
    def has_param(cls, attr: str) -> bool:
        """Return True if this variant carries the trait exposed as *attr*."""
        return any(param_cls.attr == attr for param_cls in cls.params)

    def param(self, attr: str) -> Param:
        """Return the trait instance exposed as *attr*.

        Raises:
            KeyError: If the variant does not carry that trait.
        """
        return self._params[attr]

    def assign(self, name: str, value: Any, *, explicit: bool = True) -> None:
        """Set the core attribute or trait *name*.

        Raises:
            InvalidParamError: If the value cannot be coerced; the error names
                the parameter, the variant kind and the owning field.
            TypeError: If *name* is neither a core attribute nor a trait.
        """
        if name in self.core:
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise InvalidParamError(name, value, "string", kind=self.kind_name, field=self._owner())
            setattr(self, name, value)
            return
        param = self._params.get(name)
        if param is None:
            raise TypeError(f"{type(self).__name__} has no parameter {name!r}")
        try:
            param.set(value, explicit=explicit)
        except InvalidParamError:
            raise
        except InvalidValueError as exc:
            raise InvalidParamError(
                name, exc.value, exc.target, kind=self.kind_name, field=self._owner()
            ) from exc

    def encode_body(self, path: str = "$") -> dict[str, Any]:
        """Return the JSON body (without the discriminator); *path* locates the body in errors."""
        body = self._encode_core()
        target, target_path = self._params_target(body, path)
        for param in self._params.values():
            param.encode_into(target, target_path)
        return body

    def decode_body(self, obj: Any, path: str = "$", *, revalidate: bool = True) -> None:
        """Populate this (zero-value) variant from its JSON body.

        Args:
            obj: The body, without the discriminator.
            path: JSON path of *obj*, used in error messages.
            revalidate: Run the resolver checks on nested variants.
        """
        if not isinstance(obj, Mapping):
            raise MalformedJSONError(f"expected an object for {self.kind_name}, got {type(obj).__name__}", path=path)
        inner, inner_path = self._decode_core(obj, path)
        for param in self._params.values():
            param.decode_from(inner, inner_path, revalidate=revalidate)
        known = {param.wire_name for param in self._params.values()}
        for key in inner:
            if key not in known and key not in self.core:
                logger.debug("%s: ignoring unknown %s parameter %r", inner_path, self.kind_name, key)

    def validate(self) -> None:
        """Run required-attribute checks (in declaration order) and cross-parameter checks.

        Raises:
            ParamRequiredError: A subclass naming the first missing attribute.
        """
        for name in self.required:
            if self._is_missing(name):
                raise required_error(name)(name, kind=self.kind_name, field=self._owner())
        self._validate()

    def resolve(self) -> Variant:
        """Re-validate and return ``self``; resolving a canonical variant is a no-op."""
        self.validate()
        return self

    def clone(self) -> Variant:
        """Return an equal, independent copy."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, Variant)
        return self._core_values() == other._core_values() and self._params == other._params

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [f"{name}={value!r}" for name, value in self._core_values().items() if value]
        parts += [f"{attr}={param.get()!r}" for attr, param in self._params.items() if not param.is_zero()]
        return f"{type(self).__name__}({', '.join(parts)})"

    # Hooks for subclasses

    def _encode_core(self) -> dict[str, Any]:
        return {}

    def _params_target(self, body: dict[str, Any], path: str) -> tuple[dict[str, Any], str]:
        """Return the object inside *body* that receives the traits and its path."""
        return body, path

    def _decode_core(self, obj: Mapping[str, Any], path: str) -> tuple[Mapping[str, Any], str]:
        """Extract core attributes; return the object holding the traits and its path."""
        return obj, path

    def _validate(self) -> None:
        """Cross-parameter checks; traits never check each other."""

    def _owner(self) -> str | None:
        return getattr(self, "field", "") or None

    def _core_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.core}

    def _is_missing(self, name: str) -> bool:
        if name in self._params:
            return self._params[name].is_unset()
        return _is_blank(getattr(self, name, None))


class Params(BaseModel):
    """Builder-facing input for a variant.

    Field names mirror the variant's attribute names. Fields the caller sets
    explicitly are recorded as explicit on the traits, so they are emitted even
    when equal to their default.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    variant: ClassVar[type[Variant]]

    def resolve(self) -> Variant:
        """Validate this input and build the canonical variant.

        Order: required attributes, then per-parameter coercion, then
        cross-parameter checks.

        Raises:
            ParamRequiredError: A subclass naming the first missing attribute.
            InvalidParamError: If a parameter value cannot be coerced.
        """
        cls = self.variant
        values = {name: getattr(self, name) for name in type(self).model_fields}
        field = values.get("field")
        owner = field if isinstance(field, str) and field else None
        kind = discriminator(cls.kind)
        for name in cls.required:
            if _is_blank(values.get(name)):
                raise required_error(name)(name, kind=kind, field=owner)
        result = cls()
        for name, value in values.items():
            result.assign(name, value, explicit=name in self.model_fields_set)
        result.validate()
        return result


def resolve(source: Variant | Params, domain: Domain | None = None) -> Variant:
    """Return the canonical variant for *source*.

    Args:
        source: A canonical variant (returned as-is after validation) or a Params model.
        domain: When given, the resolved variant must belong to this domain.

    Raises:
        InvalidValueError: If *source* is not a variant or Params of *domain*.
    """
    if isinstance(source, (Variant, Params)):
        result = source.resolve()
        if domain is None or result.domain is domain:
            return result
    target = f"{domain.value} variant" if domain is not None else "variant"
    raise InvalidValueError(source, target, reason=f"got {type(source).__name__}")


# ################
# Implementation
# ################


class _ParamAccessor:
    """Exposes a trait's value as a plain attribute of the variant."""

    def __init__(self, attr: str) -> None:
        self.attr = attr

    def __get__(self, obj: Variant | None, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.param(self.attr).get()

    def __set__(self, obj: Variant, value: Any) -> None:
        obj.assign(self.attr, value)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Sized) and not isinstance(value, (bytes, bytearray)):
        return len(value) == 0
    return False
