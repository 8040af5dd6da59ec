# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy shared by the codec, the resolver and the containers.

Every error carries an optional JSON ``path`` (``$.properties.title.fields``)
so that a failure inside a large document can be located without re-parsing it.
"""

from __future__ import annotations

from typing import Any

# ###############
# Public Interface
# ###############


class SearchDSLError(Exception):
    """Base class for all errors raised by searchdsl.

    Attributes:
        message: Human-readable description without the path prefix.
        path: JSON path of the offending value, or ``None`` when unknown.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(_format(message, path))
        self.message = message
        self.path = path

    def at(self, path: str) -> SearchDSLError:
        """Attach *path* unless a more specific path is already recorded."""
        if self.path is None:
            self.path = path
            self.args = (_format(self.message, path),)
        return self


class MalformedJSONError(SearchDSLError):
    """Raised when input is not JSON or does not have the expected JSON shape."""


class UnsupportedTypeError(SearchDSLError):
    """Raised when a discriminator is not registered for its domain.

    Attributes:
        kind: The offending discriminator.
        domain: Name of the domain that was searched.
    """

    def __init__(self, kind: str, domain: str, *, path: str | None = None) -> None:
        super().__init__(f"unsupported {domain} type <{kind}>", path=path)
        self.kind = kind
        self.domain = domain


class MissingTypeError(SearchDSLError):
    """Raised when a field mapping object lacks its ``"type"`` property."""

    def __init__(self, field: str, *, path: str | None = None) -> None:
        super().__init__(f"mapping type is missing for {field}", path=path)
        self.field = field


class DuplicateDiscriminatorError(SearchDSLError):
    """Raised when a discriminator is registered twice for the same domain."""

    def __init__(self, kind: str, domain: str) -> None:
        super().__init__(f"{domain} type <{kind}> is already registered")
        self.kind = kind
        self.domain = domain


class FieldExistsError(SearchDSLError):
    """Raised by ``Fields.add_field`` when the key is already present."""

    def __init__(self, key: str) -> None:
        super().__init__(f"field already exists: {key}")
        self.key = key


class InvalidValueError(SearchDSLError):
    """Raised when a value cannot be coerced into its target kind.

    Attributes:
        value: The rejected input.
        target: Description of the expected kind (``"number"``, ``"boolean"``, ...).
    """

    def __init__(self, value: Any, target: str, *, reason: str | None = None, path: str | None = None) -> None:
        message = f"invalid value {value!r}, expected {target}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path=path)
        self.value = value
        self.target = target


class InvalidParamError(InvalidValueError):
    """An :class:`InvalidValueError` tied to a named parameter of a variant."""

    def __init__(
        self,
        param: str,
        value: Any,
        target: str,
        *,
        kind: str | None = None,
        field: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(value, target, path=path)
        self.param = param
        self.kind = kind
        self.field = field
        self.message = f"invalid {param}{_context(kind, field)}: {value!r} is not a valid {target}"
        self.args = (_format(self.message, path),)


class ExclusiveParamsError(SearchDSLError):
    """Raised when parameters that cannot be combined are set together."""

    def __init__(self, params: list[str], *, kind: str | None = None, path: str | None = None) -> None:
        names = ", ".join(params)
        super().__init__(f"exactly one of [{names}] may be set{_context(kind, None)}", path=path)
        self.params = params
        self.kind = kind


class ParamRequiredError(SearchDSLError):
    """Raised when a required parameter is missing.

    Subclasses fix ``param_name`` so callers can catch a specific missing
    parameter; the base class is used for parameters without a dedicated class.
    """

    param_name: str = ""

    def __init__(
        self,
        param: str | None = None,
        *,
        kind: str | None = None,
        field: str | None = None,
        path: str | None = None,
    ) -> None:
        self.param = param or self.param_name
        self.kind = kind
        self.field = field
        super().__init__(f"{self.param} is required{_context(kind, field)}", path=path)


class FieldRequiredError(ParamRequiredError):
    param_name = "field"


class QueryRequiredError(ParamRequiredError):
    param_name = "query"


class ValueRequiredError(ParamRequiredError):
    param_name = "value"


class PathRequiredError(ParamRequiredError):
    param_name = "path"


class OriginRequiredError(ParamRequiredError):
    param_name = "origin"


class ScaleRequiredError(ParamRequiredError):
    param_name = "scale"


class ScalingFactorRequiredError(ParamRequiredError):
    param_name = "scaling_factor"


class FunctionsRequiredError(ParamRequiredError):
    param_name = "functions"


def required_error(param: str) -> type[ParamRequiredError]:
    """Return the most specific :class:`ParamRequiredError` class for *param*."""
    return _REQUIRED_ERRORS.get(param, ParamRequiredError)


# ################
# Implementation
# ################

_REQUIRED_ERRORS: dict[str, type[ParamRequiredError]] = {
    cls.param_name: cls
    for cls in (
        FieldRequiredError,
        QueryRequiredError,
        ValueRequiredError,
        PathRequiredError,
        OriginRequiredError,
        ScaleRequiredError,
        ScalingFactorRequiredError,
        FunctionsRequiredError,
    )
}


def _format(message: str, path: str | None) -> str:
    return f"{path}: {message}" if path else message


def _context(kind: str | None, field: str | None) -> str:
    text = ""
    if kind:
        text += f" for {kind}"
    if field:
        text += f" on field {field}"
    return text
