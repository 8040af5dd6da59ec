# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoding and decoding of single variants to and from their JSON wire form.

Three discriminator conventions are supported, chosen per domain by its registry:

* wrapped -- ``{"match": {...}}`` (query clauses, processors)
* typed -- ``{"type": "keyword", ...}`` (field mappings)
* keyed -- ``{"exp": {...}, "weight": 2}`` (score functions); the variant
  encodes the whole object and the kind is the registered key present in it

:func:`dumps` and :func:`loads` are the text-level entry points; the
``encode``/``decode`` pair works on already-parsed JSON values.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from searchdsl.codec.errors import ExclusiveParamsError, MalformedJSONError, MissingTypeError, SearchDSLError
from searchdsl.codec.registry import Domain, Registry, WireStyle, discriminator, get_registry
from searchdsl.codec.variant import Params, Variant, resolve

if TYPE_CHECKING:
    from searchdsl.config import CodecConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

TYPE_KEY = "type"


def encode(source: Variant | Params, *, path: str = "$") -> dict[str, Any]:
    """Resolve *source* and return its discriminator-tagged JSON object.

    Args:
        source: A canonical variant or a Params model.
        path: JSON path the object is written to, used in error messages.
    """
    body_path = _body_path(source, path)
    try:
        variant = resolve(source)
        body = variant.encode_body(body_path)
    except SearchDSLError as exc:
        raise exc.at(body_path)
    style = get_registry(variant.domain).style
    if style is WireStyle.TYPED:
        return {TYPE_KEY: variant.kind_name, **body}
    if style is WireStyle.KEYED:
        return body
    return {variant.kind_name: body}


def decode(obj: Any, domain: Domain, *, path: str = "$", revalidate: bool = True, label: str | None = None) -> Variant:
    """Decode one variant of *domain* from a parsed JSON value.

    Args:
        obj: The parsed JSON object.
        domain: Domain whose registry and wire convention apply.
        path: JSON path of *obj*, used in error messages.
        revalidate: Run the resolver checks on the decoded variant.
        label: Name reported by :class:`MissingTypeError` (the field key for mappings).

    Raises:
        UnsupportedTypeError: If the discriminator is not registered.
        MissingTypeError: If a typed object lacks its ``"type"`` property.
        ExclusiveParamsError: If a keyed object carries more than one kind.
        MalformedJSONError: If *obj* does not have the expected shape.
    """
    reg = get_registry(domain)
    if not isinstance(obj, Mapping):
        raise MalformedJSONError(f"expected a {domain.value} object, got {type(obj).__name__}", path=path)
    if reg.style is WireStyle.TYPED:
        if TYPE_KEY not in obj:
            raise MissingTypeError(label or path, path=path)
        kind = obj[TYPE_KEY]
        body = {key: value for key, value in obj.items() if key != TYPE_KEY}
        body_path = path
    elif reg.style is WireStyle.KEYED:
        kind = _keyed_kind(obj, reg, path)
        body = obj
        body_path = path
    else:
        if len(obj) != 1:
            raise MalformedJSONError(
                f"expected a single {domain.value} type key, got {len(obj)} keys", path=path
            )
        kind, body = next(iter(obj.items()))
        body_path = f"{path}.{kind}"
        if body is None:
            body = {}
    if not isinstance(kind, str):
        raise MalformedJSONError(f"{domain.value} type must be a string, got {kind!r}", path=path)
    logger.debug("%s: decoding %s type %r", path, domain.value, kind)
    try:
        variant = reg.construct(kind)
        variant.decode_body(body, body_path, revalidate=revalidate)
        if revalidate:
            variant.validate()
    except SearchDSLError as exc:
        raise exc.at(body_path)
    return variant


def parse_json(data: str | bytes) -> Any:
    """Parse JSON text, mapping syntax errors to :class:`MalformedJSONError`."""
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise MalformedJSONError(f"invalid JSON: {exc}") from exc


def dumps(source: Any, *, config: CodecConfig | None = None) -> str:
    """Serialize a variant, Params model or container to JSON text."""
    if isinstance(source, (Variant, Params)):
        value = encode(source)
    else:
        value = source.to_json()
    return _dump_text(value, config)


def loads(data: str | bytes, domain: Domain, *, config: CodecConfig | None = None) -> Variant:
    """Parse JSON text holding a single variant of *domain*."""
    return decode(parse_json(data), domain, revalidate=_revalidate(config))


# ################
# Implementation
# ################


def _body_path(source: Any, path: str) -> str:
    if isinstance(source, Params):
        cls: type[Variant] = source.variant
    elif isinstance(source, Variant):
        cls = type(source)
    else:
        return path
    if get_registry(cls.domain).style is WireStyle.WRAPPED:
        return f"{path}.{discriminator(cls.kind)}"
    return path


def _keyed_kind(obj: Mapping[str, Any], reg: Registry, path: str) -> str:
    found = [key for key in obj if key != reg.fallback and key in reg]
    if len(found) > 1:
        raise ExclusiveParamsError(found, kind=reg.domain.value, path=path)
    if found:
        return found[0]
    if reg.fallback is None:
        raise MalformedJSONError(f"no {reg.domain.value} type key in object", path=path)
    return reg.fallback


def _dump_text(value: Any, config: CodecConfig | None) -> str:
    if config is None:
        return json.dumps(value, separators=(",", ":"))
    separators = (",", ":") if config.compact and config.indent is None else None
    return json.dumps(value, separators=separators, indent=config.indent, sort_keys=config.sort_keys)


def _revalidate(config: CodecConfig | None) -> bool:
    return True if config is None else config.revalidate_on_decode
