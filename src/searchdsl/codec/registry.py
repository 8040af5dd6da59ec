# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discriminator registries: one ``kind -> zero-value factory`` table per domain.

Registries are filled once while the catalog modules are imported and are
read-only afterwards. They never inspect a decoded body; they only turn a
discriminator string into an empty variant ready to decode itself.
Concurrent calls to :func:`register` must be serialized by the caller.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from searchdsl.codec.errors import DuplicateDiscriminatorError, UnsupportedTypeError

if TYPE_CHECKING:
    from searchdsl.codec.variant import Variant

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Domain(enum.Enum):
    """The families of tagged unions known to the codec."""

    FIELD = "field"
    QUERY = "query"
    SCORE_FUNCTION = "score function"
    PROCESSOR = "processor"


class WireStyle(enum.Enum):
    """How a domain places its discriminator on the wire."""

    # {"<kind>": {...body}}
    WRAPPED = "wrapped"
    # {"type": "<kind>", ...body}
    TYPED = "typed"
    # {"<kind>": {...}, ...siblings}; the kind is whichever registered key is present
    KEYED = "keyed"


Factory = Callable[[], "Variant"]
_V = TypeVar("_V", bound=type)


class Registry:
    """Maps the discriminators of one domain to zero-value factories.

    Attributes:
        domain: The domain served by this registry.
        style: Wire convention used by the domain.
        fallback: For keyed domains, the kind assumed when no other registered
            key is present in the object.
    """

    def __init__(self, domain: Domain, style: WireStyle, fallback: str | None = None) -> None:
        self.domain = domain
        self.style = style
        self.fallback = fallback
        self._factories: dict[str, Factory] = {}

    def register(self, kind: str | enum.Enum, factory: Factory) -> None:
        """Register *factory* for *kind*.

        Raises:
            DuplicateDiscriminatorError: If *kind* is already registered.
        """
        key = discriminator(kind)
        if key in self._factories:
            raise DuplicateDiscriminatorError(key, self.domain.value)
        self._factories[key] = factory
        logger.debug("registered %s type %r", self.domain.value, key)

    def lookup(self, kind: str | enum.Enum) -> Factory | None:
        """Return the factory for *kind*, or ``None`` if it is not registered."""
        return self._factories.get(discriminator(kind))

    def construct(self, kind: str | enum.Enum) -> Variant:
        """Return a zero-value variant for *kind*.

        Raises:
            UnsupportedTypeError: If *kind* is not registered.
        """
        factory = self.lookup(kind)
        if factory is None:
            raise UnsupportedTypeError(discriminator(kind), self.domain.value)
        return factory()

    def kinds(self) -> list[str]:
        """Return every registered discriminator in registration order."""
        return list(self._factories)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, (str, enum.Enum)):
            return False
        return discriminator(kind) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def get_registry(domain: Domain) -> Registry:
    """Return the process-wide registry for *domain*."""
    return _REGISTRIES[domain]


def register(domain: Domain, kind: str | enum.Enum, factory: Factory) -> None:
    """Register *factory* for *kind* in *domain*'s registry."""
    _REGISTRIES[domain].register(kind, factory)


def lookup(domain: Domain, kind: str | enum.Enum) -> Factory | None:
    return _REGISTRIES[domain].lookup(kind)


def construct(domain: Domain, kind: str | enum.Enum) -> Variant:
    return _REGISTRIES[domain].construct(kind)


def registered(cls: _V) -> _V:
    """Class decorator registering a variant class under its ``domain`` and ``kind``."""
    variant_cls: Any = cls
    register(variant_cls.domain, variant_cls.kind, cls)
    return cls


def discriminator(kind: str | enum.Enum) -> str:
    """Return the wire string for *kind*."""
    if isinstance(kind, enum.Enum):
        return str(kind.value)
    return kind


# ################
# Implementation
# ################

_REGISTRIES: dict[Domain, Registry] = {
    Domain.FIELD: Registry(Domain.FIELD, WireStyle.TYPED),
    Domain.QUERY: Registry(Domain.QUERY, WireStyle.WRAPPED),
    Domain.SCORE_FUNCTION: Registry(Domain.SCORE_FUNCTION, WireStyle.KEYED, fallback="weight"),
    Domain.PROCESSOR: Registry(Domain.PROCESSOR, WireStyle.WRAPPED),
}
