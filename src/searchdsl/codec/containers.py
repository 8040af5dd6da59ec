# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Container codecs: ``Fields`` (keyed field mappings) and ``Clauses`` (ordered variants).

Both containers only ever store canonical variants: Params inserted into them
are resolved on the way in. Encoding resolves every entry once more, so the
encoded form always reflects a validated state.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence
from typing import TYPE_CHECKING, Any, ClassVar, overload

from searchdsl.codec.errors import FieldExistsError, MalformedJSONError, SearchDSLError
from searchdsl.codec.registry import Domain
from searchdsl.codec.variant import Params, Variant, resolve
from searchdsl.codec.wire import decode, dumps, encode, parse_json

if TYPE_CHECKING:
    from searchdsl.config import CodecConfig

# ###############
# Public Interface
# ###############


class Fields(MutableMapping[str, Variant]):
    """A ``name -> field mapping`` collection, encoded as ``{"name": {"type": ..., ...}}``.

    Insertion order is preserved for reproducible output.
    """

    def __init__(self, fields: Mapping[str, Variant | Params] | None = None) -> None:
        self._fields: dict[str, Variant] = {}
        for key, value in (fields or {}).items():
            self.set_field(key, value)

    def field(self, key: str) -> Variant | None:
        """Return the field mapped at *key*, or ``None``."""
        return self._fields.get(key)

    def set_field(self, key: str, field: Variant | Params) -> None:
        """Set *key* to *field*, overwriting any existing entry."""
        self._fields[key] = _resolve_field(key, field)

    def add_field(self, key: str, field: Variant | Params) -> None:
        """Insert *field* at *key*.

        The field is resolved before insertion, so a failure leaves the
        container unchanged.

        Raises:
            FieldExistsError: If *key* is already present.
        """
        if key in self._fields:
            raise FieldExistsError(key)
        self._fields[key] = _resolve_field(key, field)

    def delete_field(self, key: str) -> None:
        """Remove *key* if present."""
        self._fields.pop(key, None)

    def to_json(self, *, path: str = "$") -> dict[str, Any]:
        """Encode every field; *path* locates this container in error messages."""
        return {key: encode(field, path=f"{path}.{key}") for key, field in self._fields.items()}

    @classmethod
    def from_json(cls, obj: Any, *, path: str = "$", revalidate: bool = True) -> Fields:
        """Decode a JSON object of field mappings.

        Raises:
            MissingTypeError: If an entry has no ``"type"`` property.
            UnsupportedTypeError: If an entry's type is not registered.
        """
        if not isinstance(obj, Mapping):
            raise MalformedJSONError(f"expected an object of fields, got {type(obj).__name__}", path=path)
        fields = cls()
        for key, value in obj.items():
            fields._fields[key] = decode(
                value, Domain.FIELD, path=f"{path}.{key}", revalidate=revalidate, label=key
            )
        return fields

    @classmethod
    def loads(cls, data: str | bytes, *, config: CodecConfig | None = None) -> Fields:
        return cls.from_json(parse_json(data), revalidate=config is None or config.revalidate_on_decode)

    def dumps(self) -> str:
        return dumps(self)

    def copy(self) -> Fields:
        other = type(self)()
        other._fields = {key: field.clone() for key, field in self._fields.items()}
        return other

    def __getitem__(self, key: str) -> Variant:
        return self._fields[key]

    def __setitem__(self, key: str, value: Variant | Params) -> None:
        self.set_field(key, value)

    def __delitem__(self, key: str) -> None:
        del self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Fields({self._fields!r})"


class Clauses(MutableSequence[Variant]):
    """An ordered sequence of wrapped variants, encoded as ``[{"kind": {...}}, ...]``.

    Order is significant (it drives how clauses combine and how scoring
    functions are summed) and is preserved through encode and decode.
    """

    domain: ClassVar[Domain] = Domain.QUERY

    def __init__(self, clauses: Iterable[Variant | Params] | Variant | Params | None = None) -> None:
        self._clauses: list[Variant] = []
        if isinstance(clauses, (Variant, Params)):
            clauses = [clauses]
        for clause in clauses or ():
            self.add(clause)

    def add(self, clause: Variant | Params) -> None:
        """Resolve *clause* and append it."""
        self.append(clause)

    def remove_by_name(self, name: str) -> int:
        """Remove every clause whose ``_name`` equals *name*; return how many were removed."""
        kept = [clause for clause in self._clauses if _clause_name(clause) != name]
        removed = len(self._clauses) - len(kept)
        self._clauses = kept
        return removed

    def validate(self, *, path: str = "$") -> None:
        """Re-resolve every clause, raising the first failure."""
        for index, clause in enumerate(self._clauses):
            try:
                self._clauses[index] = resolve(clause, self.domain)
            except SearchDSLError as exc:
                raise exc.at(f"{path}[{index}]")

    def to_json(self, *, path: str = "$") -> list[dict[str, Any]]:
        """Encode every clause in order; *path* locates this container in error messages."""
        return [encode(clause, path=f"{path}[{index}]") for index, clause in enumerate(self._clauses)]

    @classmethod
    def from_json(cls, obj: Any, *, path: str = "$", revalidate: bool = True) -> Clauses:
        """Decode a single wrapped object or an array of them, preserving order.

        Raises:
            UnsupportedTypeError: If a discriminator is not registered; the
                message names the offending key.
        """
        if isinstance(obj, Mapping):
            items: list[Any] = [obj]
            paths = [path]
        elif isinstance(obj, list):
            items = obj
            paths = [f"{path}[{index}]" for index in range(len(obj))]
        else:
            raise MalformedJSONError(
                f"expected an object or array of {cls.domain.value} clauses, got {type(obj).__name__}",
                path=path,
            )
        clauses = cls()
        for item, item_path in zip(items, paths):
            clauses._clauses.append(decode(item, cls.domain, path=item_path, revalidate=revalidate))
        return clauses

    @classmethod
    def loads(cls, data: str | bytes, *, config: CodecConfig | None = None) -> Clauses:
        return cls.from_json(parse_json(data), revalidate=config is None or config.revalidate_on_decode)

    def dumps(self) -> str:
        return dumps(self)

    def copy(self) -> Clauses:
        other = type(self)()
        other._clauses = [clause.clone() for clause in self._clauses]
        return other

    @overload
    def __getitem__(self, index: int) -> Variant: ...

    @overload
    def __getitem__(self, index: slice) -> list[Variant]: ...

    def __getitem__(self, index: int | slice) -> Variant | list[Variant]:
        return self._clauses[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            self._clauses[index] = [resolve(v, self.domain) for v in value]
        else:
            self._clauses[index] = resolve(value, self.domain)

    def __delitem__(self, index: int | slice) -> None:
        del self._clauses[index]

    def __len__(self) -> int:
        return len(self._clauses)

    def insert(self, index: int, value: Variant | Params) -> None:
        self._clauses.insert(index, resolve(value, self.domain))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clauses):
            return NotImplemented
        return type(self) is type(other) and self._clauses == other._clauses

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._clauses!r})"


# ################
# Implementation
# ################


def _resolve_field(key: str, field: Variant | Params) -> Variant:
    try:
        return resolve(field, Domain.FIELD)
    except SearchDSLError as exc:
        raise exc.at(f"$.{key}")


def _clause_name(clause: Variant) -> str:
    if not clause.has_param("name"):
        return ""
    return clause.param("name").get() or ""
