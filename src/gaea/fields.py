"""Wire field declarations for schema record types.

Record types are ordinary dataclasses. Each wire-visible attribute is declared
with one of the helpers below, which attaches a :class:`FieldSpec` to the
dataclass field metadata. The field *number* is the compatibility key on the
wire; the attribute and wire names are documentation only, so a number must
never be reused for a different field once data has been written with it.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from gaea.errors import SchemaDefinitionError

_WIRE_KEY = "gaea.wire"


class FieldKind(str, Enum):
    """Wire shape of a declared field."""

    STRING = "string"
    INT64 = "int64"
    DOUBLE = "double"
    STRING_LIST = "repeated string"
    DOUBLE_LIST = "repeated double"
    STRING_MAP = "map<string, string>"
    DOUBLE_MAP = "map<string, double>"

    @property
    def is_list(self) -> bool:
        return self in (FieldKind.STRING_LIST, FieldKind.DOUBLE_LIST)

    @property
    def is_map(self) -> bool:
        return self in (FieldKind.STRING_MAP, FieldKind.DOUBLE_MAP)

    def zero(self) -> Any:
        """Return a fresh zero value for this kind."""

        if self.is_list:
            return []
        if self.is_map:
            return {}
        if self is FieldKind.INT64:
            return 0
        if self is FieldKind.DOUBLE:
            return 0.0
        return ""


@dataclass(frozen=True)
class FieldSpec:
    """Wire declaration of one record attribute."""

    number: int
    kind: FieldKind
    name: str | None = None
    targets: tuple[str, ...] = ()
    is_edge: bool = False


def camel_case(attribute: str) -> str:
    """Convert ``in_family_edges`` into ``inFamilyEdges``."""

    head, *rest = attribute.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _declare(spec: FieldSpec) -> Any:
    if spec.number < 1:
        raise ValueError(f"Field numbers start at 1, got {spec.number}")
    metadata = {_WIRE_KEY: spec}
    if spec.kind.is_list:
        return dataclasses.field(default_factory=list, metadata=metadata)
    if spec.kind.is_map:
        return dataclasses.field(default_factory=dict, metadata=metadata)
    return dataclasses.field(default=spec.kind.zero(), metadata=metadata)


def text(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.STRING, name))


def integer(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.INT64, name))


def real(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.DOUBLE, name))


def texts(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.STRING_LIST, name))


def reals(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.DOUBLE_LIST, name))


def edges(number: int, *targets: str, name: str | None = None) -> Any:
    """Repeated identifier references to entities of the ``targets`` types."""

    return _declare(
        FieldSpec(number, FieldKind.STRING_LIST, name, targets=tuple(targets), is_edge=True)
    )


def edge(number: int, *targets: str, name: str | None = None) -> Any:
    """Single identifier reference to an entity of the ``targets`` types."""

    return _declare(
        FieldSpec(number, FieldKind.STRING, name, targets=tuple(targets), is_edge=True)
    )


def string_map(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.STRING_MAP, name))


def double_map(number: int, *, name: str | None = None) -> Any:
    return _declare(FieldSpec(number, FieldKind.DOUBLE_MAP, name))


_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def wire_fields(record_type: type) -> list[tuple[str, FieldSpec]]:
    """Return ``(attribute, spec)`` pairs ordered by field number.

    The returned specs always carry a resolved wire ``name``.
    """

    resolved: list[tuple[str, FieldSpec]] = []
    for item in dataclasses.fields(record_type):
        spec = item.metadata.get(_WIRE_KEY)
        if spec is None:
            continue
        if spec.name is None:
            spec = dataclasses.replace(spec, name=camel_case(item.name))
        resolved.append((item.name, spec))
    resolved.sort(key=lambda pair: pair[1].number)
    return resolved


def check_fields(record_type: type) -> list[tuple[str, FieldSpec]]:
    """Like :func:`wire_fields` but reject clashing numbers or names."""

    pairs = wire_fields(record_type)
    if not pairs:
        raise SchemaDefinitionError(f"{record_type.__name__} declares no wire fields")

    seen_numbers: dict[int, str] = {}
    seen_names: dict[str, str] = {}
    for attribute, spec in pairs:
        if spec.number in seen_numbers:
            raise SchemaDefinitionError(
                f"{record_type.__name__}: field number {spec.number} used by both "
                f"{seen_numbers[spec.number]} and {attribute}"
            )
        if spec.name in seen_names:
            raise SchemaDefinitionError(
                f"{record_type.__name__}: wire name {spec.name!r} used by both "
                f"{seen_names[spec.name]} and {attribute}"
            )
        if not _IDENT_RE.match(spec.name or ""):
            raise SchemaDefinitionError(
                f"{record_type.__name__}: invalid wire name {spec.name!r}"
            )
        seen_numbers[spec.number] = attribute
        seen_names[spec.name] = attribute
    return pairs
