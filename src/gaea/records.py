"""Base record types shared by both schema variants."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, NamedTuple, TypeVar

from gaea.config import SchemaVariant
from gaea.fields import FieldSpec, text, wire_fields


class EdgeRef(NamedTuple):
    """One directed reference from a record to another entity by identifier."""

    source: str
    label: str
    target: str
    targets: tuple[str, ...]


_R = TypeVar("_R", bound="Record")


@dataclass
class Record:
    """Plain value type serialized as one protobuf message.

    ``unknown_fields`` holds raw wire bytes for field numbers the local
    schema does not declare. It is only filled when a catalog decodes with
    the preserve policy and never takes part in equality.
    """

    variant: ClassVar[SchemaVariant]

    unknown_fields: bytes = field(default=b"", compare=False, repr=False, kw_only=True)

    @classmethod
    def message_name(cls) -> str:
        return cls.__name__

    @classmethod
    def wire_fields(cls) -> list[tuple[str, FieldSpec]]:
        return wire_fields(cls)

    @classmethod
    def create(cls: type[_R], **values: Any) -> _R:
        """Build a record, filling an empty ``type`` field with the message name."""

        if "type" in cls.__dataclass_fields__ and not values.get("type"):
            values["type"] = cls.message_name()
        return cls(**values)

    @property
    def identifier(self) -> str:
        return ""

    def edges(self) -> Iterator[EdgeRef]:
        """Yield every edge reference held by this record, in field order.

        Values inside one edge field keep their stored order.
        """

        for attribute, spec in self.wire_fields():
            if not spec.is_edge:
                continue
            value = getattr(self, attribute)
            values = value if spec.kind.is_list else ([value] if value else [])
            for target in values:
                yield EdgeRef(self.identifier, spec.name or attribute, target, spec.targets)


@dataclass
class Entity(Record):
    """Vertex of the full graph schema.

    ``type`` repeats the message name so heterogeneous records can be told
    apart once they leave the type system (for example in a generic graph
    store). The constructor leaves it as given; :meth:`create` fills it in.
    """

    variant: ClassVar[SchemaVariant] = SchemaVariant.FULL

    id: str = text(1)
    gid: str = text(2)
    type: str = text(3)

    @property
    def identifier(self) -> str:
        return self.id


@dataclass
class TypedEdge(Record):
    """Full-schema edge that carries a payload beyond connectivity.

    ``in_id`` and ``out_id`` are the ``in``/``out`` identifier fields.
    """

    variant: ClassVar[SchemaVariant] = SchemaVariant.FULL

    type: str = text(1)
    in_id: str = text(2, name="in")
    out_id: str = text(3, name="out")


@dataclass
class LiteRecord(Record):
    """Record of the lite schema, keyed by ``name``."""

    variant: ClassVar[SchemaVariant] = SchemaVariant.LITE

    name: str = text(1)

    @property
    def identifier(self) -> str:
        return self.name
