"""Schema catalogs: registries of record types bound to one wire schema.

A catalog owns a private protobuf descriptor pool built from the record
declarations it holds, and converts records to and from protobuf binary and
a JSON-ready mapping form. Field numbers, not names, identify fields on the
wire, so payloads written by older or newer revisions of a record type decode
as long as the numbers agree.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf import message as pb_message
from jsonschema.validators import validator_for

from gaea import lite, schema
from gaea.config import DeploymentConfig, SchemaVariant, UnknownFieldPolicy
from gaea.descriptors import build_file_descriptor, render_proto
from gaea.errors import DecodeError, EncodeError, SchemaVariantError, UnknownEntityError
from gaea.fields import FieldKind, FieldSpec, check_fields
from gaea.records import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_JSON_TYPES: dict[FieldKind, dict[str, Any]] = {
    FieldKind.STRING: {"type": "string"},
    FieldKind.INT64: {"type": "integer", "minimum": _INT64_MIN, "maximum": _INT64_MAX},
    FieldKind.DOUBLE: {"type": "number"},
    FieldKind.STRING_LIST: {"type": "array", "items": {"type": "string"}},
    FieldKind.DOUBLE_LIST: {"type": "array", "items": {"type": "number"}},
    FieldKind.STRING_MAP: {"type": "object", "additionalProperties": {"type": "string"}},
    FieldKind.DOUBLE_MAP: {"type": "object", "additionalProperties": {"type": "number"}},
}


class SchemaCatalog:
    """Registry of record types for one schema variant."""

    def __init__(
        self,
        *,
        variant: SchemaVariant | str,
        package: str,
        file_name: str,
        unknown_fields: UnknownFieldPolicy | str = UnknownFieldPolicy.IGNORE,
    ) -> None:
        self.variant = SchemaVariant(variant)
        self.package = package
        self.file_name = file_name
        self.unknown_fields = UnknownFieldPolicy(unknown_fields)
        self._types: dict[str, type[Record]] = {}
        self._fields: dict[str, list[tuple[str, FieldSpec]]] = {}
        self._pool: descriptor_pool.DescriptorPool | None = None
        self._messages: dict[str, type[pb_message.Message]] = {}
        self._validators: dict[str, Any] = {}

    def register(self, record_type: type[Record]) -> None:
        """Register a record type under its message name."""

        name = record_type.message_name().strip()
        if not name:
            raise ValueError("Record type name cannot be empty")
        self._check_variant(record_type)
        if name in self._types:
            raise ValueError(f"Record type already registered: {name}")

        self._fields[name] = check_fields(record_type)
        self._types[name] = record_type
        self._pool = None
        self._messages = {}
        self._validators.pop(name, None)

    def available(self) -> list[str]:
        """Return sorted list of registered message names."""

        return sorted(self._types)

    def get(self, name: str) -> type[Record]:
        key = name.strip()
        if key not in self._types:
            raise UnknownEntityError(
                f"Unknown {self.variant.value} record type '{name}'. "
                f"Available: {', '.join(self.available())}"
            )
        return self._types[key]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._types
        if isinstance(item, type):
            return self._types.get(item.__name__) is item
        return False

    def __len__(self) -> int:
        return len(self._types)

    def fields(self, record_type: type[Record] | str) -> list[tuple[str, FieldSpec]]:
        """Return ``(attribute, spec)`` pairs of a registered type in tag order."""

        return list(self._fields[self._resolve(record_type).message_name()])

    def edge_fields(self, record_type: type[Record] | str) -> list[FieldSpec]:
        return [spec for _, spec in self.fields(record_type) if spec.is_edge]

    def _check_variant(self, record_type: type) -> None:
        variant = getattr(record_type, "variant", None)
        if variant is not self.variant:
            found = variant.value if isinstance(variant, SchemaVariant) else "no"
            raise SchemaVariantError(
                f"{record_type.__name__} belongs to the {found} schema, "
                f"not the {self.variant.value} schema held by this catalog"
            )

    def _resolve(self, record_type: type[R] | str) -> type[R]:
        if isinstance(record_type, str):
            return self.get(record_type)  # type: ignore[return-value]
        self._check_variant(record_type)
        if self._types.get(record_type.message_name()) is not record_type:
            raise UnknownEntityError(
                f"{record_type.__qualname__} is not registered in this catalog. "
                f"Available: {', '.join(self.available())}"
            )
        return record_type

    def file_descriptor(self) -> descriptor_pb2.FileDescriptorProto:
        return build_file_descriptor(self.package, self.file_name, self._types.values())

    def proto_source(self) -> str:
        """Return ``.proto`` source describing every registered type."""

        return render_proto(self.package, self._types.values())

    def message_class(self, record_type: type[Record] | str) -> type[pb_message.Message]:
        """Return the protobuf message class backing a record type."""

        name = self._resolve(record_type).message_name()
        if self._pool is None:
            self._build_pool()
        return self._messages[name]

    def _build_pool(self) -> None:
        pool = descriptor_pool.DescriptorPool()
        pool.AddSerializedFile(self.file_descriptor().SerializeToString())
        self._messages = {
            name: message_factory.GetMessageClass(
                pool.FindMessageTypeByName(f"{self.package}.{name}")
            )
            for name in self._types
        }
        self._pool = pool
        logger.debug(
            "Built %d %s message types in package %s",
            len(self._messages),
            self.variant.value,
            self.package,
        )

    def to_message(self, record: Record) -> pb_message.Message:
        record_type = self._resolve(type(record))
        name = record_type.message_name()
        message = self.message_class(record_type)()

        for attribute, spec in self._fields[name]:
            value = getattr(record, attribute)
            try:
                if spec.kind.is_map:
                    container = getattr(message, spec.name)
                    for key, item in value.items():
                        container[key] = item
                elif spec.kind.is_list:
                    getattr(message, spec.name).extend(value)
                else:
                    setattr(message, spec.name, value)
            except (AttributeError, TypeError, ValueError) as exc:
                raise EncodeError(f"{name}.{attribute}: {exc}") from exc

        if record.unknown_fields:
            try:
                message.MergeFromString(record.unknown_fields)
            except pb_message.DecodeError as exc:
                raise EncodeError(f"{name}: preserved unknown fields are corrupt") from exc
        return message

    def encode(self, record: Record) -> bytes:
        """Serialize a record to protobuf binary.

        Map entries are written in sorted key order so equal records always
        produce equal bytes.
        """

        return self.to_message(record).SerializeToString(deterministic=True)

    def decode(self, record_type: type[R] | str, data: bytes) -> R:
        """Parse protobuf binary produced for ``record_type``.

        Fields absent from ``data`` take their zero value. Field numbers this
        catalog does not declare are dropped or kept on
        ``record.unknown_fields`` according to the catalog policy.
        """

        resolved = self._resolve(record_type)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DecodeError(
                f"Could not decode {resolved.message_name()}: expected bytes, "
                f"got {type(data).__name__}"
            )
        message = self.message_class(resolved)()
        try:
            message.ParseFromString(bytes(data))
        except pb_message.DecodeError as exc:
            raise DecodeError(f"Could not decode {resolved.message_name()}: {exc}") from exc
        return self.from_message(resolved, message)

    def from_message(self, record_type: type[R] | str, message: pb_message.Message) -> R:
        resolved = self._resolve(record_type)
        fields = self._fields[resolved.message_name()]

        values: dict[str, Any] = {}
        for attribute, spec in fields:
            value = getattr(message, spec.name)
            if spec.kind.is_map:
                value = {key: value[key] for key in value}
            elif spec.kind.is_list:
                value = list(value)
            values[attribute] = value

        if self.unknown_fields is UnknownFieldPolicy.PRESERVE:
            values["unknown_fields"] = _unknown_bytes(message, fields)
        return resolved(**values)

    def to_dict(self, record: Record) -> dict[str, Any]:
        """Return a JSON-ready mapping keyed by wire field name."""

        record_type = self._resolve(type(record))
        payload: dict[str, Any] = {}
        for attribute, spec in self._fields[record_type.message_name()]:
            value = getattr(record, attribute)
            if spec.kind.is_map:
                value = dict(value)
            elif spec.kind.is_list:
                value = list(value)
            payload[spec.name] = value
        return payload

    def from_dict(
        self,
        payload: Mapping[str, Any],
        record_type: type[R] | str | None = None,
    ) -> R:
        """Build a record from its JSON form.

        Without ``record_type`` the full variant dispatches on ``payload["type"]``;
        lite records carry no type tag and need it spelled out.
        """

        if not isinstance(payload, Mapping):
            raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")

        if record_type is None:
            if self.variant is not SchemaVariant.FULL:
                raise DecodeError("Lite records carry no type tag; pass record_type explicitly")
            type_name = payload.get("type")
            if not isinstance(type_name, str) or not type_name:
                raise DecodeError("Record has no 'type' field to dispatch on")
            record_type = type_name

        resolved = self._resolve(record_type)
        name = resolved.message_name()

        errors = sorted(
            self._validator(resolved).iter_errors(dict(payload)),
            key=lambda err: [str(part) for part in err.path],
        )
        if errors:
            details = "; ".join(
                f"/{'/'.join(str(part) for part in err.path)}: {err.message}" for err in errors
            )
            raise DecodeError(f"{name} failed structural checks: {details}")

        values: dict[str, Any] = {}
        known: set[str] = set()
        for attribute, spec in self._fields[name]:
            known.add(spec.name)
            if spec.name in payload:
                values[attribute] = _from_json_value(spec.kind, payload[spec.name])

        ignored = sorted(set(payload) - known)
        if ignored:
            logger.debug("Ignoring unknown keys for %s: %s", name, ", ".join(ignored))
        return resolved(**values)

    def json_schema(self, record_type: type[Record] | str) -> dict[str, Any]:
        """Return a JSON Schema describing the JSON form of ``record_type``."""

        resolved = self._resolve(record_type)
        name = resolved.message_name()
        properties: dict[str, Any] = {}
        for _, spec in self._fields[name]:
            prop = dict(_JSON_TYPES[spec.kind])
            if spec.is_edge:
                targets = ", ".join(spec.targets) or "any"
                prop["description"] = f"Identifiers of target entities ({targets})"
            properties[spec.name] = prop

        return {
            "$schema": JSON_SCHEMA_DIALECT,
            "$id": f"{self.package}.{name}",
            "title": name,
            "type": "object",
            "properties": properties,
            "additionalProperties": True,
        }

    def _validator(self, record_type: type[Record]) -> Any:
        name = record_type.message_name()
        if name not in self._validators:
            json_schema = self.json_schema(record_type)
            validator_cls = validator_for(json_schema)
            validator_cls.check_schema(json_schema)
            self._validators[name] = validator_cls(json_schema)
        return self._validators[name]


def _unknown_bytes(
    message: pb_message.Message,
    fields: list[tuple[str, FieldSpec]],
) -> bytes:
    """Return the serialized unknown fields of ``message``."""

    leftover = type(message)()
    leftover.CopyFrom(message)
    for _, spec in fields:
        leftover.ClearField(spec.name)
    return leftover.SerializeToString()


def _from_json_value(kind: FieldKind, value: Any) -> Any:
    if kind is FieldKind.INT64:
        return int(value)
    if kind is FieldKind.DOUBLE:
        return float(value)
    if kind is FieldKind.DOUBLE_LIST:
        return [float(item) for item in value]
    if kind is FieldKind.DOUBLE_MAP:
        return {key: float(item) for key, item in value.items()}
    if kind.is_list:
        return list(value)
    if kind.is_map:
        return dict(value)
    return value


def build_full_catalog(
    unknown_fields: UnknownFieldPolicy | str = UnknownFieldPolicy.IGNORE,
) -> SchemaCatalog:
    """Create a catalog preloaded with every full-schema record type."""

    catalog = SchemaCatalog(
        variant=SchemaVariant.FULL,
        package=schema.PACKAGE,
        file_name=schema.PROTO_FILE,
        unknown_fields=unknown_fields,
    )
    for record_type in schema.FULL_ENTITIES:
        catalog.register(record_type)
    return catalog


def build_lite_catalog(
    unknown_fields: UnknownFieldPolicy | str = UnknownFieldPolicy.IGNORE,
) -> SchemaCatalog:
    """Create a catalog preloaded with every lite-schema record type."""

    catalog = SchemaCatalog(
        variant=SchemaVariant.LITE,
        package=lite.PACKAGE,
        file_name=lite.PROTO_FILE,
        unknown_fields=unknown_fields,
    )
    for record_type in lite.LITE_ENTITIES:
        catalog.register(record_type)
    return catalog


def build_catalog(config: DeploymentConfig) -> SchemaCatalog:
    """Create the catalog selected by a deployment config."""

    logger.info(
        "Using %s schema for deployment %s (unknown fields: %s)",
        config.variant.value,
        config.name,
        config.unknown_fields.value,
    )
    if config.variant is SchemaVariant.LITE:
        return build_lite_catalog(config.unknown_fields)
    return build_full_catalog(config.unknown_fields)
