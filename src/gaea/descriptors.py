"""Build protobuf descriptors and ``.proto`` text from record declarations."""

from __future__ import annotations

import inspect
from collections.abc import Iterable

from google.protobuf import descriptor_pb2

from gaea.errors import SchemaDefinitionError
from gaea.fields import FieldKind, check_fields
from gaea.records import Record

_FieldProto = descriptor_pb2.FieldDescriptorProto

_ELEMENT_TYPES = {
    FieldKind.STRING: _FieldProto.TYPE_STRING,
    FieldKind.INT64: _FieldProto.TYPE_INT64,
    FieldKind.DOUBLE: _FieldProto.TYPE_DOUBLE,
    FieldKind.STRING_LIST: _FieldProto.TYPE_STRING,
    FieldKind.DOUBLE_LIST: _FieldProto.TYPE_DOUBLE,
    FieldKind.STRING_MAP: _FieldProto.TYPE_STRING,
    FieldKind.DOUBLE_MAP: _FieldProto.TYPE_DOUBLE,
}


def map_entry_name(wire_name: str) -> str:
    """Name protoc gives the synthetic entry message of a map field."""

    return wire_name[:1].upper() + wire_name[1:] + "Entry"


def build_file_descriptor(
    package: str,
    file_name: str,
    record_types: Iterable[type[Record]],
) -> descriptor_pb2.FileDescriptorProto:
    """Describe ``record_types`` as one proto3 file in ``package``."""

    file_proto = descriptor_pb2.FileDescriptorProto(
        name=file_name,
        package=package,
        syntax="proto3",
    )
    seen: set[str] = set()

    for record_type in record_types:
        message_name = record_type.message_name()
        if message_name in seen:
            raise SchemaDefinitionError(f"Duplicate message name in {file_name}: {message_name}")
        seen.add(message_name)

        message = file_proto.message_type.add(name=message_name)
        for _, spec in check_fields(record_type):
            field = message.field.add(name=spec.name, number=spec.number, json_name=spec.name)
            if spec.kind.is_map:
                entry = message.nested_type.add(name=map_entry_name(spec.name))
                entry.options.map_entry = True
                entry.field.add(
                    name="key",
                    number=1,
                    json_name="key",
                    type=_FieldProto.TYPE_STRING,
                    label=_FieldProto.LABEL_OPTIONAL,
                )
                entry.field.add(
                    name="value",
                    number=2,
                    json_name="value",
                    type=_ELEMENT_TYPES[spec.kind],
                    label=_FieldProto.LABEL_OPTIONAL,
                )
                field.type = _FieldProto.TYPE_MESSAGE
                field.type_name = f".{package}.{message_name}.{entry.name}"
                field.label = _FieldProto.LABEL_REPEATED
            else:
                field.type = _ELEMENT_TYPES[spec.kind]
                field.label = (
                    _FieldProto.LABEL_REPEATED if spec.kind.is_list else _FieldProto.LABEL_OPTIONAL
                )

    return file_proto


def render_proto(package: str, record_types: Iterable[type[Record]]) -> str:
    """Render proto3 source equivalent to :func:`build_file_descriptor`.

    Edge fields get a ``// Target:`` comment naming the documented target
    types so code generated elsewhere keeps that information.
    """

    lines = ['syntax = "proto3";', "", f"package {package};"]
    for record_type in record_types:
        doc = inspect.cleandoc(record_type.__doc__ or "")
        lines.append("")
        if doc and not doc.startswith(f"{record_type.__name__}("):
            lines.extend(f"// {line}".rstrip() for line in doc.splitlines())
        lines.append(f"message {record_type.message_name()} {{")
        for _, spec in check_fields(record_type):
            if spec.targets:
                lines.append(f"    // Target: {' '.join(spec.targets)}")
            lines.append(f"    {spec.kind.value} {spec.name} = {spec.number};")
        lines.append("}")
    return "\n".join(lines) + "\n"
