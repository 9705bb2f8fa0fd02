"""GAEA cancer-genomics graph schema.

This package declares the schema record types of both variants and the
catalogs that move them to and from protobuf binary and JSON.
"""

from .catalog import SchemaCatalog, build_catalog, build_full_catalog, build_lite_catalog
from .config import DeploymentConfig, DeploymentConfigLoader, SchemaVariant, UnknownFieldPolicy
from .errors import (
    DecodeError,
    EncodeError,
    SchemaDefinitionError,
    SchemaError,
    SchemaVariantError,
    UnknownEntityError,
)
from .fields import FieldKind, FieldSpec
from .jsonio import read_json_lines, write_json_lines
from .records import EdgeRef, Entity, LiteRecord, Record, TypedEdge
from .tables import records_to_frame

__all__ = [
    "SchemaCatalog",
    "build_catalog",
    "build_full_catalog",
    "build_lite_catalog",
    "DeploymentConfig",
    "DeploymentConfigLoader",
    "SchemaVariant",
    "UnknownFieldPolicy",
    "DecodeError",
    "EncodeError",
    "SchemaDefinitionError",
    "SchemaError",
    "SchemaVariantError",
    "UnknownEntityError",
    "FieldKind",
    "FieldSpec",
    "read_json_lines",
    "write_json_lines",
    "EdgeRef",
    "Entity",
    "LiteRecord",
    "Record",
    "TypedEdge",
    "records_to_frame",
]
