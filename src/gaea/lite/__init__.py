"""Lite GAEA schema (protobuf package ``bmeg.gaea.lite``)."""

from .models import (
    Biosample,
    Drug,
    Feature,
    GeneExpression,
    Individual,
    Phenotype,
    PhenotypeAssociation,
    VariantCall,
    VariantCallEffect,
)

PACKAGE = "bmeg.gaea.lite"
PROTO_FILE = "bmeg/gaea/lite/sample.proto"

LITE_ENTITIES = (
    Feature,
    VariantCall,
    VariantCallEffect,
    Biosample,
    Individual,
    GeneExpression,
    Phenotype,
    PhenotypeAssociation,
    Drug,
)

__all__ = [record_type.__name__ for record_type in LITE_ENTITIES] + [
    "LITE_ENTITIES",
    "PACKAGE",
    "PROTO_FILE",
]
