"""Lite GAEA schema records.

The lite variant collapses the identifier triad into a single ``name`` and
uses generic edge fields and plain ``info``/``observations`` maps. Its field
numbers overlap the full variant with different meanings, so lite and full
payloads must never share a dataset.
"""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import double_map, edges, integer, string_map, text, texts
from gaea.records import LiteRecord


@dataclass
class Feature(LiteRecord):
    """Annotated region with its location inline; stands in for Gene and Position."""

    source: str = text(2)
    feature_type: str = text(3)
    chromosome: str = text(4)
    start: int = integer(5)
    end: int = integer(6)
    strand: str = text(7)
    info: dict[str, str] = string_map(8)

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass
class VariantCall(LiteRecord):
    source: str = text(2)
    variant_type: str = text(3)
    reference_allele: str = text(4)
    normal_allele1: str = text(5)
    normal_allele2: str = text(6)
    tumor_allele1: str = text(7)
    tumor_allele2: str = text(8)
    sequencer: str = text(9)
    in_feature_edges: list[str] = edges(10, "Feature")
    tumor_sample_edges: list[str] = edges(11, "Biosample")
    normal_sample_edges: list[str] = edges(12, "Biosample")
    info: dict[str, str] = string_map(13)


@dataclass
class VariantCallEffect(LiteRecord):
    source: str = text(2)
    variant_classification: str = text(3)
    effect_of_edges: list[str] = edges(4, "VariantCall")
    in_feature_edges: list[str] = edges(5, "Feature")
    info: dict[str, str] = string_map(6)


@dataclass
class Biosample(LiteRecord):
    source: str = text(2)
    barcode: str = text(3)
    sample_type: str = text(4)
    has_expression_edges: list[str] = edges(5, "GeneExpression")


@dataclass
class Individual(LiteRecord):
    source: str = text(2)
    barcode: str = text(3)
    tumor_site: str = text(4)
    has_sample_edges: list[str] = edges(5, "Biosample")
    observations: dict[str, str] = string_map(6)


@dataclass
class GeneExpression(LiteRecord):
    """Expression values keyed by feature name."""

    source: str = text(2)
    barcode: str = text(3)
    expression_for_edges: list[str] = edges(4, "Biosample")
    expressions: dict[str, float] = double_map(5)


@dataclass
class Phenotype(LiteRecord):
    source: str = text(2)
    description: str = text(3)
    info: dict[str, str] = string_map(4)


@dataclass
class PhenotypeAssociation(LiteRecord):
    has_genotype_edges: list[str] = edges(2, "VariantCall", "Biosample", "Individual", "Feature")
    has_phenotype_edges: list[str] = edges(3, "Phenotype")
    has_context_edges: list[str] = edges(4, "Drug")
    info: dict[str, str] = string_map(5)


@dataclass
class Drug(LiteRecord):
    synonyms: list[str] = texts(2)
    info: dict[str, str] = string_map(3)
