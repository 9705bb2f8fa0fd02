"""Variant calls and their functional effects."""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import edges, string_map, text
from gaea.records import Entity


@dataclass
class VariantCall(Entity):
    """A genomic variant together with one sample's genotype at that site.

    Combines the GA4GH ``Variant`` and ``Call`` concepts. The location lives
    on a separate :class:`~gaea.schema.genomic.Position` reached through
    ``at_position_edges``; tumor and normal samples are separate biosamples.
    """

    source: str = text(4)
    variant_type: str = text(5)
    reference_allele: str = text(6)
    normal_allele1: str = text(7)
    normal_allele2: str = text(8)
    tumor_allele1: str = text(9)
    tumor_allele2: str = text(10)
    sequencer: str = text(11)
    at_position_edges: list[str] = edges(12, "Position")
    tumor_sample_edges: list[str] = edges(13, "Biosample")
    normal_sample_edges: list[str] = edges(14, "Biosample")
    info_properties: dict[str, str] = string_map(15)


@dataclass
class VariantCallEffect(Entity):
    """How a variant call affects a transcript or protein.

    A much simplified take on the GA4GH transcript effect annotation.
    MAF columns without a typed field (``trvType``, ``cPosition``,
    ``aminoAcidChange``...) go into ``info_properties``.
    """

    source: str = text(4)
    variant_classification: str = text(5)
    in_domain_edges: list[str] = edges(6, "Domain")
    in_gene_edges: list[str] = edges(7, "Gene")
    effect_of_edges: list[str] = edges(8, "VariantCall")
    dbsnp_rs: str = text(9, name="dbsnpRS")
    dbsnp_val_status: str = text(10)
    info_properties: dict[str, str] = string_map(11)
