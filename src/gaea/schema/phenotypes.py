"""Phenotypes, the evidence behind them and the drugs that provide context."""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import edges, string_map, text, texts
from gaea.records import Entity


@dataclass
class PhenotypeAssociation(Entity):
    """Links a genotype (call, sample, individual or gene) to a phenotype.

    The context edges are specific to one association and usually point at a
    drug or an evidence record.
    """

    has_genotype_edges: list[str] = edges(
        4, "VariantCall", "Biosample", "Individual", "Gene"
    )
    has_phenotype_edges: list[str] = edges(5, "Phenotype")
    has_context_edges: list[str] = edges(6, "Drug", "Evidence")
    info_properties: dict[str, str] = string_map(7)


@dataclass
class Phenotype(Entity):
    is_type_edges: list[str] = edges(4, "OntologyTerm")
    description: str = text(5)


@dataclass
class OntologyTerm(Entity):
    term: str = text(4)
    source: str = text(5)


@dataclass
class Evidence(Entity):
    # plain PubMed ids, not Pubmed edges
    pmid: list[str] = texts(4)
    info_properties: dict[str, str] = string_map(5)


@dataclass
class Drug(Entity):
    synonyms: list[str] = texts(4)
    info_properties: dict[str, str] = string_map(5)
