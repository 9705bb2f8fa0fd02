"""Genomic annotation entities: positions, genes and their reference data."""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import edges, integer, string_map, text
from gaea.records import Entity


@dataclass
class Position(Entity):
    """One or more consecutive bases on a named reference sequence.

    ``start`` is the 0-based offset on the forward strand and ``end`` is
    exclusive, giving the half-open interval ``[start, end)``. For a variant
    call ``end`` is usually ``start + len(referenceAllele)``. Nothing here
    checks that ``start <= end``.
    """

    chromosome: str = text(4)
    start: int = integer(5)
    end: int = integer(6)
    strand: str = text(7)

    @property
    def length(self) -> int:
        """Number of bases covered; zero when ``end == start``."""

        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass
class Gene(Entity):
    """Annotated contiguous region such as a gene or protein.

    ``attributes_properties`` follows the GFF3 attribute conventions
    (reserved names capitalised), plus ``Score`` and ``Phase`` columns.
    """

    symbol: str = text(4)
    description: str = text(5)
    chromosome: str = text(6)
    accession: str = text(7)
    refseq: str = text(8)
    in_family_edges: list[str] = edges(9, "GeneFamily")
    cited_from_edges: list[str] = edges(10, "Pubmed")
    attributes_properties: dict[str, str] = string_map(11)


@dataclass
class GeneSynonym(Entity):
    symbol: str = text(4)
    synonym_for_edges: list[str] = edges(5, "Gene")
    in_database_edges: list[str] = edges(6, "GeneDatabase")


@dataclass
class GeneDatabase(Entity):
    name: str = text(4)


@dataclass
class GeneFamily(Entity):
    tag: str = text(4)
    description: str = text(5)


@dataclass
class Pubmed(Entity):
    """A cited publication."""

    pmid: str = text(4)
    title: str = text(5)
    abstract: str = text(6)
    text: str = text(7)
    author_edges: list[str] = edges(8)
    citation_edges: list[str] = edges(9)


@dataclass
class Domain(Entity):
    name: str = text(4)
