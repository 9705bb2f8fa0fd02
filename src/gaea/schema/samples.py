"""Biosamples, the individuals they come from, and expression measurements."""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import double_map, edges, string_map, text
from gaea.records import Entity


@dataclass
class Biosample(Entity):
    """A unit of biological material that molecular assays are run on.

    Tumor and normal material are separate biosamples; a variant call is the
    difference between the two.
    """

    source: str = text(4)
    barcode: str = text(5)
    sample_type: str = text(6)
    sample_of_edges: list[str] = edges(7, "Individual")
    observations_properties: dict[str, str] = string_map(8)


@dataclass
class Individual(Entity):
    barcode: str = text(4)
    source: str = text(5)
    tumor_site: str = text(6)
    # remaining clinical table columns
    observations_properties: dict[str, str] = string_map(7)


@dataclass
class GeneExpression(Entity):
    """Expression values for one sample keyed by gene or feature identifier."""

    source: str = text(4)
    barcode: str = text(5)
    expression_for_edges: list[str] = edges(6, "Biosample")
    expressions: dict[str, float] = double_map(7)
