"""Cohorts and the matrices computed over them."""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import double_map, edges, text, texts
from gaea.records import Entity, TypedEdge


@dataclass
class Cohort(Entity):
    name: str = text(4)
    location: str = text(5)
    description: str = text(6)
    has_member_edges: list[str] = edges(7, "Biosample")
    has_sample_edges: list[str] = edges(8)
    has_matrix_edges: list[str] = edges(9)


@dataclass
class DoubleVector(Entity):
    values: dict[str, float] = double_map(4)


@dataclass
class CohortMatrix(Entity):
    method: str = text(4)
    has_vector_edges: list[str] = edges(5)
    has_keyspace_edges: list[str] = edges(6)


@dataclass
class Keyspace(Entity):
    name: str = text(4)
    keys: list[str] = texts(5)


@dataclass
class MatrixVectorEdge(TypedEdge):
    """Connects a matrix to one of its vectors, labelled with the row name."""

    row_name: str = text(4)


@dataclass
class MatrixAnalysis(Entity):
    source_matrix_edges: list[str] = edges(4)
    result_matrix_edges: list[str] = edges(5)
