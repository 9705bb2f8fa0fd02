"""Predictive expression signatures."""

from __future__ import annotations

from dataclasses import dataclass

from gaea.fields import double_map, edges, real, reals, text
from gaea.records import Entity, TypedEdge


@dataclass
class LinearSignature(Entity):
    """Linear model over expression values.

    ``predicts`` names what is modelled (``drug response``) and ``phenotype``
    the specific target (``AZD6482``). ``quantile`` is the reference array
    used for quantile normalisation of inputs.
    """

    predicts: str = text(4)
    phenotype: str = text(5)
    quantile: list[float] = reals(6)
    intercept: float = real(7)
    coefficients: dict[str, float] = double_map(8)
    background: dict[str, float] = double_map(9)
    background_cohort_edges: list[str] = edges(10)
    signature_for_edges: list[str] = edges(11, "Drug")


@dataclass
class SignatureExpressionEdge(TypedEdge):
    """Connects a signature to an expression record with the computed level."""

    level: float = real(4)
