"""Full GAEA graph schema (protobuf package ``bmeg.gaea.schema``).

Every vertex carries ``id``/``gid``/``type`` and one edge field per target
kind. Edge fields hold identifiers of other entities; resolving them is the
job of the graph store, not of these types.
"""

from .genomic import Domain, Gene, GeneDatabase, GeneFamily, GeneSynonym, Position, Pubmed
from .matrices import Cohort, CohortMatrix, DoubleVector, Keyspace, MatrixAnalysis, MatrixVectorEdge
from .phenotypes import Drug, Evidence, OntologyTerm, Phenotype, PhenotypeAssociation
from .samples import Biosample, GeneExpression, Individual
from .signatures import LinearSignature, SignatureExpressionEdge
from .variants import VariantCall, VariantCallEffect

PACKAGE = "bmeg.gaea.schema"
PROTO_FILE = "bmeg/gaea/schema/sample.proto"

FULL_ENTITIES = (
    Position,
    Gene,
    GeneSynonym,
    GeneDatabase,
    GeneFamily,
    Pubmed,
    Domain,
    VariantCallEffect,
    VariantCall,
    Biosample,
    Individual,
    GeneExpression,
    Cohort,
    DoubleVector,
    CohortMatrix,
    Keyspace,
    MatrixVectorEdge,
    MatrixAnalysis,
    PhenotypeAssociation,
    Phenotype,
    OntologyTerm,
    Evidence,
    Drug,
    LinearSignature,
    SignatureExpressionEdge,
)

__all__ = [record_type.__name__ for record_type in FULL_ENTITIES] + [
    "FULL_ENTITIES",
    "PACKAGE",
    "PROTO_FILE",
]
