import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from gaea import build_full_catalog, build_lite_catalog  # noqa: E402
from gaea.descriptors import build_file_descriptor, map_entry_name  # noqa: E402
from gaea.schema import Gene, GeneExpression  # noqa: E402


def test_map_fields_become_map_entry_messages() -> None:
    file_proto = build_file_descriptor("bmeg.gaea.schema", "gene.proto", [Gene, GeneExpression])

    gene = file_proto.message_type[0]
    entry = gene.nested_type[0]
    assert file_proto.syntax == "proto3"
    assert entry.name == "AttributesPropertiesEntry"
    assert entry.options.map_entry is True
    attributes = [field for field in gene.field if field.name == "attributesProperties"][0]
    assert attributes.number == 11
    assert attributes.type_name == ".bmeg.gaea.schema.Gene.AttributesPropertiesEntry"
    assert map_entry_name("expressions") == "ExpressionsEntry"


def test_full_proto_source_matches_declarations() -> None:
    source = build_full_catalog().proto_source()

    assert source.startswith('syntax = "proto3";')
    assert "package bmeg.gaea.schema;" in source
    assert "message Position {" in source
    assert "    int64 start = 5;" in source
    assert "    // Target: GeneFamily\n    repeated string inFamilyEdges = 9;" in source
    assert "    map<string, string> attributesProperties = 11;" in source
    assert "    string dbsnpRS = 9;" in source
    assert "    string in = 2;" in source
    assert "    repeated double quantile = 6;" in source
    assert source.count("message ") == 25


def test_lite_proto_source_uses_lite_package() -> None:
    source = build_lite_catalog().proto_source()

    assert "package bmeg.gaea.lite;" in source
    assert "message Feature {" in source
    assert "    repeated string hasExpressionEdges = 5;" in source


def test_only_documented_edge_targets_are_rendered() -> None:
    source = build_full_catalog().proto_source()

    assert (
        "    // Target: Biosample\n"
        "    repeated string hasMemberEdges = 7;\n"
        "    repeated string hasSampleEdges = 8;\n"
        "    repeated string hasMatrixEdges = 9;\n"
    ) in source
    assert source.count("// Target:") == 18
