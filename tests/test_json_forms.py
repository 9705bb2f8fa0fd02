import gzip
import json
import sys
from pathlib import Path

import pytest
from jsonschema.validators import validator_for

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from gaea import (  # noqa: E402
    DecodeError,
    UnknownEntityError,
    build_full_catalog,
    build_lite_catalog,
    read_json_lines,
    write_json_lines,
)
from gaea import lite, schema  # noqa: E402


def test_to_dict_uses_wire_names() -> None:
    catalog = build_full_catalog()
    edge = schema.MatrixVectorEdge.create(in_id="matrix:1", out_id="vector:1", row_name="TP53")

    assert catalog.to_dict(edge) == {
        "type": "MatrixVectorEdge",
        "in": "matrix:1",
        "out": "vector:1",
        "rowName": "TP53",
    }


def test_from_dict_dispatches_on_type_and_ignores_unknown_keys() -> None:
    catalog = build_full_catalog()

    record = catalog.from_dict(
        {
            "type": "VariantCallEffect",
            "id": "effect:1",
            "dbsnpRS": "rs28934578",
            "effectOfEdges": ["call:1"],
            "infoProperties": {"trvType": "missense"},
            "annotator": "oncotator",
        }
    )

    assert isinstance(record, schema.VariantCallEffect)
    assert record.dbsnp_rs == "rs28934578"
    assert record.effect_of_edges == ["call:1"]
    assert record.info_properties == {"trvType": "missense"}
    assert record.variant_classification == ""


def test_from_dict_coerces_json_numbers_for_double_fields() -> None:
    catalog = build_full_catalog()

    signature = catalog.from_dict(
        {"intercept": 1, "quantile": [0, 1], "coefficients": {"TP53": 2}},
        schema.LinearSignature,
    )

    assert signature.intercept == 1.0
    assert isinstance(signature.intercept, float)
    assert signature.quantile == [0.0, 1.0]
    assert signature.coefficients == {"TP53": 2.0}


def test_from_dict_accepts_integral_floats_for_int64_fields() -> None:
    catalog = build_full_catalog()

    position = catalog.from_dict({"type": "Position", "start": 100.0, "end": 150.0})

    assert position.start == 100
    assert isinstance(position.start, int)
    assert catalog.decode(schema.Position, catalog.encode(position)).end == 150
    with pytest.raises(DecodeError, match="/start"):
        catalog.from_dict({"type": "Position", "start": 100.5})


def test_from_dict_reports_every_structural_problem() -> None:
    catalog = build_full_catalog()

    with pytest.raises(DecodeError) as excinfo:
        catalog.from_dict({"type": "Position", "start": "100", "strand": 1})

    message = str(excinfo.value)
    assert "/start" in message
    assert "/strand" in message


def test_from_dict_requires_known_type() -> None:
    catalog = build_full_catalog()

    with pytest.raises(DecodeError):
        catalog.from_dict({"id": "x"})
    with pytest.raises(UnknownEntityError):
        catalog.from_dict({"type": "Transcript", "id": "x"})
    with pytest.raises(DecodeError):
        catalog.from_dict(["not", "an", "object"])


def test_lite_json_requires_explicit_type() -> None:
    catalog = build_lite_catalog()

    with pytest.raises(DecodeError):
        catalog.from_dict({"name": "TP53"})
    feature = catalog.from_dict({"name": "TP53", "start": 7661778}, lite.Feature)
    assert feature == lite.Feature(name="TP53", start=7661778)


def test_json_schema_is_valid_and_describes_edges() -> None:
    catalog = build_full_catalog()
    document = catalog.json_schema("Gene")

    validator_for(document).check_schema(document)
    assert document["title"] == "Gene"
    assert document["$id"] == "bmeg.gaea.schema.Gene"
    assert document["properties"]["attributesProperties"]["type"] == "object"
    assert "GeneFamily" in document["properties"]["inFamilyEdges"]["description"]


def test_json_lines_round_trip_mixed_full_records(tmp_path: Path) -> None:
    catalog = build_full_catalog()
    records = [
        schema.Individual.create(id="individual:1", barcode="TCGA-02-0001", tumor_site="brain"),
        schema.Biosample.create(id="sample:1", sample_of_edges=["individual:1"]),
        schema.SignatureExpressionEdge.create(in_id="sig:1", out_id="expr:1", level=0.42),
    ]
    path = tmp_path / "out" / "records.jsonl.gz"

    assert write_json_lines(catalog, records, path) == 3

    with gzip.open(path, "rt", encoding="utf-8") as stream:
        first = json.loads(stream.readline())
    assert first["type"] == "Individual"
    assert list(read_json_lines(catalog, path)) == records


def test_json_lines_reports_line_numbers(tmp_path: Path) -> None:
    catalog = build_lite_catalog()
    path = tmp_path / "features.jsonl"
    path.write_text('{"name": "TP53"}\n\n{"name": "BRCA1", "start": "x"}\n')

    reader = read_json_lines(catalog, path, lite.Feature)

    assert next(reader) == lite.Feature(name="TP53")
    with pytest.raises(DecodeError, match=r"features.jsonl:3"):
        next(reader)


def test_json_lines_rejects_malformed_json(tmp_path: Path) -> None:
    catalog = build_full_catalog()
    path = tmp_path / "broken.jsonl"
    path.write_text('{"type": "Drug"\n')

    with pytest.raises(DecodeError, match="invalid JSON"):
        list(read_json_lines(catalog, path))


def test_json_lines_reports_line_of_unknown_type(tmp_path: Path) -> None:
    catalog = build_full_catalog()
    path = tmp_path / "mixed.jsonl"
    path.write_text('{"type": "Drug"}\n{"type": "Transcript"}\n')

    reader = read_json_lines(catalog, path)

    assert next(reader) == schema.Drug(type="Drug")
    with pytest.raises(UnknownEntityError, match=r"mixed.jsonl:2: .*Transcript"):
        next(reader)
