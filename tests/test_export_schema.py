import json
import subprocess
import sys
from pathlib import Path


def test_export_script_writes_proto_and_json_schemas(tmp_path: Path) -> None:
    repo_root = Path(__file__).resolve().parents[1]

    result = subprocess.run(
        [
            sys.executable,
            str(repo_root / "scripts" / "export_schema.py"),
            "--deployment",
            "lite",
            "--out",
            str(tmp_path),
        ],
        cwd=repo_root,
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    proto = tmp_path / "lite" / "sample.proto"
    assert "package bmeg.gaea.lite;" in proto.read_text()

    schema_path = tmp_path / "lite" / "json" / "Biosample.schema.json"
    document = json.loads(schema_path.read_text())
    assert document["title"] == "Biosample"
    assert "hasExpressionEdges" in document["properties"]
