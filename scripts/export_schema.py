#!/usr/bin/env python3
"""Export the ``.proto`` source and JSON Schemas of a GAEA schema variant.

Non-Python producers generate their bindings from the ``.proto`` file; the
JSON Schemas describe the JSON-lines exchange format.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from gaea import DeploymentConfigLoader, build_catalog  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export GAEA schema definitions")
    parser.add_argument(
        "--deployment",
        default="full",
        help="Shipped deployment config name or a JSON path (default: full).",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=REPO_ROOT / "build" / "schema",
        help="Output directory.",
    )
    parser.add_argument(
        "--no-json-schema",
        action="store_true",
        help="Only write the .proto file.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger("gaea.export")

    config = DeploymentConfigLoader().load(args.deployment)
    catalog = build_catalog(config)

    out_dir = args.out / config.variant.value
    out_dir.mkdir(parents=True, exist_ok=True)

    proto_path = out_dir / Path(catalog.file_name).name
    proto_path.write_text(catalog.proto_source())
    logger.info("Wrote %s", proto_path)

    if not args.no_json_schema:
        schema_dir = out_dir / "json"
        schema_dir.mkdir(exist_ok=True)
        for name in catalog.available():
            path = schema_dir / f"{name}.schema.json"
            path.write_text(json.dumps(catalog.json_schema(name), indent=2) + "\n")
        logger.info("Wrote %d JSON schemas to %s", len(catalog), schema_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
