"""Newline-delimited JSON exchange of schema records."""

from __future__ import annotations

import gzip
import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from gaea.catalog import SchemaCatalog
from gaea.errors import DecodeError, SchemaError
from gaea.records import Record

logger = logging.getLogger(__name__)


def _open_text(path: Path, mode: str) -> IO[str]:
    if path.suffix == ".gz":
        return gzip.open(path, f"{mode}t", encoding="utf-8")
    return path.open(mode, encoding="utf-8")


def write_json_lines(
    catalog: SchemaCatalog,
    records: Iterable[Record],
    path: str | Path,
) -> int:
    """Write one JSON object per line and return the number of records written."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with _open_text(target, "w") as stream:
        for record in records:
            stream.write(json.dumps(catalog.to_dict(record), sort_keys=True))
            stream.write("\n")
            count += 1

    logger.info("Wrote %d %s records to %s", count, catalog.variant.value, target)
    return count


def read_json_lines(
    catalog: SchemaCatalog,
    path: str | Path,
    record_type: type[Record] | str | None = None,
) -> Iterator[Record]:
    """Yield records from a JSON-lines file.

    Mixed full-schema files are read by dispatching each line on its ``type``
    field when ``record_type`` is not given. Blank lines are skipped. Errors
    keep their type and are prefixed with ``path:line``.
    """

    source = Path(path)
    with _open_text(source, "r") as stream:
        for line_number, line in enumerate(stream, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                payload = json.loads(line)
            except json.JSONDecodeError as exc:
                raise DecodeError(f"{source}:{line_number}: invalid JSON: {exc.msg}") from exc
            try:
                record = catalog.from_dict(payload, record_type)
            except SchemaError as exc:
                raise type(exc)(f"{source}:{line_number}: {exc}") from exc
            yield record
