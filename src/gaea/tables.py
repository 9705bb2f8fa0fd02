"""Tabular export of schema records."""

from __future__ import annotations

import json
from collections.abc import Iterable

import pandas as pd

from gaea.catalog import SchemaCatalog
from gaea.records import Record


def records_to_frame(catalog: SchemaCatalog, records: Iterable[Record]) -> pd.DataFrame:
    """Flatten records of a single type into a frame with one column per wire field.

    Repeated and map fields are stored as JSON strings with sorted keys so the
    frame can go straight to CSV or Parquet.
    """

    rows = list(records)
    if not rows:
        return pd.DataFrame()

    record_types = {type(record) for record in rows}
    if len(record_types) > 1:
        names = ", ".join(sorted(record_type.__name__ for record_type in record_types))
        raise ValueError(f"Cannot tabulate mixed record types: {names}")

    fields = catalog.fields(record_types.pop())
    frame = pd.DataFrame(
        [catalog.to_dict(record) for record in rows],
        columns=[spec.name for _, spec in fields],
    )
    for _, spec in fields:
        if spec.kind.is_list or spec.kind.is_map:
            frame[spec.name] = frame[spec.name].map(
                lambda payload: json.dumps(payload, sort_keys=True)
            )
    return frame
