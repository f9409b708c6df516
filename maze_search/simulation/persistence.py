"""Round-log streaming: buffered columns are appended to one Parquet file."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from maze_search.io.schemas import ROUND_LOG_SCHEMA


def flush_round_columns(
    round_columns: dict[str, list[int | str | float | bool]],
    round_log_path: Path,
    round_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Append the buffered rounds as a row group and empty the buffers.

    The writer is opened on the first non-empty flush and handed back so the
    caller can keep appending and close it once the batch is done.
    """
    if not round_columns["episode_id"]:
        return round_writer
    if round_writer is None:
        round_writer = pq.ParquetWriter(round_log_path, ROUND_LOG_SCHEMA)
    round_writer.write_table(pa.Table.from_pydict(round_columns, schema=ROUND_LOG_SCHEMA))
    for column in round_columns.values():
        column.clear()
    return round_writer
