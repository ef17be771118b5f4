"""
Utilities for Arrow table handling.
"""
from typing import Any, List, Sequence

import pyarrow as pa
import pyarrow.compute as pc


def ensure_arrow_table(data: Any) -> pa.Table:
    """
    Ensure the input data is a PyArrow Table.

    Args:
        data: Input data (pa.Table, list of dicts, dict of lists)

    Returns:
        pa.Table
    """
    if isinstance(data, pa.Table):
        return data

    if isinstance(data, list):
        if not data:
            return pa.Table.from_pydict({})
        return pa.Table.from_pylist(data)

    if isinstance(data, dict):
        return pa.Table.from_pydict(data)

    raise ValueError(f"Could not convert {type(data)} to PyArrow Table")


def filter_by_path(table: pa.Table, fields: Sequence[str], path: Sequence[Any]) -> pa.Table:
    """
    Keep the rows of a rollup table that aggregate exactly ``path``.

    The first ``len(path)`` fields must equal the path values, the remaining
    fields must be null (rolled up).
    """
    if len(path) > len(fields):
        raise ValueError(f"Path {tuple(path)} is deeper than fields {tuple(fields)}")

    mask = None
    for i, field in enumerate(fields):
        if field not in table.column_names:
            raise KeyError(f"Column '{field}' not found in table")

        col = table[field]
        if i < len(path):
            current_mask = pc.equal(col, pa.scalar(path[i], type=col.type))
        else:
            current_mask = pc.is_null(col)

        mask = current_mask if mask is None else pc.and_(mask, current_mask)

    if mask is None:
        return table

    # Comparisons against null yield null; treat them as no match
    return table.filter(pc.fill_null(mask, False))


def cells_to_table(rows: List[List[Any]]) -> pa.Table:
    """
    Flatten a laid out grid of cells into an Arrow table.

    Spans and visibility are read from the current tree state.
    """
    records = []
    for row_index, row in enumerate(rows):
        for col_index, cell in enumerate(row):
            records.append({
                "row": row_index,
                "col": col_index,
                "type": cell.type.name,
                "template": cell.template,
                "value": None if cell.value is None else str(cell.value),
                "cssclass": cell.cssclass,
                "hspan": cell.hspan(),
                "vspan": cell.vspan(),
                "visible": cell.visible(),
            })

    schema = pa.schema([
        ("row", pa.int32()),
        ("col", pa.int32()),
        ("type", pa.string()),
        ("template", pa.string()),
        ("value", pa.string()),
        ("cssclass", pa.string()),
        ("hspan", pa.int32()),
        ("vspan", pa.int32()),
        ("visible", pa.bool_()),
    ])
    return pa.Table.from_pylist(records, schema=schema)
