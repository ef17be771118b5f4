"""
Example usage of pivot_grid: lay out a small rows tree over a rollup table,
collapse a group and print the resulting cells.
"""
import json

import pyarrow as pa

from pivot_grid.axe import AxisType
from pivot_grid.config import configure_logging
from pivot_grid.context import ArrowGridContext
from pivot_grid.header import HeaderNode, HeaderType, data_cell
from pivot_grid.types.dimension import DataField, Dimension, Field
from pivot_grid.types.grid_config import GridConfig


def main():
    configure_logging()

    # Pre-aggregated sales, rolled up over region > city
    table = pa.table({
        "region": ["US", "US", "US", None],
        "city": ["CA", "NY", None, None],
        "sales": [10.0, 20.0, 30.0, 30.0],
    })
    pgrid = ArrowGridContext(GridConfig(data_fields=[DataField("sales")]), table, ["region", "city"], [])

    region = Field("region")
    city = Field("city")
    row_root = Dimension(None, depth=3, is_root=True)
    us = Dimension("US", depth=2, field=region, parent=row_root)
    col_root = Dimension(None, depth=1, is_root=True)

    us_total = HeaderNode(AxisType.ROWS, HeaderType.SUB_TOTAL, us)
    us_header = HeaderNode(AxisType.ROWS, None, us, None, 1, us_total)
    leaves = [
        HeaderNode(AxisType.ROWS, None, Dimension(name, 1, city, us, is_leaf=True), us_header)
        for name in ("CA", "NY")
    ]
    grand_total = HeaderNode(AxisType.ROWS, HeaderType.GRAND_TOTAL, row_root)
    col_total = HeaderNode(AxisType.COLUMNS, HeaderType.GRAND_TOTAL, col_root)

    def layout():
        rows = [[us_header, leaves[0]], [leaves[1]], [us_total], [grand_total]]
        result = []
        for row in rows:
            row_header = row[-1]
            cells = [cell.to_dict() for cell in row]
            cells.append(data_cell(pgrid, row_header.visible, row_header, col_total).to_dict())
            result.append(cells)
        return result

    print("\nExpanded layout:")
    print(json.dumps(layout(), indent=2))

    us_total.collapse()

    print("\nAfter collapsing US:")
    print(json.dumps(layout(), indent=2))


if __name__ == "__main__":
    main()
