"""
context.py - Grid contexts that resolve aggregated values for data cells
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import pyarrow as pa

from pivot_grid.types.dimension import Dimension
from pivot_grid.types.grid_config import GridConfig
from pivot_grid.util.arrow_utils import ensure_arrow_table, filter_by_path

logger = logging.getLogger(__name__)


class PivotGridContext(ABC):
    """What data cells need from the grid: its configuration and a value lookup"""

    def __init__(self, config: GridConfig):
        config.validate()
        self.config = config

    @abstractmethod
    def get_data(self, field_name: Optional[str], rowdim: Dimension, coldim: Dimension) -> Any:
        pass


class ArrowGridContext(PivotGridContext):
    """
    Looks values up in a pre-aggregated Arrow table.

    The table has one column per row field, one per column field and one per
    data field, as produced by a ROLLUP / GROUPING SETS query: a null in a
    dimension column marks a row aggregated over that field.
    """

    def __init__(self, config: GridConfig, table: Any, row_fields: List[str], column_fields: List[str]):
        super().__init__(config)
        self.table: pa.Table = ensure_arrow_table(table)
        self.row_fields = list(row_fields)
        self.column_fields = list(column_fields)

    def get_data(self, field_name: Optional[str], rowdim: Dimension, coldim: Dimension) -> Any:
        if field_name is None:
            if not self.config.data_fields:
                return None
            field_name = self.config.data_fields[0].name

        if field_name not in self.table.column_names:
            raise KeyError(f"Data field '{field_name}' not found in table")

        matches = filter_by_path(self.table, self.row_fields, rowdim.path())
        matches = filter_by_path(matches, self.column_fields, coldim.path())

        if matches.num_rows == 0:
            return None
        if matches.num_rows > 1:
            logger.warning(
                f"{matches.num_rows} rows match {rowdim.path()} x {coldim.path()}, using the first"
            )
        return matches[field_name][0].as_py()
