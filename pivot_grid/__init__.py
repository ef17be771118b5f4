"""
pivot_grid package - header/cell layout model of a pivot grid

Expose the header tree, cell builders and grid contexts.
"""
from .axe import AxisType
from .header import (
    Cell,
    HeaderNode,
    HeaderType,
    HeaderWiringError,
    button_cell,
    data_cell,
    data_header,
    empty_cell,
    get_cell_class,
    get_header_class,
)
from .context import ArrowGridContext, PivotGridContext

__all__ = [
    "AxisType",
    "Cell",
    "HeaderNode",
    "HeaderType",
    "HeaderWiringError",
    "button_cell",
    "data_cell",
    "data_header",
    "empty_cell",
    "get_cell_class",
    "get_header_class",
    "ArrowGridContext",
    "PivotGridContext",
]
