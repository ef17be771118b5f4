"""
Tests for the header/cell css classification.
"""
import pytest
from pivot_grid.axe import AxisType
from pivot_grid.header import HeaderType, get_cell_class, get_header_class


@pytest.mark.parametrize("header_type, expected", [
    (HeaderType.EMPTY, "empty"),
    (HeaderType.FIELD_BUTTON, "empty"),
    (HeaderType.INNER, "header"),
    (HeaderType.SUB_TOTAL, "header header-sub-total"),
    (HeaderType.GRAND_TOTAL, "header header-grand-total"),
    (HeaderType.DATA_HEADER, ""),
    (HeaderType.DATA_VALUE, ""),
    (None, ""),
])
def test_header_class(header_type, expected):
    """Each header role maps to its css class"""
    assert get_header_class(header_type, AxisType.ROWS) == expected


@pytest.mark.parametrize("axetype", [AxisType.ROWS, AxisType.COLUMNS, None])
def test_wrapper_class_is_axis_independent(axetype):
    """Wrappers use the plain header class on every axis"""
    assert get_header_class(HeaderType.WRAPPER, axetype) == "header"


@pytest.mark.parametrize("col_type", list(HeaderType))
def test_grand_total_row_dominates(col_type):
    """A grand total row marks every cell as grand total"""
    assert get_cell_class(HeaderType.GRAND_TOTAL, col_type) == "cell-grand-total"


@pytest.mark.parametrize("row_type, col_type, expected", [
    (HeaderType.SUB_TOTAL, HeaderType.SUB_TOTAL, "cell-sub-total"),
    (HeaderType.SUB_TOTAL, HeaderType.INNER, "cell-sub-total"),
    (HeaderType.SUB_TOTAL, HeaderType.GRAND_TOTAL, "cell-grand-total"),
    (HeaderType.INNER, HeaderType.INNER, "cell"),
    (HeaderType.WRAPPER, HeaderType.INNER, "cell"),
    (HeaderType.INNER, HeaderType.SUB_TOTAL, "cell-sub-total"),
    (HeaderType.INNER, HeaderType.GRAND_TOTAL, "cell-grand-total"),
    (HeaderType.DATA_HEADER, HeaderType.INNER, "cell"),
])
def test_cell_class(row_type, col_type, expected):
    """Row role wins unless the column is a grand total"""
    assert get_cell_class(row_type, col_type) == expected


if __name__ == "__main__":
    pytest.main([__file__])
