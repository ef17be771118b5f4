"""
header.py - Header and cell view models of the pivot grid

Row and column headers form one tree per axis. Spans and visibility are
computed from the current expand/collapse state on every call, so a toggle is
reflected by the very next read without any invalidation step.
"""
import logging
import weakref
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pivot_grid.axe import AxisType
from pivot_grid.config import get_config
from pivot_grid.types.dimension import DataField, Dimension, Field

logger = logging.getLogger(__name__)


class HeaderType(int, Enum):
    """Role of a cell in the grid layout"""
    EMPTY = 1
    DATA_HEADER = 2
    DATA_VALUE = 3
    FIELD_BUTTON = 4
    INNER = 5
    WRAPPER = 6
    SUB_TOTAL = 7
    GRAND_TOTAL = 8


class HeaderWiringError(ValueError):
    """Raised when a header tree is assembled inconsistently"""


def get_header_class(header_type: Optional[HeaderType], axetype: Optional[AxisType] = None) -> str:
    """Css class(es) of a header cell."""
    cssclass = ''
    if header_type in (HeaderType.EMPTY, HeaderType.FIELD_BUTTON):
        cssclass = 'empty'
    elif header_type == HeaderType.INNER:
        cssclass = 'header'
    elif header_type == HeaderType.WRAPPER:
        # Same class on both axes
        cssclass = 'header'
    elif header_type == HeaderType.SUB_TOTAL:
        cssclass = 'header header-sub-total'
    elif header_type == HeaderType.GRAND_TOTAL:
        cssclass = 'header header-grand-total'
    return cssclass


def get_cell_class(row_header_type: Optional[HeaderType], col_header_type: Optional[HeaderType]) -> str:
    """
    Css class of a data cell given the roles of its row and column headers.

    The row role wins, except that a grand total column always marks the
    cell as grand total.
    """
    if row_header_type == HeaderType.GRAND_TOTAL:
        return 'cell-grand-total'
    if row_header_type == HeaderType.SUB_TOTAL:
        if col_header_type == HeaderType.GRAND_TOTAL:
            return 'cell-grand-total'
        return 'cell-sub-total'
    if col_header_type == HeaderType.GRAND_TOTAL:
        return 'cell-grand-total'
    if col_header_type == HeaderType.SUB_TOTAL:
        return 'cell-sub-total'
    return 'cell'


def _one() -> int:
    return 1


def _always_visible() -> bool:
    return True


class Cell:
    """
    Shape shared by every cell of the grid.

    hspan/vspan/visible are zero-argument accessors evaluated by the
    rendering layer each time it lays the grid out.
    """

    def __init__(
        self,
        axetype: Optional[AxisType],
        header_type: HeaderType,
        template: str,
        value: Any,
        cssclass: str,
        hspan: Optional[Callable[[], int]] = None,
        vspan: Optional[Callable[[], int]] = None,
        isvisible: Optional[Callable[[], bool]] = None,
        parent: Optional["Cell"] = None,
    ):
        self.axetype = axetype
        self.type = header_type
        self.template = template
        self.value = value
        self.cssclass = cssclass
        self._hspan = hspan or _one
        self._vspan = vspan or _one
        self._visible = isvisible or _always_visible
        self.parent = parent
        # Set on data cells only
        self.datafield: Optional[DataField] = None
        self.rowdim: Optional[Dimension] = None
        self.coldim: Optional[Dimension] = None

    @property
    def parent(self) -> Optional["Cell"]:
        if self._parent_ref is None:
            return None
        parent = self._parent_ref()
        if parent is None:
            raise HeaderWiringError(
                f"Parent of {self!r} was discarded; keep the root headers of the tree alive"
            )
        return parent

    @parent.setter
    def parent(self, value: Optional["Cell"]):
        # Back references never own the parent
        self._parent_ref = weakref.ref(value) if value is not None else None

    def hspan(self) -> int:
        """Width in logical grid cells"""
        return self._hspan()

    def vspan(self) -> int:
        """Height in logical grid cells"""
        return self._vspan()

    def visible(self) -> bool:
        return self._visible()

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the cell for the rendering layer"""
        return {
            "axetype": self.axetype.name if self.axetype is not None else None,
            "type": self.type.name,
            "template": self.template,
            "value": self.value,
            "cssclass": self.cssclass,
            "hspan": self.hspan(),
            "vspan": self.vspan(),
            "visible": self.visible(),
        }

    def __repr__(self):
        return f"{self.__class__.__name__}({self.type.name}, {self.value!r})"


class HeaderNode(Cell):
    """
    A row or column header.

    The node registers itself in its parent's ``subheaders`` on construction.
    Its span along the stacking direction is fixed; the other one is derived
    from the subtree (see calc_span). Visibility follows the sub-total
    expand/collapse state of the node and its ancestors.
    """

    def __init__(
        self,
        axetype: AxisType,
        header_type: Optional[HeaderType],
        dim: Dimension,
        parent: Optional["HeaderNode"] = None,
        datafields_count: int = 1,
        subtotal_header: Optional["HeaderNode"] = None,
    ):
        if dim is None:
            raise HeaderWiringError("A header needs a dimension")
        if axetype not in (AxisType.ROWS, AxisType.COLUMNS):
            raise HeaderWiringError(f"Headers belong to the rows or columns axis, got {axetype!r}")
        if datafields_count < 1:
            raise HeaderWiringError(f"datafields_count must be >= 1, got {datafields_count}")
        if parent is not None and parent.axetype != axetype:
            raise HeaderWiringError(
                f"Cannot attach a {axetype.name} header to a {parent.axetype.name} parent"
            )

        header_type = header_type or (HeaderType.INNER if dim.depth == 1 else HeaderType.WRAPPER)
        self._validate_subtotal_header(axetype, header_type, dim, subtotal_header)

        is_rows_axe = axetype == AxisType.ROWS
        settings = get_config()

        if header_type == HeaderType.GRAND_TOTAL:
            value = settings.grand_total_label
            hspan = max(dim.depth - 1, 1) if is_rows_axe else datafields_count
            vspan = datafields_count if is_rows_axe else max(dim.depth - 1, 1)
        elif header_type == HeaderType.SUB_TOTAL:
            value = f"{settings.subtotal_label_prefix}{dim.value}"
            hspan = dim.depth if is_rows_axe else datafields_count
            vspan = datafields_count if is_rows_axe else dim.depth
        else:
            value = dim.value
            hspan = 1 if is_rows_axe else None
            vspan = None if is_rows_axe else 1

        super().__init__(
            axetype=axetype,
            header_type=header_type,
            template='cell-template-row-header' if is_rows_axe else 'cell-template-column-header',
            value=value,
            cssclass=get_header_class(header_type, axetype),
            parent=parent,
        )

        self._fixed_hspan = hspan
        self._fixed_vspan = vspan
        self.dim = dim
        self.datafields_count = datafields_count
        self.subtotal_header = subtotal_header
        self.subheaders: List[HeaderNode] = []
        self.expanded = header_type != HeaderType.SUB_TOTAL or not dim.sub_total.collapsed

        if parent is not None:
            parent.subheaders.append(self)

    @staticmethod
    def _validate_subtotal_header(axetype, header_type, dim, subtotal_header):
        if subtotal_header is not None:
            if subtotal_header.type != HeaderType.SUB_TOTAL:
                raise HeaderWiringError(
                    f"subtotal_header must be a SUB_TOTAL header, got {subtotal_header.type.name}"
                )
            if subtotal_header.axetype != axetype:
                raise HeaderWiringError("subtotal_header belongs to the other axis")
        elif (header_type != HeaderType.SUB_TOTAL and not dim.is_root and not dim.is_leaf
              and dim.sub_total.visible):
            raise HeaderWiringError(
                f"Header {dim.value!r} shows sub-totals but has no subtotal_header"
            )

    @property
    def children(self) -> List["HeaderNode"]:
        return self.subheaders

    def expand(self):
        self.expanded = True
        logger.debug(f"Expanded {self!r}")

    def collapse(self):
        self.expanded = False
        logger.debug(f"Collapsed {self!r}")

    def hspan(self) -> int:
        if self._fixed_hspan is not None:
            return self._fixed_hspan
        return self.calc_span()

    def vspan(self) -> int:
        if self._fixed_vspan is not None:
            return self._fixed_vspan
        return self.calc_span()

    def visible(self) -> bool:
        return self.is_parent_expanded()

    def is_parent_expanded(self) -> bool:
        """Whether no collapsed sub-total group hides this header."""
        if self.type == HeaderType.SUB_TOTAL:
            hparent = self.parent
            while hparent is not None:
                if hparent.subtotal_header is not None and not hparent.subtotal_header.expanded:
                    return False
                hparent = hparent.parent
            return True

        isexpanded = (
            self.dim.is_root
            or self.dim.is_leaf
            or not self.dim.sub_total.visible
            or self.subtotal_header.expanded
        )
        if not isexpanded:
            return False

        # Skip ancestors whose group is open (or never collapsible)
        par = self.parent
        while par is not None and (
            not par.dim.sub_total.visible
            or (par.subtotal_header is not None and par.subtotal_header.expanded)
        ):
            par = par.parent

        if par is None or par.subtotal_header is None:
            return isexpanded
        return par.subtotal_header.expanded

    def calc_span(self) -> int:
        """
        Span along the computed direction (vertical on rows, horizontal on
        columns).

        A leaf occupies one slot per data field. A wrapper sums its children;
        when its first child collapses to nothing (zero span, or a collapsed
        sub-total on the rows axis) one extra slot is reserved for it.
        """
        if not self.visible():
            return 0
        if self.dim.is_leaf:
            return self.datafields_count

        is_rows_axe = self.axetype == AxisType.ROWS
        tspan = 0
        addone = False
        for i, subheader in enumerate(self.subheaders):
            if subheader.dim.is_leaf:
                tspan += self.datafields_count
                continue

            sub_span = subheader.vspan() if is_rows_axe else subheader.hspan()
            tspan += sub_span
            if i == 0 and (
                sub_span == 0
                or (is_rows_axe and subheader.type == HeaderType.SUB_TOTAL and not subheader.expanded)
            ):
                addone = True

        return tspan + (1 if addone else 0)

    def __repr__(self):
        return f"HeaderNode({self.axetype.name}, {self.type.name}, {self.value!r})"


def data_header(datafield: DataField, parent: HeaderNode) -> Cell:
    """Label of a data field under a header when several data fields exist"""
    return Cell(
        axetype=None,
        header_type=HeaderType.DATA_HEADER,
        template='cell-template-dataheader',
        value=datafield,
        cssclass=get_header_class(parent.type),
        isvisible=parent.visible,
        parent=parent,
    )


def _resolve_header(info: Cell):
    # Data headers stand for their parent header
    if info.type == HeaderType.DATA_HEADER:
        return info.parent.dim, info.parent.type
    return info.dim, info.type


def data_cell(pgrid, isvisible: Optional[Callable[[], bool]], rowinfo: Cell, colinfo: Cell) -> Cell:
    """
    Data cell at the crossing of a row header and a column header.

    Args:
        pgrid: grid context exposing ``config`` and ``get_data``.
        isvisible: visibility accessor supplied by the grid.
        rowinfo: row header (or data header) of the cell.
        colinfo: column header (or data header) of the cell.
    """
    rowdim, rowtype = _resolve_header(rowinfo)
    coldim, coltype = _resolve_header(colinfo)

    config = pgrid.config
    if config.data_fields_count > 1:
        datafield = rowinfo.value if config.data_headers_location == 'rows' else colinfo.value
    else:
        datafield = config.data_fields[0] if config.data_fields else None

    value = pgrid.get_data(datafield.name if datafield else None, rowdim, coldim)
    logger.debug(f"Data cell {rowdim.path()} x {coldim.path()} -> {value!r}")

    cell = Cell(
        axetype=None,
        header_type=HeaderType.DATA_VALUE,
        template='cell-template-datavalue',
        value=value,
        cssclass='cell ' + get_cell_class(rowtype, coltype),
        isvisible=isvisible,
    )
    cell.datafield = datafield
    cell.rowdim = rowdim
    cell.coldim = coldim
    return cell


def button_cell(field: Field) -> Cell:
    """Field selector button"""
    return Cell(
        axetype=None,
        header_type=HeaderType.FIELD_BUTTON,
        template='cell-template-fieldbutton',
        value=field,
        cssclass=get_header_class(HeaderType.FIELD_BUTTON),
    )


def empty_cell(hspan: int, vspan: int) -> Cell:
    """Filler for rectangular gaps of the header grid"""
    return Cell(
        axetype=None,
        header_type=HeaderType.EMPTY,
        template='cell-template-empty',
        value=None,
        cssclass=get_header_class(HeaderType.EMPTY),
        hspan=lambda: hspan,
        vspan=lambda: vspan,
    )
