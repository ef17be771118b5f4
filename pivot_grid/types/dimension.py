"""
Dimension node types consumed by the header tree.

The dimension engine builds these; the header tree only reads value, depth,
root/leaf flags and the field's sub-total configuration.
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass
class SubTotalConfig:
    """Sub-total display settings of a row/column field"""
    visible: bool = True
    collapsed: bool = False


@dataclass
class Field:
    name: str
    caption: Optional[str] = None
    sub_total: SubTotalConfig = field(default_factory=SubTotalConfig)

    def __post_init__(self):
        if self.caption is None:
            self.caption = self.name


@dataclass
class DataField:
    """A measure shown in data cells"""
    name: str
    caption: Optional[str] = None
    aggregate_func: str = "sum"

    def __post_init__(self):
        if self.caption is None:
            self.caption = self.name


# Fields without configuration never show sub-totals
_NO_SUB_TOTAL = SubTotalConfig(visible=False, collapsed=False)


@dataclass(eq=False)
class Dimension:
    """One distinct value along an axis at a given nesting depth"""
    value: Any
    depth: int
    field: Optional[Field] = None
    parent: Optional["Dimension"] = None
    is_root: bool = False
    is_leaf: bool = False

    def __post_init__(self):
        if self.depth < 1:
            raise ValueError(f"Dimension depth must be >= 1, got {self.depth}")

    @property
    def sub_total(self) -> SubTotalConfig:
        return self.field.sub_total if self.field is not None else _NO_SUB_TOTAL

    def path(self) -> Tuple[Any, ...]:
        """Values from just below the root down to this dimension"""
        values = []
        dim = self
        while dim is not None and not dim.is_root:
            values.append(dim.value)
            dim = dim.parent
        return tuple(reversed(values))
