"""
Grid-level configuration read by data cells.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from pivot_grid.config import get_config
from pivot_grid.types.dimension import DataField

DATA_HEADERS_LOCATIONS = ("rows", "columns")


@dataclass
class GridConfig:
    """Data fields and where their headers are laid out"""
    data_fields: List[DataField] = field(default_factory=list)
    data_headers_location: Optional[str] = None

    def __post_init__(self):
        if self.data_headers_location is None:
            self.data_headers_location = get_config().default_data_headers_location
        self.validate()

    @property
    def data_fields_count(self) -> int:
        # A grid without measures still reserves one slot per dimension value
        return max(len(self.data_fields), 1)

    def validate(self) -> None:
        """Validate configuration settings"""
        errors = []

        if self.data_headers_location not in DATA_HEADERS_LOCATIONS:
            errors.append(
                f"data_headers_location must be one of {DATA_HEADERS_LOCATIONS}, "
                f"got {self.data_headers_location!r}"
            )

        names = [df.name for df in self.data_fields]
        if len(names) != len(set(names)):
            errors.append("data field names must be unique")

        if errors:
            raise ValueError(f"Grid configuration errors: {'; '.join(errors)}")
