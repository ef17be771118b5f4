"""
axe.py - Axis discriminant for pivot grid headers
"""
from enum import Enum


class AxisType(int, Enum):
    """Physical axis a header belongs to"""
    COLUMNS = 1
    ROWS = 2
    DATA = 3
