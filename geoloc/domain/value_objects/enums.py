"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class CoordinateFormat(str, Enum):
    DECIMAL = "decimal"
    DMS = "dms"
