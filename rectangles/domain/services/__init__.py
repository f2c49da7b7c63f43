from .collection import RectangleCollection, ReportEntry
from .parsing import (
    parse_coordinates,
    parse_dimensions,
    parse_name_command,
)

__all__ = [
    "RectangleCollection",
    "ReportEntry",
    "parse_coordinates",
    "parse_dimensions",
    "parse_name_command",
]
