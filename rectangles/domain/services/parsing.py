"""Parsing and validation of the lines a user types while describing
rectangles. Every problem is reported as an `InputError` subclass whose
message can be shown to the user before asking again."""
import math
from typing import Optional, Tuple

from rectangles.config import get_config
from rectangles.domain.services.collection import RectangleCollection
from rectangles.exceptions import (
    DuplicateNameError,
    InvalidCommandError,
    InvalidDimensionsError,
    InvalidNumberError,
)


def _strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def parse_name_command(
    line: str, collection: RectangleCollection
) -> Optional[str]:
    """Parse a name command like `rec garden`.

    Arguments:
        line: the line as typed by the user
        collection: rectangles entered so far, used to reject duplicate names

    Returns:
        The rectangle name, or None when the user typed the stop keyword.

    Raises:
        InvalidCommandError: the line is neither the stop keyword nor the add
            keyword followed by a single space and a name
        DuplicateNameError: a rectangle with this exact name already exists
    """
    line = _strip_line_ending(line)
    add_keyword = get_config("keyword.add")
    stop_keyword = get_config("keyword.stop")

    if line == stop_keyword:
        return None

    prefix = f"{add_keyword} "
    if not line.startswith(prefix) or not line[len(prefix) :]:
        raise InvalidCommandError(
            f"Invalid input. Type '{add_keyword}' followed by the name "
            f"or '{stop_keyword}' if done."
        )

    name = line[len(prefix) :]
    if collection.contains_name(name):
        raise DuplicateNameError("This name is already being used!")
    return name


def _parse_pair(line: str) -> Tuple[float, float]:
    parts = line.split()
    if len(parts) != 2:
        raise InvalidNumberError("Invalid input. Enter exactly two numbers.")

    # float() also reads "1_000"
    if any("_" in part for part in parts):
        raise InvalidNumberError("Invalid input. Enter exactly two numbers.")

    try:
        first, second = float(parts[0]), float(parts[1])
    except ValueError:
        raise InvalidNumberError("Invalid input. Enter exactly two numbers.")

    if not (math.isfinite(first) and math.isfinite(second)):
        raise InvalidNumberError("Invalid input. Numbers must be finite.")
    return first, second


def parse_coordinates(line: str) -> Tuple[float, float]:
    """Parse an `x y` pair. Any finite real numbers are accepted."""
    return _parse_pair(line)


def parse_dimensions(line: str) -> Tuple[float, float]:
    """Parse a `length height` pair. Both must be strictly positive."""
    length, height = _parse_pair(line)
    if length <= 0 or height <= 0:
        raise InvalidDimensionsError(
            "Invalid input. Dimensions must be positive."
        )
    return length, height
