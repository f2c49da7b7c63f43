import sys
from dataclasses import dataclass, field

from rectangles.utils import format_number

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass
class Point:
    """
    Exact location in 2-dimensional space.

    Attributes:
        x: x coordinate
        y: y coordinate
    """

    x: float = 0.0
    y: float = 0.0

    def set_x(self, x: float):
        self.x = x

    def set_y(self, y: float):
        self.y = y

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def copy(self) -> Self:
        return type(self)(self.x, self.y)

    def format(self) -> str:
        return f"({format_number(self.x)}, {format_number(self.y)})"


@dataclass(frozen=True)
class RectangleSummary:
    """
    Read-only snapshot of a rectangle and all its derived values.

    Attributes:
        location: bottom left corner of the rectangle
        length: extent along the x-axis
        height: extent along the y-axis
        area: length x height
        perimeter: 2 x length + 2 x height
        mid_point: center of the rectangle
    """

    location: Point
    length: float
    height: float
    area: float
    perimeter: float
    mid_point: Point

    def format(self) -> str:
        return (
            f"Location is {self.location.format()}, "
            f"Length is {format_number(self.length)}, "
            f"Height is {format_number(self.height)}, "
            f"Area is {format_number(self.area)}, "
            f"Perimeter is {format_number(self.perimeter)}, "
            f"Midpoint is located at {self.mid_point.format()}"
        )


@dataclass
class Rectangle:
    """
    Axis-aligned rectangle: two sides parallel to the y-axis and two
    parallel to the x-axis.

    A default constructed rectangle is named "NoName", sits at the origin and
    has zero dimensions. It is meant to be filled in with the setters; the
    rectangle itself does not validate its dimensions.

    Attributes:
        name: name of the rectangle
        bottom_left: corner with minimal x and y. Owned by the rectangle.
        length: extent along the x-axis
        height: extent along the y-axis
    """

    name: str = "NoName"
    bottom_left: Point = field(default_factory=Point)
    length: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        self.bottom_left = self.bottom_left.copy()

    def set_name(self, name: str):
        self.name = name

    def set_bottom_left(self, x: float, y: float):
        self.bottom_left.set_x(x)
        self.bottom_left.set_y(y)

    def set_dimensions(self, length: float, height: float):
        self.length = length
        self.height = height

    def get_name(self) -> str:
        return self.name

    def get_bottom_left(self) -> Point:
        return self.bottom_left.copy()

    def get_length(self) -> float:
        return self.length

    def get_height(self) -> float:
        return self.height

    def area(self) -> float:
        return self.length * self.height

    def perimeter(self) -> float:
        return 2 * self.length + 2 * self.height

    def mid_point(self) -> Point:
        return Point(
            self.bottom_left.x + self.length / 2,
            self.bottom_left.y + self.height / 2,
        )

    def scale_by_3(self):
        """Scale the rectangle by a factor of 3 about its midpoint.

        The corner moves by the pre-scale length and height, which keeps the
        midpoint in place once the dimensions are tripled.
        """
        self.set_bottom_left(
            self.bottom_left.x - self.length,
            self.bottom_left.y - self.height,
        )
        self.set_dimensions(self.length * 3, self.height * 3)

    def scaled_by_3(self) -> Self:
        """Return a scaled copy, leaving this rectangle untouched."""
        rectangle = self.copy()
        rectangle.scale_by_3()
        return rectangle

    def copy(self) -> Self:
        return type(self)(
            name=self.name,
            bottom_left=self.bottom_left.copy(),
            length=self.length,
            height=self.height,
        )

    def summary(self) -> RectangleSummary:
        return RectangleSummary(
            location=self.get_bottom_left(),
            length=self.length,
            height=self.height,
            area=self.area(),
            perimeter=self.perimeter(),
            mid_point=self.mid_point(),
        )

    def display(self) -> str:
        return self.summary().format()
