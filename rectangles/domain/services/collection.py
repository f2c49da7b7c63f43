import logging
from dataclasses import dataclass
from typing import Iterator, List

from rectangles.domain.models import Rectangle, RectangleSummary
from rectangles.exceptions import DuplicateNameError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportEntry:
    """
    A rectangle with its geometry before and after scaling by 3.

    Attributes:
        name: name of the rectangle
        before: summary taken from the rectangle as entered
        after: summary taken from a scaled copy
    """

    name: str
    before: RectangleSummary
    after: RectangleSummary


class RectangleCollection:
    """Ordered list of uniquely named rectangles.

    Rectangles are stored and handed out by value: changing a rectangle that
    was added or read back does not change the collection.
    """

    def __init__(self, rectangles: List[Rectangle] = None):
        self._rectangles: List[Rectangle] = []
        for rectangle in rectangles or []:
            self.add(rectangle)

    def __len__(self) -> int:
        return len(self._rectangles)

    def __iter__(self) -> Iterator[Rectangle]:
        return (rectangle.copy() for rectangle in self._rectangles)

    def __getitem__(self, index: int) -> Rectangle:
        return self._rectangles[index].copy()

    def __contains__(self, name: str) -> bool:
        return self.contains_name(name)

    def contains_name(self, name: str) -> bool:
        return any(rectangle.name == name for rectangle in self._rectangles)

    def names(self) -> List[str]:
        return [rectangle.name for rectangle in self._rectangles]

    def add(self, rectangle: Rectangle) -> Rectangle:
        if self.contains_name(rectangle.name):
            raise DuplicateNameError("This name is already being used!")

        self._rectangles.append(rectangle.copy())
        logger.debug(
            f"Added rectangle '{rectangle.name}' ({len(self)} in list)"
        )
        return rectangle.copy()

    def add_rectangle(
        self, name: str, x: float, y: float, length: float, height: float
    ) -> Rectangle:
        rectangle = Rectangle()
        rectangle.set_name(name)
        rectangle.set_bottom_left(x, y)
        rectangle.set_dimensions(length, height)
        return self.add(rectangle)

    def report(self) -> Iterator[ReportEntry]:
        """Yield the before and after scale geometry of every rectangle, in
        the order they were added. The rectangles in the collection are not
        modified."""
        for rectangle in self._rectangles:
            before = rectangle.summary()
            after = rectangle.scaled_by_3().summary()
            yield ReportEntry(name=rectangle.name, before=before, after=after)
