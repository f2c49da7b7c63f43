# detect if we are imported from the setup procedure (borrowed from numpy code)
try:
    __RECTANGLES_SETUP__
except NameError:
    __RECTANGLES_SETUP__ = False

if not __RECTANGLES_SETUP__:
    from .domain import (
        Point,
        Rectangle,
        RectangleSummary,
        RectangleCollection,
    )
    from .session import RectangleSession

__version__ = "1.0.0"
