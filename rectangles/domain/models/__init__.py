from .geometry import Point, Rectangle, RectangleSummary

__all__ = ["Point", "Rectangle", "RectangleSummary"]
