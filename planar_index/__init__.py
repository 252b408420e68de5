__version__ = "0.1.0"

from .geometry import UNIT_SQUARE, Point2D, RectHV
from .index import KdTree, PointSet

__all__ = ["__version__", "UNIT_SQUARE", "Point2D", "RectHV", "KdTree", "PointSet"]
