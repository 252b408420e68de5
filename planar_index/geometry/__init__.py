from .point import X_AXIS, Y_AXIS, Point2D, next_axis
from .rect import UNIT_SQUARE, RectHV

__all__ = ["X_AXIS", "Y_AXIS", "Point2D", "next_axis", "UNIT_SQUARE", "RectHV"]
