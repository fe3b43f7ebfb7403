"""vector2d: planar geometry capabilities for point, size and rectangle values.

Core Objects: Vector2D, Rectangular, Point, Size, Vector, UnitPoint, Rect
"""

import datetime

__title__ = "vector2d"
__version__ = "1.0.2"
__license__ = "MIT"
_this_year = datetime.datetime.now(tz=datetime.UTC).date().year
__copyright__ = f"Copyright {_this_year} vector2d contributors"

from vector2d.errors import ConformanceError, Vector2DError  # noqa: E402
from vector2d.protocols import (  # noqa: E402
    Field,
    SupportsRectangular,
    SupportsVector2D,
)
from vector2d.rectangular import Rectangular  # noqa: E402
from vector2d.values import (  # noqa: E402
    UNIT_SQUARE,
    ZERO_POINT,
    ZERO_SIZE,
    Point,
    Rect,
    Size,
    UnitPoint,
    Vector,
)
from vector2d.vector import Vector2D  # noqa: E402

__all__ = [
    "UNIT_SQUARE",
    "ZERO_POINT",
    "ZERO_SIZE",
    "ConformanceError",
    "Field",
    "Point",
    "Rect",
    "Rectangular",
    "Size",
    "SupportsRectangular",
    "SupportsVector2D",
    "UnitPoint",
    "Vector",
    "Vector2D",
    "Vector2DError",
]
