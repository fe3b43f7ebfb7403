"""Exception hierarchy for vector2d.

The numeric contract itself never raises: degenerate geometry and division by
zero propagate IEEE-754 values instead. These exceptions belong to the
conversion helpers that move coordinate pairs between conforming types.
"""

import vector2d


class Vector2DError(Exception):
    """Root of the vector2d exception hierarchy.

    The rendered message starts with the installed vector2d version, and the
    message as raised stays available as ``original_message``.
    """

    def __init__(self, message: str):
        self.vector2d_version = getattr(vector2d, "__version__", "unknown")
        self.original_message = message
        full_message = f"[vector2d {self.vector2d_version}] {message}"
        super().__init__(full_message)


class ConformanceError(Vector2DError):
    """Raised when a type does not provide the interface a capability requires."""

    def __init__(self, target, capability: str = "Vector2D"):
        self.target = target
        self.capability = capability
        name = getattr(target, "__name__", type(target).__name__)
        message = f"{name} does not conform to {capability}."
        super().__init__(message)
