"""IEEE-754 total arithmetic helpers.

Python's ``float`` raises ``ZeroDivisionError`` on ``x / 0`` and ``math.cos``
raises ``ValueError`` for infinite input. The geometry in this package is
total over the floating-point domain, so these operations are routed through
numpy with the floating-point error handlers silenced. Results are returned
as plain ``float``.
"""

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics.

    ``x / 0`` gives a signed infinity and ``0 / 0`` gives NaN instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.true_divide(numerator, denominator))


def ieee_cos(angle: float) -> float:
    """Cosine of ``angle`` in radians, NaN for non-finite input."""
    with np.errstate(invalid="ignore"):
        return float(np.cos(angle))


def ieee_sin(angle: float) -> float:
    """Sine of ``angle`` in radians, NaN for non-finite input."""
    with np.errstate(invalid="ignore"):
        return float(np.sin(angle))
