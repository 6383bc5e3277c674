from collections import namedtuple

import numpy as np

CENTER = np.array([0.5, 0.5])
INNER_RADIUS = 0.25 * np.sqrt(2.0)
OUTER_RADIUS = 0.5
# cos^2(C (r - 0.5)) runs from 0 at the inner radius to 1 at the outer one
C = np.pi / (0.5 * np.sqrt(2.0) - 1.0)


class PsiValue(namedtuple("PsiValue", ["value", "gradient", "laplacian"])):
    """Value, gradient and Laplacian of the cutoff function at one point."""
    __slots__ = ()

    def is_transition(self):
        """True in the annulus, the only zone where the derivatives do not vanish"""
        return bool(np.any(self.gradient)) or self.laplacian != 0.0


def Psi(y):
    """
    Radial cutoff around the center of the unit square.

    Psi vanishes on the disk of radius sqrt(2)/4, equals one outside the disk
    of radius 1/2 and is C^1 across both circles.

    Args:
        y (array-like): Point (y1, y2)

    Returns:
        PsiValue: value, gradient and Laplacian, all taken in the same zone
    """
    d = np.asarray(y, dtype=float) - CENTER
    r = np.linalg.norm(d)

    if r <= INNER_RADIUS:
        return PsiValue(0.0, np.zeros(2), 0.0)
    if r >= OUTER_RADIUS:
        return PsiValue(1.0, np.zeros(2), 0.0)

    arg = C * (r - 0.5)
    cos_a = np.cos(arg)
    sin_a = np.sin(arg)
    # radial derivatives of f(r) = cos^2(C (r - 0.5))
    df = -2.0 * C * cos_a * sin_a
    d2f = 2.0 * C * C * (sin_a * sin_a - cos_a * cos_a)

    value = cos_a * cos_a
    gradient = df * d / r
    laplacian = d2f + df / r
    return PsiValue(value, gradient, laplacian)
