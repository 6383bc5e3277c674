import numpy as np
from TriaElement import RefEl


class QuadRule:
    """
    Quadrature rule on a reference element.
    Points are stored as a P x 2 array of reference coordinates, weights as a length P array.
    """

    def __init__(self, ref_el, points, weights):
        self.refEl_ = ref_el
        self.points_ = np.atleast_2d(np.array(points, dtype=float))
        self.weights_ = np.array(weights, dtype=float)
        if self.points_.shape[0] != self.weights_.shape[0]:
            raise ValueError(f"Got {self.points_.shape[0]} points but {self.weights_.shape[0]} weights")

    def ref_el(self):
        return self.refEl_

    def points(self):
        return self.points_

    def weights(self):
        return self.weights_

    def num_points(self):
        return self.weights_.shape[0]

    def __repr__(self):
        return f"QuadRule(refEl={self.refEl_.value}, num_points={self.num_points()})"


def make_tria_midpoint_rule():
    """One point rule at the centroid, exact for linear polynomials."""
    return QuadRule(RefEl.TRIA, [[1.0/3.0, 1.0/3.0]], [0.5])


def make_tria_qr(n_points):
    """
    Quadrature rule on the reference triangle (0,0), (1,0), (0,1).

    Args:
        n_points (int): Number of integration points, 1 or 3.

    Raises:
        ValueError: If `n_points` is not 1 or 3.

    Returns:
        QuadRule: weights sum to the reference area 1/2.
    """
    if n_points == 1:
        return make_tria_midpoint_rule()
    elif n_points == 3:
        return QuadRule(RefEl.TRIA,
                        [[1.0/6.0, 1.0/6.0],
                         [2.0/3.0, 1.0/6.0],
                         [1.0/6.0, 2.0/3.0]],
                        [1.0/6.0, 1.0/6.0, 1.0/6.0])
    else:
        raise ValueError(f"Unsupported number of quadrature points: {n_points}. "
                         f"'n_points' must be 1 or 3.")
