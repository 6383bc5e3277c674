import numpy as np


class SingularEvaluationError(ValueError):
    """Raised when the fundamental solution is requested at coincident points."""


def _check_distinct(x, y):
    if np.array_equal(x, y):
        raise SingularEvaluationError(f"G not defined for coincident points x = y = {tuple(x)}")


def G(x, y):
    """Fundamental solution of the 2D Laplacian, G(x,y) = -1/(2 pi) ln|x - y|"""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    _check_distinct(x, y)
    return -np.log(np.linalg.norm(x - y)) / (2.0 * np.pi)


def gradG(x, y):
    """Gradient of G(x,y) with respect to x"""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    _check_distinct(x, y)
    diff = x - y
    return -diff / (2.0 * np.pi * (diff @ diff))
