import numpy as np
from MeshObject import MeshObject
from FundamentalSolution import G, gradG

EVALUATION_POINT = np.array([0.3, 0.4])
SHIFT = np.array([1.0, 0.0])


def PSL(mesh, v, x):
    """
    Single layer potential of the density v at x, midpoint rule on the boundary edges.

    Args:
        mesh (MeshObject): Triangulation of the unit square
        v (callable): Boundary density, point -> float
        x (array-like): Target point

    Returns:
        float: sum over boundary edges of v(m) G(x, m) |e|
    """
    x = np.asarray(x, dtype=float)
    value = 0.0
    for edge in mesh.get_boundary_edges():
        midpoint = edge.midpoint()
        value += v(midpoint) * G(x, midpoint) * edge.volume()
    return value


def PDL(mesh, v, x):
    """
    Double layer potential of the density v at x, midpoint rule on the boundary edges.

    The normal derivative is taken in the integration variable y, using the
    outward normal stored on each boundary edge:
    dG(x,y)/dn(y) = grad_y G(x,y) . n = gradG(y, x) . n
    """
    x = np.asarray(x, dtype=float)
    value = 0.0
    for edge in mesh.get_boundary_edges():
        midpoint = edge.midpoint()
        normal = edge.get_normal_vector()
        value += v(midpoint) * (gradG(midpoint, x) @ normal) * edge.volume()
    return value


def square_outward_normal(p):
    """
    Outward normal of the unit square for a boundary point p.

    The square is cut into four sectors by its diagonals. Sectors are tested
    in the order bottom, right, top, left with non-strict comparisons, so a
    point on a diagonal gets the normal of the first sector containing it.
    """
    p0, p1 = p[0], p[1]
    if p0 >= p1 and p0 <= 1.0 - p1:
        return np.array([0.0, -1.0])
    if p0 >= p1 and p0 >= 1.0 - p1:
        return np.array([1.0, 0.0])
    if p0 <= p1 and p0 >= 1.0 - p1:
        return np.array([0.0, 1.0])
    return np.array([-1.0, 0.0])


def harmonic_test_solution(y):
    """u(y) = ln|y + (1,0)|, harmonic on the closed unit square"""
    return np.log(np.linalg.norm(np.asarray(y, dtype=float) + SHIFT))


def harmonic_test_gradient(y):
    z = np.asarray(y, dtype=float) + SHIFT
    return z / (z @ z)


def pointEval(mesh):
    """
    Check the boundary representation u(x) = PSL(du/dn) - PDL(u).

    Uses the harmonic test solution and x = (0.3, 0.4).

    Returns:
        float: |u(x) - (PSL(du/dn)(x) - PDL(u)(x))|
    """
    if not isinstance(mesh, MeshObject):
        raise TypeError("mesh must be an instance of MeshObject")

    def normal_derivative(y):
        return harmonic_test_gradient(y) @ square_outward_normal(y)

    rhs = PSL(mesh, normal_derivative, EVALUATION_POINT) - PDL(mesh, harmonic_test_solution, EVALUATION_POINT)
    return abs(harmonic_test_solution(EVALUATION_POINT) - rhs)
