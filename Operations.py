import os
import time

import numpy as np
import matplotlib.pyplot as plt

from YamlParser import InputConfigParser
from MeshObject import MeshObject
from TriaElement import RefEl
from FieldsHolder import FieldArray, DimType, FieldNames
from QuadratureRule import make_tria_qr, make_tria_midpoint_rule
from FundamentalSolution import G, gradG
from CutoffFunction import Psi, CENTER
from BoundaryPotentials import pointEval, harmonic_test_solution

STABILITY_RADIUS = 0.25


class NonTriangularMeshError(TypeError):
    """Raised when the regularized functional meets a cell that is not a triangle."""


class EvaluationResult:
    """Outcome of a stabilized point evaluation: a value, or the reason there is none."""

    def __init__(self, value=None, message=None):
        self.value_ = value
        self.message_ = message

    @classmethod
    def success(cls, value):
        return cls(value=float(value))

    @classmethod
    def failure(cls, message):
        return cls(message=message)

    def succeeded(self):
        return self.message_ is None

    def get_value(self):
        if not self.succeeded():
            raise ValueError(f"No value available: {self.message_}")
        return self.value_

    def get_message(self):
        return self.message_

    def __repr__(self):
        if self.succeeded():
            return f"EvaluationResult(value={self.value_})"
        return f"EvaluationResult(failure='{self.message_}')"


class PerformanceTimer:
	def __init__(self):
		self.myStartTimer_ = 0.0
		self.myEndTimer_ = 0.0
		self.myEventName_ = None
	def start_timer(self, eventName):
		self.myEventName_ = eventName
		self.myStartTimer_ = time.perf_counter()
	def end_timer(self):
		assert self.myEventName_ != None, "No event was started"
		self.myEndTimer_ = time.perf_counter()
		elapsed = self.myEndTimer_ - self.myStartTimer_
		print(f"For event {self.myEventName_}, timer: {elapsed:.6f} seconds ")
		self.myEventName_ = None
		return elapsed


def _solution_evaluator(u):
    """Return f(cell, ref_point, global_point) evaluating u, a callable or a nodal FieldArray"""
    if isinstance(u, FieldArray):
        assert u.get_type() == DimType.SCALAR, "Jstar requires a scalar field"
        return lambda cell, ref_point, point: u.evaluate_on_cell(cell, ref_point)
    return lambda cell, ref_point, point: u(point)


def Jstar(mesh, u, x, quad_rule=None):
    """
    Regularized point value of a harmonic function u at x.

    Quadrature of
        -int u(y) [2 grad_y G(x,y) . grad Psi(y) + G(x,y) lapl Psi(y)] dy
    over the mesh. The integrand vanishes wherever the derivatives of Psi
    vanish, so the kernel is only evaluated in the cutoff annulus, away from x.

    Args:
        mesh (MeshObject): Triangulation of the unit square
        u (callable or FieldArray): Approximate solution
        x (array-like): Evaluation point inside the zero zone of Psi
        quad_rule (QuadRule): Rule on the reference triangle, midpoint rule by default

    Returns:
        float: the approximate value u(x)
    """
    x = np.asarray(x, dtype=float)
    if quad_rule is None:
        quad_rule = make_tria_midpoint_rule()
    zeta_ref = quad_rule.points()
    w_ref = quad_rule.weights()
    evaluate_u = _solution_evaluator(u)

    val = 0.0
    for cell in mesh.get_cells():
        if cell.ref_el() != RefEl.TRIA:
            raise NonTriangularMeshError(f"Not on triangular mesh! Cell {cell.get_flat_id()} is a {cell.ref_el().value}")

        zeta = cell.global_coords(zeta_ref)
        gram_dets = cell.integration_element(zeta_ref)
        for l in range(quad_rule.num_points()):
            psi = Psi(zeta[l])
            if not psi.is_transition():
                continue
            # grad_y G(x, y) = gradG(y, x)
            integrand = 2.0 * (gradG(zeta[l], x) @ psi.gradient) + G(x, zeta[l]) * psi.laplacian
            val -= w_ref[l] * evaluate_u(cell, zeta_ref[l], zeta[l]) * integrand * gram_dets[l]
    return val


def stab_pointEval(mesh, u, x, quad_rule=None):
    """
    Stable evaluation of u at x.

    Returns:
        EvaluationResult: the value of Jstar when |x - (0.5, 0.5)| <= 0.25,
        a failure otherwise
    """
    x = np.asarray(x, dtype=float)
    distance = np.linalg.norm(x - CENTER)
    if distance <= STABILITY_RADIUS:
        return EvaluationResult.success(Jstar(mesh, u, x, quad_rule))
    return EvaluationResult.failure(
        f"The point {tuple(x)} does not fulfill the assumptions: "
        f"distance {distance:.6g} to the center exceeds {STABILITY_RADIUS}"
    )


class ConvergenceStudy:
    """
    Runs pointEval and stab_pointEval on a sequence of refined meshes for the harmonic test solution.
    """
    def __init__(self, config_parser):
        if not isinstance(config_parser, InputConfigParser):
            raise TypeError("config_parser must be an instance of InputConfigParser")
        self.config_parser_ = config_parser
        self.point_ = np.array(config_parser.evaluationPoint_, dtype=float)
        self.quadRule_ = make_tria_qr(config_parser.quadraturePoints_)
        self.timer_ = PerformanceTimer()
        self.rows_ = []

    def run(self):
        self.rows_ = []
        exact = harmonic_test_solution(self.point_)
        for numCells in self.config_parser_.refinementLevels_:
            self.timer_.start_timer(f"refinement {numCells} x {numCells}")
            mesh = MeshObject(self.config_parser_, num_cells=(numCells, numCells))

            # evaluate the nodal interpolant, the way a discrete solution would be given
            uh = FieldArray(FieldNames.SOLUTION.value, DimType.SCALAR, mesh.get_num_nodes())
            uh.interpolate(harmonic_test_solution, mesh.get_nodes())

            result = stab_pointEval(mesh, uh, self.point_, self.quadRule_)
            stabError = abs(result.get_value() - exact) if result.succeeded() else np.nan
            if not result.succeeded():
                print(f"\t{result.get_message()}")
            self.rows_.append({
                "mesh_size": mesh.get_mesh_size(),
                "point_eval_error": pointEval(mesh),
                "stab_point_eval_error": stabError,
                "seconds": self.timer_.end_timer(),
            })
        return self.rows_

    def get_rows(self):
        return self.rows_

    def report(self):
        print(f"{'mesh size':>12} {'pointEval':>14} {'stab_pointEval':>16}")
        for row in self.rows_:
            print(f"{row['mesh_size']:12.6f} {row['point_eval_error']:14.6e} {row['stab_point_eval_error']:16.6e}")

    def plot(self, output_directory):
        """Write a log-log plot of both errors against the mesh size, returns the file path"""
        assert len(self.rows_) > 0, "Call run() before plot()"
        os.makedirs(output_directory, exist_ok=True)
        h = [row["mesh_size"] for row in self.rows_]
        fig, ax = plt.subplots()
        ax.loglog(h, [row["point_eval_error"] for row in self.rows_], "o-", label="pointEval")
        ax.loglog(h, [row["stab_point_eval_error"] for row in self.rows_], "s-", label="stab_pointEval")
        ax.set_xlabel("mesh size h")
        ax.set_ylabel("error")
        ax.legend()
        ax.grid(True, which="both")
        path = os.path.join(output_directory, "convergence.png")
        fig.savefig(path)
        plt.close(fig)
        print(f"Convergence plot written to {path}")
        return path
