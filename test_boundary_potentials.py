import unittest
import tempfile
import os
import yaml
import numpy as np
from YamlParser import InputConfigParser
from MeshObject import MeshObject
from FundamentalSolution import SingularEvaluationError
from BoundaryPotentials import PSL, PDL, pointEval, square_outward_normal, harmonic_test_solution, harmonic_test_gradient


class TestBoundaryPotentials(unittest.TestCase):
	def setUp(self):
		self.tmpdir = tempfile.mkdtemp()
		cfg = {
			'mesh_parameters': {
				'x_range': [0, 1],
				'y_range': [0, 1],
				'num_cells_x': 4,
				'num_cells_y': 4
			}
		}
		path = os.path.join(self.tmpdir, 'mesh.yaml')
		with open(path, 'w') as f:
			yaml.safe_dump(cfg, f)
		self.parser = InputConfigParser(path)
		self.x = np.array([0.3, 0.4])

	def tearDown(self):
		for f in os.listdir(self.tmpdir):
			os.remove(os.path.join(self.tmpdir, f))
		os.rmdir(self.tmpdir)

	def test_linearity(self):
		mesh = MeshObject(self.parser, num_cells=(8, 8))
		v1 = lambda y: y[0] * y[1]
		v2 = lambda y: np.cos(3.0 * y[1])
		alpha, beta = 2.0, -3.5
		combined = lambda y: alpha * v1(y) + beta * v2(y)
		for potential in (PSL, PDL):
			expected = alpha * potential(mesh, v1, self.x) + beta * potential(mesh, v2, self.x)
			self.assertAlmostEqual(potential(mesh, combined, self.x), expected, places=12)

	def test_single_layer_of_constant_is_sum_of_kernels(self):
		mesh = MeshObject(self.parser)
		h = 0.25
		expected = 0.0
		for t in range(4):
			m = (t + 0.5) * h
			for y in ([m, 0.0], [1.0, m], [m, 1.0], [0.0, m]):
				expected += -np.log(np.linalg.norm(self.x - np.array(y))) / (2.0 * np.pi) * h
		self.assertAlmostEqual(PSL(mesh, lambda y: 1.0, self.x), expected, places=12)

	def test_double_layer_of_one_is_minus_one(self):
		# Gauss' law: the double layer of the constant 1 equals -1 inside the domain
		previous = None
		for n in (4, 8, 16):
			mesh = MeshObject(self.parser, num_cells=(n, n))
			error = abs(PDL(mesh, lambda y: 1.0, self.x) + 1.0)
			if previous is not None:
				self.assertLess(error, previous / 3.5)
			previous = error
		self.assertLess(previous, 5e-4)

	def test_square_outward_normal(self):
		np.testing.assert_array_equal(square_outward_normal([0.3, 0.0]), [0.0, -1.0])
		np.testing.assert_array_equal(square_outward_normal([1.0, 0.6]), [1.0, 0.0])
		np.testing.assert_array_equal(square_outward_normal([0.7, 1.0]), [0.0, 1.0])
		np.testing.assert_array_equal(square_outward_normal([0.0, 0.2]), [-1.0, 0.0])

	def test_square_outward_normal_on_diagonals(self):
		# first matching sector in the order bottom, right, top, left
		np.testing.assert_array_equal(square_outward_normal([0.0, 0.0]), [0.0, -1.0])
		np.testing.assert_array_equal(square_outward_normal([1.0, 0.0]), [0.0, -1.0])
		np.testing.assert_array_equal(square_outward_normal([1.0, 1.0]), [1.0, 0.0])
		np.testing.assert_array_equal(square_outward_normal([0.0, 1.0]), [0.0, 1.0])
		np.testing.assert_array_equal(square_outward_normal([0.5, 0.5]), [0.0, -1.0])

	def test_stored_normals_agree_with_sectors(self):
		mesh = MeshObject(self.parser, num_cells=(5, 3))
		for edge in mesh.get_boundary_edges():
			np.testing.assert_array_equal(edge.get_normal_vector(), square_outward_normal(edge.midpoint()))

	def test_target_on_boundary_midpoint_raises(self):
		mesh = MeshObject(self.parser)
		with self.assertRaises(SingularEvaluationError):
			PSL(mesh, lambda y: 1.0, [0.125, 0.0])
		with self.assertRaises(SingularEvaluationError):
			PDL(mesh, lambda y: 1.0, [1.0, 0.375])

	def test_harmonic_test_solution(self):
		y = np.array([0.2, 0.7])
		self.assertAlmostEqual(harmonic_test_solution(y), 0.5 * np.log(1.2**2 + 0.7**2), places=14)
		np.testing.assert_allclose(harmonic_test_gradient(y), np.array([1.2, 0.7]) / (1.2**2 + 0.7**2), rtol=1e-14)

	def test_point_eval_convergence(self):
		errors = [pointEval(MeshObject(self.parser, num_cells=(n, n))) for n in (4, 8, 16)]
		# midpoint rule: halving h divides the error by about four
		self.assertLess(errors[1], errors[0] / 3.5)
		self.assertLess(errors[2], errors[1] / 3.5)
		self.assertLess(errors[0], 5e-3)
		self.assertLess(errors[2], 2e-4)

	def test_point_eval_rejects_other_meshes(self):
		with self.assertRaises(TypeError):
			pointEval([])

	def test_repeated_calls_identical(self):
		mesh = MeshObject(self.parser)
		self.assertEqual(pointEval(mesh), pointEval(mesh))
		self.assertEqual(PDL(mesh, harmonic_test_solution, self.x), PDL(mesh, harmonic_test_solution, self.x))


if __name__ == '__main__':
	unittest.main()
