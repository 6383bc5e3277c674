import numpy as np
from enum import Enum


class RefEl(Enum):
    SEGMENT = "segment"
    TRIA = "tria"
    QUAD = "quad"


class Edge:
    """
    Represents an edge of a triangular mesh.
    Boundary edges carry their outward unit normal so that boundary integrals
    never have to re-derive it from the domain shape.
    """

    def __init__(self, edge_id, node_ids, corners, normal_vector=None):
        """
        Initialize an Edge.

        Args:
            edge_id (int): Unique identifier for the edge
            node_ids (tuple): Global ids of the two end nodes
            corners (array-like): 2x2 array, one end point per column
            normal_vector (tuple): Outward unit normal (nx, ny), None for internal edges
        """
        self.id_ = edge_id
        self.nodeIds_ = tuple(node_ids)
        self.corners_ = np.array(corners, dtype=float)
        self.normalVector_ = None if normal_vector is None else np.array(normal_vector, dtype=float)
        self.isBoundary_ = normal_vector is not None

    def get_id(self):
        return self.id_

    def get_node_ids(self):
        return self.nodeIds_

    def corners(self):
        """Get the end points, one per column"""
        return self.corners_

    def midpoint(self):
        """Get the edge midpoint (x, y)"""
        return 0.5 * (self.corners_[:, 0] + self.corners_[:, 1])

    def volume(self):
        """Get the edge length"""
        return float(np.linalg.norm(self.corners_[:, 1] - self.corners_[:, 0]))

    def get_normal_vector(self):
        """Get outward normal vector"""
        return self.normalVector_

    def is_boundary_edge(self):
        """Check if this is a boundary edge"""
        return self.isBoundary_

    def ref_el(self):
        return RefEl.SEGMENT

    def __repr__(self):
        return (
            f"Edge(id={self.id_}, "
            f"nodes={self.nodeIds_}, "
            f"midpoint={tuple(self.midpoint())}, "
            f"normal={None if self.normalVector_ is None else tuple(self.normalVector_)}, "
            f"boundary={self.isBoundary_})"
        )


class TriaCell:
    """
    Represents a linear triangle.

    The geometry is the affine map from the reference triangle with vertices
    (0,0), (1,0), (0,1):

        x(xi, eta) = a0 + (a1 - a0) * xi + (a2 - a0) * eta
    """

    def __init__(self, flat_id, node_ids, corners):
        """
        Initialize a TriaCell.

        Args:
            flat_id (int): Flattened cell ID
            node_ids (tuple): Global ids of the three vertices, counter-clockwise
            corners (array-like): 2x3 array, one vertex per column
        """
        self.flatId_ = int(flat_id)
        self.nodeIds_ = tuple(node_ids)
        self.corners_ = np.array(corners, dtype=float)
        if self.corners_.shape != (2, 3):
            raise ValueError(f"A triangle needs a 2x3 corner array, got shape {self.corners_.shape}")
        self.jacobian_ = np.column_stack((self.corners_[:, 1] - self.corners_[:, 0],
                                          self.corners_[:, 2] - self.corners_[:, 0]))
        self.detJ_ = abs(float(np.linalg.det(self.jacobian_)))

    def get_flat_id(self):
        return self.flatId_

    def get_node_ids(self):
        return self.nodeIds_

    def ref_el(self):
        return RefEl.TRIA

    def corners(self):
        """Get the vertices, one per column"""
        return self.corners_

    def global_coords(self, ref_points):
        """
        Map reference points to global coordinates.

        Args:
            ref_points (np.ndarray): P x 2 array of reference coordinates (xi, eta)

        Returns:
            np.ndarray: P x 2 array of global coordinates
        """
        ref_points = np.atleast_2d(ref_points)
        return self.corners_[:, 0] + ref_points @ self.jacobian_.T

    def integration_element(self, ref_points):
        """Get |det J| at each reference point (constant for an affine triangle)"""
        ref_points = np.atleast_2d(ref_points)
        return np.full(ref_points.shape[0], self.detJ_)

    def volume(self):
        """Get the cell area"""
        return 0.5 * self.detJ_

    def centroid(self):
        return self.corners_.mean(axis=1)

    def __repr__(self):
        return (
            f"TriaCell(flatId={self.flatId_}, nodes={self.nodeIds_}, "
            f"area={self.volume()}, centroid={tuple(self.centroid())})"
        )
