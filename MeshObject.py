import numpy as np
from YamlParser import InputConfigParser
from TriaElement import Edge, TriaCell

UNIT_RANGE = (0.0, 1.0)


class MeshObject:
    """
    Creates a structured triangulation of the unit square based on mesh configuration parameters.
    Each grid rectangle is split along its lower-left to upper-right diagonal into two triangles.
    """

    def __init__(self, config_parser, num_cells=None):
        """
        Initialize MeshObject with configuration parser.

        Args:
            config_parser (InputConfigParser): Parser containing mesh parameters
            num_cells (tuple): Optional (num_cells_x, num_cells_y) overriding the parser values
        """
        if not isinstance(config_parser, InputConfigParser):
            raise TypeError("config_parser must be an instance of InputConfigParser")

        self.config_parser_ = config_parser
        if num_cells is not None:
            self.numCellsX_, self.numCellsY_ = int(num_cells[0]), int(num_cells[1])
        else:
            self.numCellsX_ = config_parser.numCellsX_
            self.numCellsY_ = config_parser.numCellsY_
        self.x_coords_ = None
        self.y_coords_ = None
        self.nodes_ = None
        self.cells_ = None
        self.edges_ = None
        self.internal_edges_ = None
        self.boundary_edges_ = None

    def generate_grid(self):
        """
        Generate the grid nodes and the triangular cells.
        Nodes are numbered row-major: node (i, j) has id j * (num_cells_x + 1) + i.
        """
        # Ensure configuration is parsed
        if self.config_parser_.xRange_ is None:
            self.config_parser_.parse_mesh_parameters()

        # Validate required parameters
        if any(param is None for param in [
            self.config_parser_.xRange_,
            self.config_parser_.yRange_,
            self.numCellsX_,
            self.numCellsY_
        ]):
            raise ValueError("Missing required mesh parameters: xRange, yRange, numCellsX, or numCellsY")

        for name, rng in (("x_range", self.config_parser_.xRange_), ("y_range", self.config_parser_.yRange_)):
            if tuple(float(v) for v in rng) != UNIT_RANGE:
                raise ValueError(f"The domain is the unit square, {name} must be [0, 1], got {rng}")
        if self.numCellsX_ < 1 or self.numCellsY_ < 1:
            raise ValueError(f"Cell counts must be positive, got {self.numCellsX_} x {self.numCellsY_}")

        nx = self.numCellsX_
        ny = self.numCellsY_

        # Generate 1D coordinate arrays
        self.x_coords_ = np.linspace(UNIT_RANGE[0], UNIT_RANGE[1], nx + 1)
        self.y_coords_ = np.linspace(UNIT_RANGE[0], UNIT_RANGE[1], ny + 1)

        grid_x, grid_y = np.meshgrid(self.x_coords_, self.y_coords_, indexing='xy')
        self.nodes_ = np.column_stack((grid_x.ravel(), grid_y.ravel()))

        self.cells_ = []
        flat_id = 0
        for j in range(ny):
            for i in range(nx):
                n00 = self.node_id(i, j)
                n10 = self.node_id(i + 1, j)
                n11 = self.node_id(i + 1, j + 1)
                n01 = self.node_id(i, j + 1)
                for tri in ((n00, n10, n11), (n00, n11, n01)):
                    self.cells_.append(TriaCell(flat_id, tri, self.nodes_[list(tri)].T))
                    flat_id += 1

        print(f"Grid generated: {nx} x {ny} rectangles, {len(self.cells_)} triangles")

    def node_id(self, i, j):
        """Get the flattened node id of grid node (i, j)"""
        return j * (self.numCellsX_ + 1) + i

    def get_x_coordinates(self):
        """Get 1D array of x node coordinates"""
        if self.x_coords_ is None:
            self.generate_grid()
        return self.x_coords_

    def get_y_coordinates(self):
        """Get 1D array of y node coordinates"""
        if self.y_coords_ is None:
            self.generate_grid()
        return self.y_coords_

    def get_nodes(self):
        """
        Get the node coordinates.

        Returns:
            np.ndarray: (num_nodes, 2) array of node coordinates
        """
        if self.nodes_ is None:
            self.generate_grid()
        return self.nodes_

    def get_num_nodes(self):
        return len(self.get_nodes())

    def get_cells(self):
        """Get all triangular cells"""
        if self.cells_ is None:
            self.generate_grid()
        return self.cells_

    def get_num_cells(self):
        return len(self.get_cells())

    def get_cell_count(self):
        """Get the number of grid rectangles in x and y"""
        return self.numCellsX_, self.numCellsY_

    def generate_edges(self):
        """
        Generate all edges (internal and boundary) for the mesh.
        Boundary edges store the outward unit normal of the side they lie on.
        """
        if self.cells_ is None:
            self.generate_grid()

        nx = self.numCellsX_
        ny = self.numCellsY_

        self.edges_ = []
        self.internal_edges_ = []
        self.boundary_edges_ = []

        def add_edge(a, b, normal=None):
            edge = Edge(len(self.edges_), (a, b), self.nodes_[[a, b]].T, normal)
            self.edges_.append(edge)
            if edge.is_boundary_edge():
                self.boundary_edges_.append(edge)
            else:
                self.internal_edges_.append(edge)

        # Horizontal edges
        for j in range(ny + 1):
            for i in range(nx):
                if j == 0:
                    normal = (0.0, -1.0)  # Bottom boundary, pointing down (outward)
                elif j == ny:
                    normal = (0.0, 1.0)  # Top boundary, pointing up (outward)
                else:
                    normal = None
                add_edge(self.node_id(i, j), self.node_id(i + 1, j), normal)

        # Vertical edges
        for i in range(nx + 1):
            for j in range(ny):
                if i == 0:
                    normal = (-1.0, 0.0)  # Left boundary, pointing left (outward)
                elif i == nx:
                    normal = (1.0, 0.0)  # Right boundary, pointing right (outward)
                else:
                    normal = None
                add_edge(self.node_id(i, j), self.node_id(i, j + 1), normal)

        # Diagonals, always interior
        for j in range(ny):
            for i in range(nx):
                add_edge(self.node_id(i, j), self.node_id(i + 1, j + 1))

        print(f"Generated {len(self.edges_)} edges: "
              f"{len(self.internal_edges_)} internal, {len(self.boundary_edges_)} boundary")

    def get_edges(self):
        """Get all edges"""
        if self.edges_ is None:
            self.generate_edges()
        return self.edges_

    def get_internal_edges(self):
        """Get internal edges only"""
        if self.internal_edges_ is None:
            self.generate_edges()
        return self.internal_edges_

    def get_boundary_edges(self):
        """Get boundary edges only"""
        if self.boundary_edges_ is None:
            self.generate_edges()
        return self.boundary_edges_

    def get_mesh_size(self):
        """Get the mesh size, i.e. the maximal edge length"""
        return max(edge.volume() for edge in self.get_edges())

    def __repr__(self):
        """String representation of MeshObject"""
        num_cells = len(self.cells_) if self.cells_ is not None else "Not generated"
        num_edges = len(self.edges_) if self.edges_ is not None else 0
        return (
            f"MeshObject(\n"
            f"  Grid: {self.numCellsX_} x {self.numCellsY_},\n"
            f"  Triangles: {num_cells},\n"
            f"  Edges: {num_edges},\n"
            f"  X Range: {self.config_parser_.xRange_},\n"
            f"  Y Range: {self.config_parser_.yRange_}\n"
            f")"
        )
