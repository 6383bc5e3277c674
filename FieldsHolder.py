import numpy as np
from enum import Enum


MAX_DIM=2
class DimType(Enum):
    SCALAR = 0
    VECTOR = 1

class FieldNames(Enum):
    SOLUTION = "solution"
    GRAD_SOLUTION = "grad_solution"

class FieldArray:
    """
    Creates a nodal (linear Lagrange) field array based on type enum type SCALAR (solution) or VECTOR (gradient)
    """

    def __init__(self, name, fieldType, num_points):
        """
        Initialize field with name and type of field

        Args:
            name (str): Name of the field
            fieldType (DimType): Type of the field (SCALAR or VECTOR)
            num_points (int): Number of mesh nodes carrying a value
        """

        self.name_ = name
        self.fieldType_ = fieldType
        self.numComponents_ = 1 if fieldType == DimType.SCALAR else MAX_DIM
        self.data_ = np.zeros(num_points * self.numComponents_)

    def get_name(self):
        """Get the name of the field"""
        return self.name_

    def get_type(self):
        """Get the type of the field (DimType.SCALAR or DimType.VECTOR)"""
        return self.fieldType_

    def get_num_components(self):
        """Get the number of components in the field (1 for scalar, 2 for vector)"""
        return self.numComponents_

    def get_data(self):
        """Get the underlying data array"""
        return self.data_

    def initialize_constant(self,value):
        """Initialize the field data with a constant value"""
        self.data_.fill(value)

    def interpolate(self, function, nodes):
        """Set the nodal values to `function` evaluated at each node"""
        assert len(nodes) * self.numComponents_ == self.data_.shape[0], "Node count does not match the field size"
        for nodeID, coords in enumerate(nodes):
            value = function(coords)
            if self.numComponents_ == 1:
                self.data_[nodeID] = value
            else:
                for comp in range(MAX_DIM):
                    self.data_[nodeID*MAX_DIM + comp] = value[comp]
        return self

    def evaluate_on_cell(self, cell, ref_point):
        """Evaluate the field inside a triangle at reference coordinates (xi, eta)"""
        xi, eta = ref_point
        shapeValues = np.array([1.0 - xi - eta, xi, eta])
        nodeIDs = cell.get_node_ids()
        if self.numComponents_ == 1:
            return float(shapeValues @ self.data_[list(nodeIDs)])
        values = np.array([self.data_[nodeID*MAX_DIM:(nodeID + 1)*MAX_DIM] for nodeID in nodeIDs])
        return shapeValues @ values

    def __repr__(self):
        return f"FieldArray(name='{self.name_}', type='{self.get_type()}', num_components={self.numComponents_})\nData: {self.data_}"
