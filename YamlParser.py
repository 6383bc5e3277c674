import yaml


class InputConfigParser:
    def __init__(self, file_path):
        self.filePath_ = file_path
        self.config_ = None
        self.xRange_ = None
        self.yRange_ = None
        self.numCellsY_ = None
        self.numCellsX_ = None
        self.evaluationPoint_ = [0.3, 0.4]
        self.quadraturePoints_ = 1
        self.refinementLevels_ = [4, 8, 16, 32]
        self.outputDirectory_ = None
        self.parse_mesh_parameters()
        self.parse_evaluation_settings()

    def load_config(self):
        try:
            with open(self.filePath_, 'r') as file:
                self.config_ = yaml.safe_load(file)
                print(f"Successfully loaded: {self.filePath_}")
        except FileNotFoundError:
            print(f"Error: The file '{self.filePath_}' was not found.")
            raise
        except yaml.YAMLError as exc:
            print(f"Error parsing YAML: {exc}")
            raise

    def parse_mesh_parameters(self):
        self.load_config()
        if self.config_ is None:
            raise ValueError("Configuration not loaded. Call load_config() first.")
        mesh_params = self.config_.get('mesh_parameters', {})
        print(f"MeshConfigParser successfully loaded: {self.filePath_}")
        self.xRange_ = mesh_params.get('x_range')
        self.yRange_ = mesh_params.get('y_range')
        self.numCellsX_ = mesh_params.get('num_cells_x')
        self.numCellsY_ = mesh_params.get('num_cells_y')

    def parse_evaluation_settings(self):
        self.load_config()
        if self.config_ is None:
            raise ValueError("Configuration not loaded. Call load_config() first.")

        evaluation_settings = self.config_.get('evaluation', {})
        self.evaluationPoint_ = evaluation_settings.get('point', self.evaluationPoint_)
        self.quadraturePoints_ = evaluation_settings.get('quadrature_points', self.quadraturePoints_)
        self.refinementLevels_ = evaluation_settings.get('refinement_levels', self.refinementLevels_)
        self.outputDirectory_ = evaluation_settings.get('output_directory')

        if len(self.evaluationPoint_) != 2:
            raise ValueError(f"Evaluation point must have 2 coordinates, got {self.evaluationPoint_}")
        if self.quadraturePoints_ not in (1, 3):
            raise ValueError(f"Unsupported number of quadrature points: {self.quadraturePoints_}. "
                             f"'quadrature_points' must be 1 or 3.")
        if any(int(level) < 1 for level in self.refinementLevels_):
            raise ValueError(f"Refinement levels must be positive cell counts, got {self.refinementLevels_}")

    def __repr__(self):
        return (
            f"InputConfigParser(\n"
            f"  filePath_='{self.filePath_}',\n"
            f"  xRange_={self.xRange_},\n"
            f"  yRange_={self.yRange_},\n"
            f"  numCellsX_={self.numCellsX_},\n"
            f"  numCellsY_={self.numCellsY_},\n"
            f"  evaluationPoint_={self.evaluationPoint_},\n"
            f"  quadraturePoints_={self.quadraturePoints_},\n"
            f"  refinementLevels_={self.refinementLevels_},\n"
            f"  outputDirectory_='{self.outputDirectory_}',\n"
            f")"
        )
