import argparse
import sys
from YamlParser import InputConfigParser
from MeshObject import MeshObject
from Operations import ConvergenceStudy, stab_pointEval
from BoundaryPotentials import harmonic_test_solution
from QuadratureRule import make_tria_qr

def main():
    parser = argparse.ArgumentParser(description="Stable point evaluation of a harmonic function on the unit square.")
    parser.add_argument('-i', '--input', type=str, required=True, help="Path to the input YAML file")
    parser.add_argument('--plot', action='store_true', help="Write a convergence plot to the configured output directory")
    args = parser.parse_args()
    try:
        config = InputConfigParser(args.input)
    except Exception as e:
        print(f"An error occurred while trying to parse the input file: {e}")
        sys.exit(1)

    if config.numCellsX_ is not None and config.numCellsY_ is not None:
        mesh = MeshObject(config)
        result = stab_pointEval(mesh, harmonic_test_solution, config.evaluationPoint_, make_tria_qr(config.quadraturePoints_))
        if not result.succeeded():
            print(result.get_message())
            sys.exit(2)
        print(f"u{tuple(config.evaluationPoint_)} ~ {result.get_value():.10f} "
              f"(exact {harmonic_test_solution(config.evaluationPoint_):.10f})")

    study = ConvergenceStudy(config)
    study.run()
    study.report()
    if args.plot:
        study.plot(config.outputDirectory_ or "./output")

if __name__ == "__main__":
    main()
