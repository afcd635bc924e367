"""
Render a wireframe case defined by a YAML config file.
"""

import sys
import argparse
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from core.io import Case, CaseLoader
from core.logging_config import set_log_level, setup_logging
from visualization import InteractiveViewer, Visualizer, WireframePlotter

logger = logging.getLogger("core.cli")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Wireframe mesh viewer")
    parser.add_argument("case", nargs='?', default=None,
                        help="YAML case file or case directory (default: built-in cube)")
    parser.add_argument("--model", default=None,
                        help="Mesh file to load instead of the case's model_file")
    parser.add_argument("--rot-y", type=float, default=None,
                        help="Rotation about the y-axis in degrees")
    parser.add_argument("--rot-x", type=float, default=None,
                        help="Rotation about the x-axis in degrees")
    parser.add_argument("--distance", type=float, default=None,
                        help="Camera distance (> 0)")
    parser.add_argument("--save", default=None,
                        help="File name for the rendered frame (default: from config)")
    parser.add_argument("--interactive", action="store_true",
                        help="Open the slider viewer")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level (default: from config)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def load_case(case_arg):
    """Load a case from a YAML file, a case directory, or defaults."""
    if case_arg is None:
        return CaseLoader.default_case()

    case_path = Path(case_arg).resolve()
    if case_path.is_dir():
        return CaseLoader.load_case(case_path)

    mesh, config, used_fallback = CaseLoader.load(case_path)
    return Case(mesh=mesh, config=config, case_dir=case_path.parent,
                used_fallback=used_fallback)


def main(argv=None):
    args = parse_args(argv)

    # Command line settings first, so case and mesh loading is logged too
    log_level = args.log_level or "INFO"
    setup_logging(log_level, args.log_file)

    try:
        case = load_case(args.case)
    except (FileNotFoundError, ValidationError, ValueError, yaml.YAMLError) as e:
        logger.error("Error loading case: %s", e)
        return 1

    # Case settings apply where the command line gave none
    case_log = case.config.logging
    if args.log_file is None and case_log.file is not None:
        setup_logging(args.log_level or case_log.level, case_log.file)
    elif args.log_level is None and case_log.level != log_level:
        set_log_level(case_log.level)

    logger.info("Case '%s' loaded: %d triangles%s", case.name, case.num_triangles,
                " (fallback cube)" if case.used_fallback else "")

    if args.model is not None:
        case.mesh, case.used_fallback = CaseLoader.load_mesh(
            args.model, normalize=case.config.normalize)

    camera = case.camera
    try:
        if args.rot_y is not None:
            camera = camera.with_rotation_y(args.rot_y)
        if args.rot_x is not None:
            camera = camera.with_rotation_x(args.rot_x)
        if args.distance is not None:
            camera = camera.with_distance(args.distance)
    except ValueError as e:
        logger.error("Invalid camera: %s", e)
        return 1

    if args.interactive or case.config.visualization.interactive:
        viewer = InteractiveViewer.from_case(case, camera=camera)
        viewer.show()
        return 0

    frame = case.render(camera)
    logger.info("Frame: %d triangles drawn, %d skipped", frame.num_triangles, frame.skipped)

    output = case.config.output
    viz = Visualizer(WireframePlotter.from_config(case.config),
                     output_dir=case.output_dir,
                     protect_overwrite=output.protect_overwrite)
    viz.plot_frame(frame)
    viz.finalize(save=args.save or output.filename)

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
