#!/usr/bin/env python3
"""
Demo: Turntable sheet

Loads a case and renders the mesh from evenly spaced y rotations.
Usage:
    python demo_turntable.py <case_dir> [--steps N] [--show] [--protect]

Example:
    python demo_turntable.py ../cases/pyramid --steps 6
    python demo_turntable.py ../cases/missing_model --show
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.io import CaseLoader
from visualization import Visualizer, WireframePlotter


def main():
    parser = argparse.ArgumentParser(description="Render a turntable sheet from a case")
    parser.add_argument("case_dir", type=str, help="Path to case directory (contains case.yaml)")
    parser.add_argument("--steps", type=int, default=4, help="Number of views")
    parser.add_argument("--cols", type=int, default=None, help="Views per row")
    parser.add_argument("--show", action="store_true", help="Display plot interactively")
    parser.add_argument("--protect", action="store_true", help="Save to timestamped subfolder")
    args = parser.parse_args()

    case_dir = Path(args.case_dir).resolve()
    case = CaseLoader.load_case(case_dir)

    print(f"Loaded: {case.name}")
    print(f"  Triangles: {case.num_triangles}")
    print(f"  Fallback cube: {case.used_fallback}")

    viz = Visualizer(WireframePlotter.from_config(case.config),
                     output_dir=case.output_dir, protect_overwrite=args.protect)
    frames = viz.plot_turntable(case.pipeline, case.mesh, case.camera,
                                steps=args.steps, cols=args.cols)

    for frame in frames:
        print(f"  rotY={frame.camera.rotation_y_deg:7.2f}: "
              f"{frame.num_triangles} drawn, {frame.skipped} skipped")

    viz.finalize(save="turntable.png", show=args.show)

    print("Done.")


if __name__ == "__main__":
    main()
