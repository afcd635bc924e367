#!/usr/bin/env python3
"""
Demo: Wireframe frame

Loads a case and renders one frame, or opens the slider viewer.
Usage:
    python demo_wireframe.py <case_dir> [--show] [--save] [--protect] [--interactive]

Example:
    python demo_wireframe.py ../cases/pyramid --save
    python demo_wireframe.py ../cases/pyramid --interactive
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.io import CaseLoader
from visualization import InteractiveViewer, Visualizer, WireframePlotter


def main():
    parser = argparse.ArgumentParser(description="Render a wireframe frame from a case")
    parser.add_argument("case_dir", type=str, help="Path to case directory (contains case.yaml)")
    parser.add_argument("--show", action="store_true", help="Display plot interactively")
    parser.add_argument("--save", action="store_true", help="Save plot to the case output directory")
    parser.add_argument("--protect", action="store_true", help="Save to timestamped subfolder")
    parser.add_argument("--interactive", action="store_true", help="Open the slider viewer")
    args = parser.parse_args()

    case_dir = Path(args.case_dir).resolve()
    case = CaseLoader.load_case(case_dir)

    print(f"Loaded: {case.name}")
    print(f"  Triangles: {case.num_triangles}")
    print(f"  Fallback cube: {case.used_fallback}")
    print(f"  Camera: {case.camera}")

    if args.interactive:
        InteractiveViewer.from_case(case).show()
        return

    frame = case.render()
    print(f"  Drawn: {frame.num_triangles}, skipped: {frame.skipped}")

    viz = Visualizer(WireframePlotter.from_config(case.config),
                     output_dir=case.output_dir if args.save else None,
                     protect_overwrite=args.protect)
    viz.plot_frame(frame)
    viz.finalize(save=case.config.output.filename if args.save else None, show=args.show)

    print("Done.")


if __name__ == "__main__":
    main()
