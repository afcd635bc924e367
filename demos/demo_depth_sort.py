#!/usr/bin/env python3
"""
Demo: Painter's-algorithm ordering

Renders the built-in cube and prints the draw order of its triangles,
farthest first, for a few camera positions.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.io import generate_cube
from pipeline import CameraState, WireframePipeline


def main():
    mesh = generate_cube()
    pipeline = WireframePipeline()

    cameras = [
        CameraState(rotation_y_deg=0.0, rotation_x_deg=0.0, distance=4.0),
        CameraState(rotation_y_deg=45.0, rotation_x_deg=0.0, distance=4.0),
        CameraState(rotation_y_deg=45.0, rotation_x_deg=30.0, distance=2.5),
    ]

    for camera in cameras:
        frame = pipeline.render(mesh, camera)
        print("=" * 60)
        print(f"rotY={camera.rotation_y_deg}, rotX={camera.rotation_x_deg}, "
              f"distance={camera.distance}")
        print("=" * 60)
        for order, tri in enumerate(frame.triangles):
            pts = ", ".join(f"({p.x:6.1f}, {p.y:6.1f})" for p in tri.points)
            print(f"  {order:2d}: triangle {tri.index:2d}  depth={tri.depth:.5f}  {pts}")
        print(f"  skipped: {frame.skipped}")
        print()


if __name__ == "__main__":
    main()
