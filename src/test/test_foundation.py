"""
Demo: Foundation smoke test.

Run this to verify the geometry pipeline works end to end.
"""

import sys
from pathlib import Path

# Add src to path (go up to src directory)
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.io import CaseLoader, generate_cube, parse_mesh
from core.geometry import compute_bounds, normalize_model
from pipeline import CameraState, WireframePipeline


def test_basic_geometry():
    """Test the fallback cube and its bounds."""
    print("=" * 60)
    print("TEST 1: Fallback Cube")
    print("=" * 60)

    cube = generate_cube()
    bounds = compute_bounds(cube)

    print(f"✓ Created cube mesh")
    print(f"  Triangles: {cube.num_triangles}")
    print(f"  {bounds}")
    print(f"  Largest extent: {bounds.max_size}")
    print()

    assert cube.num_triangles == 12


def test_parse_and_normalize():
    """Test parsing mesh text and rescaling it."""
    print("=" * 60)
    print("TEST 2: Parse + Normalize")
    print("=" * 60)

    text = "v 10 10 10\nv 14 10 10\nv 10 12 10\nv 10 10 11\nf 1 2 3\nf 1 2 4\n"
    mesh = parse_mesh(text)
    normalized = normalize_model(mesh)
    bounds = compute_bounds(normalized)

    print(f"✓ Parsed {mesh.num_triangles} triangles")
    print(f"  Original: {compute_bounds(mesh)}")
    print(f"  Normalized: {bounds}")
    print()

    assert abs(bounds.max_size - 2.0) < 1e-10


def test_render_frame():
    """Test one full redraw."""
    print("=" * 60)
    print("TEST 3: Render Frame")
    print("=" * 60)

    pipeline = WireframePipeline()
    camera = CameraState()
    frame = pipeline.render(generate_cube(), camera)

    print(f"✓ Rendered frame for {camera}")
    print(f"  Drawn: {frame.num_triangles}, skipped: {frame.skipped}")
    print(f"  Farthest triangle: #{frame.triangles[0].index} "
          f"(depth {frame.triangles[0].depth:.5f})")
    print(f"  Nearest triangle:  #{frame.triangles[-1].index} "
          f"(depth {frame.triangles[-1].depth:.5f})")
    print()

    assert frame.num_triangles == 12


def test_case_loader():
    """Test loading from a case directory."""
    print("=" * 60)
    print("TEST 4: Case Loader (YAML)")
    print("=" * 60)

    case_dir = Path(__file__).parent.parent.parent / "cases" / "pyramid"

    if not case_dir.exists():
        print(f"⚠ Case directory not found: {case_dir}")
        print()
        return

    case = CaseLoader.load_case(case_dir)
    frame = case.render()

    print(f"✓ Loaded case: {case.name}")
    print(f"  Description: {case.description}")
    print(f"  Triangles: {case.num_triangles}")
    print(f"  Fallback cube: {case.used_fallback}")
    print(f"  Camera: {case.camera}")
    print(f"  Drawn: {frame.num_triangles}, skipped: {frame.skipped}")
    print()


def main():
    """Run all tests."""
    print("\n")
    print("╔" + "=" * 58 + "╗")
    print("║" + " " * 58 + "║")
    print("║" + "  WIREFRAME VIEWER - FOUNDATION SMOKE TEST  ".center(58) + "║")
    print("║" + " " * 58 + "║")
    print("╚" + "=" * 58 + "╝")
    print("\n")

    try:
        test_basic_geometry()
        test_parse_and_normalize()
        test_render_frame()
        test_case_loader()

        print("=" * 60)
        print("✓ ALL TESTS PASSED")
        print("=" * 60)

    except (AssertionError, ValueError, OSError) as e:
        print(f"\n✗ TEST FAILED: {e}\n")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
