#!/usr/bin/env python
"""
Convenience launcher for demos.

Run specific demo:
  python run_demo.py wireframe
  python run_demo.py turntable
  python run_demo.py depth
  python run_demo.py foundation

Or run from demos folder:
  python demos/demo_turntable.py cases/pyramid
"""

import sys
from pathlib import Path

DEMO_DIR = Path(__file__).parent / "demos"

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

def main():
    if len(sys.argv) < 2:
        print("Available demos:")
        print("  python run_demo.py wireframe [case_dir]")
        print("  python run_demo.py turntable [case_dir]")
        print("  python run_demo.py depth")
        print("  python run_demo.py foundation")
        print("\nOr run directly:")
        print("  python demos/demo_turntable.py cases/pyramid")
        print("  python src/test/test_foundation.py")
        sys.exit(1)

    demo = sys.argv[1].lower()
    demo_args = sys.argv[2:]

    if demo == "wireframe":
        demo_file = DEMO_DIR / "demo_wireframe.py"
        if not demo_args:
            demo_args = [str(Path(__file__).parent / "cases" / "pyramid"), "--show"]
    elif demo == "turntable":
        demo_file = DEMO_DIR / "demo_turntable.py"
        if not demo_args:
            demo_args = [str(Path(__file__).parent / "cases" / "pyramid")]
    elif demo == "depth":
        demo_file = DEMO_DIR / "demo_depth_sort.py"
    elif demo == "foundation":
        demo_file = Path(__file__).parent / "src" / "test" / "test_foundation.py"
    else:
        print(f"Unknown demo: {demo}")
        sys.exit(1)

    if not demo_file.exists():
        print(f"Demo file not found: {demo_file}")
        sys.exit(1)

    # Execute the demo with its own argv
    sys.argv = [str(demo_file)] + demo_args
    with open(demo_file) as f:
        code = f.read()

    exec(code, {"__name__": "__main__", "__file__": str(demo_file)})

if __name__ == "__main__":
    main()
