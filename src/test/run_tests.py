"""
Run the smoke test, then the full pytest suite.

Execute from project root: python -m pytest src/test/
Or run this file directly: python src/test/run_tests.py [pytest args]
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from test_foundation import main as run_foundation_tests

if __name__ == "__main__":
    run_foundation_tests()
    sys.exit(pytest.main([str(Path(__file__).parent)] + sys.argv[1:]))
