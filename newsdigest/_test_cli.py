"""Run the test suite via unittest discovery. Entry point for the newsdigest-test script."""

import sys
import unittest
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parents[1]
    tests_dir = project_root / "tests"
    if not tests_dir.is_dir():
        print(f"Tests directory not found: {tests_dir}", file=sys.stderr)
        sys.exit(1)
    suite = unittest.TestLoader().discover(str(tests_dir), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    sys.exit(0 if result.wasSuccessful() else 1)


if __name__ == "__main__":
    main()
