#!/usr/bin/env python3
"""
Test runner script for grunge.

Shortcuts for running the different test suites with pytest.
"""
import argparse
import subprocess
import sys


SUITES = {
    "imports": ("tests/test_imports.py", "Import tests"),
    "unit": ("tests/unit/", "Unit tests"),
    "integration": ("tests/integration/", "Integration tests"),
}


def run_command(cmd, description=None):
    """Run a command and return True on success."""
    if description:
        print(f"→ {description}")
    result = subprocess.run(cmd, shell=True)
    return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="grunge test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --unit             # Run only unit tests
  python run_tests.py --all              # Run every suite in turn
  python run_tests.py --fast --coverage  # Skip slow tests, report coverage
        """
    )
    for name, (_, description) in SUITES.items():
        parser.add_argument(f"--{name}", action="store_true", help=f"Run {description.lower()} only")
    parser.add_argument("--all", action="store_true", help="Run all suites")
    parser.add_argument("--fast", action="store_true", help="Exclude tests marked slow")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--coverage", action="store_true", help="Run with coverage report")
    args = parser.parse_args()

    base_cmd = "PYTHONPATH=. python -m pytest"
    base_cmd += " -v" if args.verbose else " -q"
    if args.coverage:
        base_cmd += " --cov=grunge --cov-report=term"
    if args.fast:
        base_cmd += " -m 'not slow'"

    selected = [name for name in SUITES if getattr(args, name)]
    if args.all:
        selected = list(SUITES)

    if selected:
        success = all([run_command(f"{base_cmd} {SUITES[name][0]}", SUITES[name][1]) for name in selected])
    else:
        success = run_command(f"{base_cmd} tests/", "Running full test suite")

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
