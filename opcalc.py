#!/usr/bin/env python3
"""
opcalc: operator-first interactive calculator

Main entry point for the opcalc application.
This file serves as a thin wrapper that delegates all functionality
to the opcalc_pkg package.

Usage:
    python opcalc.py                        # Interactive session
    python opcalc.py --log-level DEBUG      # Session with evaluation logging
    python opcalc.py --version              # Show version
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for opcalc.

    Delegates all functionality to the opcalc_pkg.cli module,
    which handles argument parsing, the interactive loop and output.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from opcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import opcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
