# main.py
"""
Main entry point for the freecam viewer.

    python main.py [config.json]
"""
import sys

from freecam.core.safe_main import run_viewer

if __name__ == '__main__':
    raise SystemExit(run_viewer(sys.argv[1] if len(sys.argv) > 1 else None))
