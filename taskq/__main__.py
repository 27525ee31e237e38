"""taskq entry point

Usage:
    python -m taskq < script.txt
"""

from taskq.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
