"""Local Entry Point - Root Module.

Runs the dashboard core with a log-based view:

    python main.py
"""

import sys

from quakeboard.main import main


if __name__ == "__main__":
    sys.exit(main())
