"""Entry point for running with python -m treetextconf."""

import sys

from treetextconf.cli import main

if __name__ == "__main__":
    sys.exit(main())
