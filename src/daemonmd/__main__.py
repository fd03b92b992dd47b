"""Module entry point for running with python -m daemonmd."""

import sys

from daemonmd.cli import main

if __name__ == "__main__":
    sys.exit(main())
