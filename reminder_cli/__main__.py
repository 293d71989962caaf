"""Entry point for running the reminder tracker as a module."""

import sys

from reminder_cli.app import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
