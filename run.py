#!/usr/bin/env python3
"""Entry point for running the reminder tracker from a checkout."""

import sys

from reminder_cli.app import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
