#!/usr/bin/env python3
"""WordPress Beta/RC Tester Entry Point"""

import sys

from beta_tester.cli import run

if __name__ == "__main__":
    sys.dont_write_bytecode = True
    sys.exit(run())
