#!/usr/bin/env python3
"""Main entry point for the single-server queueing simulation package."""

import sys

from mm1_sim.scripts.run_simulation import main

if __name__ == '__main__':
    sys.exit(main())
