# File: run_simulation.py
"""
Runs the simulator from a source checkout without installing the package.
"""

import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from aqi_sim.main import main

if __name__ == "__main__":
    sys.exit(main())
