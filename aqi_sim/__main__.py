# File: aqi_sim/__main__.py
"""Allows `python -m aqi_sim`."""

from aqi_sim.main import main

raise SystemExit(main())
