# File: aqi_sim/health_rules/interpreter.py

"""
Breaks a sample's AQI score down into per-pollutant contributions.

Used by the report to tell the user which pollutant drives the score of the
interactive sample.
"""

import logging

from aqi_sim.health_rules.labels import POLLUTANT_WEIGHTS

log = logging.getLogger(__name__)

POLLUTANT_DISPLAY_NAMES = {
    "pm25": "PM2.5",
    "pm10": "PM10",
    "no2": "NO2",
    "o3": "O3",
}


def pollutant_contributions(sample):
    """Returns each pollutant's weighted contribution to the AQI score.

    Args:
        sample (Sample): The record to analyse.

    Returns:
        list[tuple[str, float]]: (display name, contribution) pairs, largest
                                 contribution first. Ties keep weight order.
    """
    contributions = []
    for field, weight in POLLUTANT_WEIGHTS.items():
        value = weight * getattr(sample, field)
        log.debug(f"{POLLUTANT_DISPLAY_NAMES[field]} contributes {value:.2f} ({weight} x {getattr(sample, field)})")
        contributions.append((POLLUTANT_DISPLAY_NAMES[field], value))
    return sorted(contributions, key=lambda item: item[1], reverse=True)


def dominant_pollutant(sample):
    """Returns the (name, contribution) pair with the largest share of the score."""
    return pollutant_contributions(sample)[0]
