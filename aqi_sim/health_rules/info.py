# File: aqi_sim/health_rules/info.py

"""
Defines the descriptive AQI scale used by the simulator's rule set.

Each AQI level is paired with the weighted-score range that produces it and a
short description of its health implications. Ranges and the score formula
are rendered from `labels.AQI_SCORE_BOUNDS` and `labels.POLLUTANT_WEIGHTS`.
"""

import logging

import pandas as pd

from aqi_sim.health_rules.interpreter import POLLUTANT_DISPLAY_NAMES
from aqi_sim.health_rules.labels import AQILevel, HealthRisk, AQI_SCORE_BOUNDS, POLLUTANT_WEIGHTS

log = logging.getLogger(__name__)


def _score_formula():
    return " + ".join(f"{weight:g}*{POLLUTANT_DISPLAY_NAMES[field]}"
                      for field, weight in POLLUTANT_WEIGHTS.items())


def _score_ranges():
    """Maps each level to its score range string, e.g. '50-100' or '200+'."""
    ranges = {}
    lower = 0
    for upper, level in AQI_SCORE_BOUNDS:
        ranges[level] = f"{lower:g}-{upper:g}"
        lower = upper
    ranges[AQILevel.HAZARDOUS] = f"{lower:g}+"
    return ranges


# --- AQI Definition ---
AQI_DEFINITION = f"""
The simulated Air Quality Index is a weighted score of four pollutants
({_score_formula()}). It is bucketed into four levels,
and the level is combined with the city type to estimate a health risk.
"""

# --- AQI Scale and Health Implications ---
_IMPLICATIONS = {
    AQILevel.GOOD: "Air quality is satisfactory and poses little or no risk.",
    AQILevel.MODERATE: "Acceptable air quality; unusually sensitive people may notice minor symptoms.",
    AQILevel.UNHEALTHY: "Sensitive groups may experience health effects; urban exposure raises the risk.",
    AQILevel.HAZARDOUS: "Health warnings of emergency conditions; everyone is likely to be affected.",
}
_RANGES = _score_ranges()
AQI_SCALE = [
    {"level": level, "range": _RANGES[level], "implications": _IMPLICATIONS[level]}
    for level in AQILevel
]

HEALTH_RISK_ADVICE = {
    HealthRisk.LOW: "No precautions needed.",
    HealthRisk.MEDIUM: "Limit prolonged outdoor exertion if you are sensitive to air pollution.",
    HealthRisk.HIGH: "Avoid outdoor activity and keep windows closed where possible.",
}


def get_aqi_info(level):
    """
    Finds the scale entry for an AQI level.

    Args:
        level (AQILevel | int | None): The AQI level ordinal to look up.

    Returns:
        dict | None: The matching entry ('level', 'range', 'implications'),
                     or None for missing or out-of-range input.
    """
    if level is None or (isinstance(level, float) and pd.isna(level)):
        log.warning("No AQI level supplied. Returning None.")
        return None
    try:
        level = AQILevel(int(level))
    except (TypeError, ValueError):
        log.warning(f"Invalid AQI level received: {level!r}. Returning None.")
        return None
    for entry in AQI_SCALE:
        if entry["level"] == level:
            return entry
    return None


def get_risk_advice(risk):
    """Returns the advice line for a health risk level."""
    return HEALTH_RISK_ADVICE[HealthRisk(risk)]
