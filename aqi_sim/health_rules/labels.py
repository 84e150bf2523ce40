# File: aqi_sim/health_rules/labels.py

"""
Deterministic labeling rules for air quality samples.

An AQI level is derived from a weighted pollutant score, and a health risk
level is derived from the AQI level plus the sample's city type. Both
functions are pure; `label_sample` returns a new record with the two labels
attached.
"""

import logging
from dataclasses import replace
from enum import IntEnum

log = logging.getLogger(__name__)


class AQILevel(IntEnum):
    GOOD = 0
    MODERATE = 1
    UNHEALTHY = 2
    HAZARDOUS = 3

    @property
    def label(self):
        return _AQI_LEVEL_NAMES[self]


class HealthRisk(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self):
        return _HEALTH_RISK_NAMES[self]


_AQI_LEVEL_NAMES = {
    AQILevel.GOOD: "Good",
    AQILevel.MODERATE: "Moderate",
    AQILevel.UNHEALTHY: "Unhealthy",
    AQILevel.HAZARDOUS: "Hazardous",
}

_HEALTH_RISK_NAMES = {
    HealthRisk.LOW: "Low",
    HealthRisk.MEDIUM: "Medium",
    HealthRisk.HIGH: "High",
}

# --- Score Definition ---
# Weight applied to each pollutant concentration in the AQI score.
POLLUTANT_WEIGHTS = {
    "pm25": 0.3,
    "pm10": 0.2,
    "no2": 0.1,
    "o3": 0.05,
}

# Exclusive upper score bound of each level; anything at or above the last bound is Hazardous.
AQI_SCORE_BOUNDS = [
    (50, AQILevel.GOOD),
    (100, AQILevel.MODERATE),
    (200, AQILevel.UNHEALTHY),
]

URBAN = 1


def aqi_score(sample):
    """Weighted pollutant score: 0.3*PM2.5 + 0.2*PM10 + 0.1*NO2 + 0.05*O3."""
    return (POLLUTANT_WEIGHTS["pm25"] * sample.pm25
            + POLLUTANT_WEIGHTS["pm10"] * sample.pm10
            + POLLUTANT_WEIGHTS["no2"] * sample.no2
            + POLLUTANT_WEIGHTS["o3"] * sample.o3)


def aqi_level_from_score(score):
    """Maps a weighted score onto its AQI level (a non-decreasing step function)."""
    for upper, level in AQI_SCORE_BOUNDS:
        if score < upper:
            return level
    return AQILevel.HAZARDOUS


def aqi_level(sample):
    """Computes the AQI level of a sample from its pollutant readings.

    Args:
        sample (Sample): The record to classify.

    Returns:
        AQILevel: GOOD, MODERATE, UNHEALTHY or HAZARDOUS.
    """
    return aqi_level_from_score(aqi_score(sample))


def health_risk(sample, aqi_level):
    """Derives the health risk level from an AQI level and the sample's city type.

    Good maps to Low and Moderate to Medium regardless of city type. Unhealthy
    is High in urban areas; everything else falls through to the last branch,
    where Hazardous is always High and the remaining case (Unhealthy, rural)
    resolves to Medium.

    Args:
        sample (Sample): The record being labeled; only `city_type` is read.
        aqi_level (AQILevel | int): The sample's AQI level.

    Returns:
        HealthRisk: LOW, MEDIUM or HIGH.
    """
    aqi = AQILevel(aqi_level)
    urban = sample.city_type == URBAN
    if aqi == AQILevel.GOOD:
        return HealthRisk.LOW
    elif aqi == AQILevel.MODERATE:
        return HealthRisk.MEDIUM
    elif aqi == AQILevel.UNHEALTHY and urban:
        return HealthRisk.HIGH
    else:
        if aqi == AQILevel.HAZARDOUS:
            return HealthRisk.HIGH
        return HealthRisk.HIGH if urban else HealthRisk.MEDIUM


def label_sample(sample):
    """Returns a copy of `sample` with `aqi_level` and `health_risk` filled in."""
    score = aqi_score(sample)
    level = aqi_level_from_score(score)
    risk = health_risk(sample, level)
    log.debug(f"Labeled sample: score={score:.2f} level={level.label} risk={risk.label}")
    return replace(sample, aqi_level=level, health_risk=risk)
