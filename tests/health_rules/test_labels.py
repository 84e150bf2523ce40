# File: tests/health_rules/test_labels.py

"""
Unit tests for the labeling rules in `aqi_sim/health_rules/labels.py`.
"""
import pytest
import sys
import os

# --- Setup Project Root Path ---
TEST_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(TEST_DIR, '..', '..'))
if PROJECT_ROOT not in sys.path:
     sys.path.insert(0, PROJECT_ROOT)

from aqi_sim.data.sample import Sample
from aqi_sim.health_rules.labels import (
    AQILevel, HealthRisk, aqi_score, aqi_level, aqi_level_from_score, health_risk, label_sample
)


def make_sample(pm25=10.0, pm10=10.0, no2=10.0, o3=10.0, city_type=1):
    """Builds a sample where only the scored fields and city type matter."""
    return Sample(temperature=25.0, humidity=50.0, co2=400.0, pm25=pm25, pm10=pm10,
                  no2=no2, o3=o3, wind_speed=2.0, city_type=city_type)


# --- Score and AQI Level ---

def test_aqi_score_worked_example():
    """0.3*150 + 0.2*180 + 0.1*80 + 0.05*60 = 45 + 36 + 8 + 3 = 92."""
    assert aqi_score(make_sample(pm25=150, pm10=180, no2=80, o3=60)) == pytest.approx(92.0)

def test_aqi_level_worked_example_is_moderate():
    assert aqi_level(make_sample(pm25=150, pm10=180, no2=80, o3=60)) == AQILevel.MODERATE

@pytest.mark.parametrize("score, expected", [
    (0.0, AQILevel.GOOD),
    (49.99, AQILevel.GOOD),
    (50.0, AQILevel.MODERATE),
    (99.99, AQILevel.MODERATE),
    (100.0, AQILevel.UNHEALTHY),
    (199.99, AQILevel.UNHEALTHY),
    (200.0, AQILevel.HAZARDOUS),
    (1000.0, AQILevel.HAZARDOUS),
])
def test_aqi_level_from_score_boundaries(score, expected):
    """Each bound is exclusive for the lower level."""
    assert aqi_level_from_score(score) == expected

def test_aqi_level_is_non_decreasing_in_score():
    levels = [aqi_level_from_score(s / 2) for s in range(0, 600)]
    assert all(a <= b for a, b in zip(levels, levels[1:]))
    assert set(levels) == set(AQILevel)

def test_aqi_level_ignores_non_pollutant_fields():
    a = make_sample(pm25=200, pm10=100)
    b = Sample(temperature=44.0, humidity=89.0, co2=799.0, pm25=200, pm10=100,
               no2=10.0, o3=10.0, wind_speed=9.9, city_type=0)
    assert aqi_level(a) == aqi_level(b)


# --- Health Risk ---

@pytest.mark.parametrize("level, city_type, expected", [
    (AQILevel.GOOD, 0, HealthRisk.LOW),
    (AQILevel.GOOD, 1, HealthRisk.LOW),
    (AQILevel.MODERATE, 0, HealthRisk.MEDIUM),
    (AQILevel.MODERATE, 1, HealthRisk.MEDIUM),
    (AQILevel.UNHEALTHY, 0, HealthRisk.MEDIUM),
    (AQILevel.UNHEALTHY, 1, HealthRisk.HIGH),
    (AQILevel.HAZARDOUS, 0, HealthRisk.HIGH),
    (AQILevel.HAZARDOUS, 1, HealthRisk.HIGH),
])
def test_health_risk_table(level, city_type, expected):
    assert health_risk(make_sample(city_type=city_type), level) == expected

def test_health_risk_accepts_plain_int_level():
    assert health_risk(make_sample(city_type=1), 2) == HealthRisk.HIGH

def test_worked_example_urban_moderate_is_medium():
    sample = make_sample(pm25=150, pm10=180, no2=80, o3=60, city_type=1)
    assert health_risk(sample, aqi_level(sample)) == HealthRisk.MEDIUM


# --- Display Names ---

def test_level_display_names():
    assert [level.label for level in AQILevel] == ["Good", "Moderate", "Unhealthy", "Hazardous"]
    assert [risk.label for risk in HealthRisk] == ["Low", "Medium", "High"]

def test_out_of_range_level_is_rejected():
    with pytest.raises(ValueError):
        health_risk(make_sample(), 4)


# --- label_sample ---

def test_label_sample_returns_new_labeled_record():
    raw = make_sample(pm25=250, pm10=300, no2=200, o3=180, city_type=0)
    labeled = label_sample(raw)
    assert raw.aqi_level is None and not raw.is_labeled
    assert labeled.is_labeled
    assert labeled.aqi_level == AQILevel.UNHEALTHY
    assert labeled.health_risk == HealthRisk.MEDIUM
    assert labeled.features() == raw.features()
