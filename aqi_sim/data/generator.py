# File: aqi_sim/data/generator.py

"""
Synthetic dataset generation.

Every feature is drawn uniformly from a fixed range and each sample is
labeled as soon as it is created. All randomness flows through a single
numpy Generator that the caller creates once (see `make_rng`) and passes in.
"""

import logging

import numpy as np

from aqi_sim.data.sample import Sample
from aqi_sim.health_rules.labels import label_sample

log = logging.getLogger(__name__)

# --- Generation Settings ---
NUM_SAMPLES = 1500

# Uniform draw range (low, high) for each continuous feature.
FEATURE_RANGES = {
    "temperature": (10.0, 45.0),
    "humidity": (20.0, 90.0),
    "co2": (300.0, 800.0),
    "pm25": (5.0, 250.0),
    "pm10": (10.0, 300.0),
    "no2": (2.0, 200.0),
    "o3": (5.0, 180.0),
    "wind_speed": (0.5, 10.0),
}
CITY_TYPES = (0, 1)


def make_rng(seed=None) -> np.random.Generator:
    """Creates the run's random source. A None seed draws fresh OS entropy."""
    log.info(f"Initialising random generator with seed={seed}")
    return np.random.default_rng(seed)


def generate_sample(rng: np.random.Generator) -> Sample:
    """Draws one unlabeled sample."""
    readings = {name: float(rng.uniform(low, high)) for name, (low, high) in FEATURE_RANGES.items()}
    city_type = int(rng.choice(CITY_TYPES))
    return Sample(city_type=city_type, **readings)


def generate_synthetic_samples(rng: np.random.Generator, n: int = NUM_SAMPLES) -> list:
    """
    Generates `n` independent, labeled samples.

    Args:
        rng (np.random.Generator): The run's random source.
        n (int): Number of samples to draw. Defaults to NUM_SAMPLES.

    Returns:
        list[Sample]: Labeled samples in generation order.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"Sample count must be non-negative, got {n}.")
    log.info(f"Generating {n} synthetic samples...")
    samples = [label_sample(generate_sample(rng)) for _ in range(n)]
    log.info(f"Generated {len(samples)} labeled samples.")
    return samples
