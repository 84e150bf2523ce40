# File: aqi_sim/modeling/splitter.py

"""
Shuffles a labeled dataset and splits it into train and test partitions.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)

TRAIN_FRACTION = 0.8


def shuffle_and_split(samples, rng: np.random.Generator, train_fraction: float = TRAIN_FRACTION):
    """
    Shuffles `samples` uniformly and splits them into (train, test).

    The train partition holds the first int(train_fraction * N) shuffled
    samples and the test partition holds the rest. The input list is left
    untouched.

    Args:
        samples (list[Sample]): The labeled dataset.
        rng (np.random.Generator): The run's random source.
        train_fraction (float): Share of samples assigned to train, in [0, 1].

    Returns:
        tuple[list[Sample], list[Sample]]: The train and test partitions.

    Raises:
        ValueError: If `train_fraction` is outside [0, 1].
    """
    if not 0.0 <= train_fraction <= 1.0:
        raise ValueError(f"train_fraction must be within [0, 1], got {train_fraction}.")
    order = rng.permutation(len(samples))
    shuffled = [samples[i] for i in order]
    train_size = int(train_fraction * len(shuffled))
    train, test = shuffled[:train_size], shuffled[train_size:]
    log.info(f"Split {len(shuffled)} samples into {len(train)} train / {len(test)} test.")
    return train, test
