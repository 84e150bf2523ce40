# File: aqi_sim/modeling/rule_predictor.py

"""
Baseline "predictor" that re-applies the labeling rules to a sample's features.

No model is trained: the prediction is the same deterministic function that
produced the ground truth, so evaluating it against the stored labels yields
perfect agreement. It stands in for a learned model in the evaluation flow.
"""

import logging

from aqi_sim.health_rules.labels import aqi_level, health_risk

log = logging.getLogger(__name__)


def predict(sample):
    """Predicts (AQILevel, HealthRisk) from the sample's inputs only.

    Any labels already stored on the sample are ignored.
    """
    level = aqi_level(sample)
    return level, health_risk(sample, level)


def predict_many(samples):
    """Predicts every sample in `samples`.

    Returns:
        tuple[list[AQILevel], list[HealthRisk]]: Predicted AQI levels and
        health risks, in input order.
    """
    aqi_preds, risk_preds = [], []
    for sample in samples:
        level, risk = predict(sample)
        aqi_preds.append(level)
        risk_preds.append(risk)
    log.info(f"Predicted labels for {len(aqi_preds)} samples.")
    return aqi_preds, risk_preds
