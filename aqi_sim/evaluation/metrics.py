# File: aqi_sim/evaluation/metrics.py

"""
Classification metrics for label sequences.

Per-class precision, recall, F1 and support are computed one-vs-rest by exact
match; every ratio is guarded so an empty denominator yields 0.0 instead of
raising. `classification_report` collects the per-class rows into a pandas
DataFrame indexed by label ordinal.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from aqi_sim.exceptions import MetricsInputError

log = logging.getLogger(__name__)

REPORT_COLUMNS = ["precision", "recall", "f1", "support"]


@dataclass(frozen=True)
class ClassMetrics:
    precision: float
    recall: float
    f1: float
    support: int


def _safe_ratio(numerator, denominator):
    return numerator / denominator if denominator else 0.0


def _check_lengths(y_true, y_pred):
    if len(y_true) != len(y_pred):
        raise MetricsInputError(
            f"y_true and y_pred must have the same length ({len(y_true)} != {len(y_pred)}).")


def compute_metrics_for_label(y_true, y_pred, label) -> ClassMetrics:
    """
    Computes one-vs-rest metrics for a single class label.

    Args:
        y_true (Sequence[int]): Ground-truth labels.
        y_pred (Sequence[int]): Predicted labels, aligned with `y_true`.
        label (int): The class to score.

    Returns:
        ClassMetrics: Precision, recall, F1 and support of `label`. A class
                      with no true and no predicted instances scores 0.0 on
                      all three ratios.

    Raises:
        MetricsInputError: If the sequences differ in length.
    """
    _check_lengths(y_true, y_pred)
    tp = fp = fn = 0
    for truth, pred in zip(y_true, y_pred):
        is_true = truth == label
        is_pred = pred == label
        if is_true and is_pred:
            tp += 1
        elif is_pred:
            fp += 1
        elif is_true:
            fn += 1
    support = tp + fn
    precision = _safe_ratio(tp, tp + fp)
    recall = _safe_ratio(tp, tp + fn)
    f1 = _safe_ratio(2.0 * precision * recall, precision + recall)
    log.debug(f"Label {label}: tp={tp} fp={fp} fn={fn} support={support}")
    return ClassMetrics(precision=precision, recall=recall, f1=f1, support=support)


def accuracy(y_true, y_pred) -> float:
    """Fraction of positions where prediction equals truth (0.0 for empty input)."""
    _check_lengths(y_true, y_pred)
    correct = sum(1 for truth, pred in zip(y_true, y_pred) if truth == pred)
    return _safe_ratio(correct, len(y_true))


def classification_report(y_true, y_pred, labels) -> pd.DataFrame:
    """
    Builds the per-class metrics table.

    Args:
        y_true (Sequence[int]): Ground-truth labels.
        y_pred (Sequence[int]): Predicted labels.
        labels (Iterable[int]): Classes to report, in row order. Classes that
                                never occur are still reported (support 0).

    Returns:
        pd.DataFrame: Indexed by label ordinal ("label"), with columns
                      precision, recall, f1 (float) and support (int).
    """
    _check_lengths(y_true, y_pred)
    rows = {}
    for label in labels:
        m = compute_metrics_for_label(y_true, y_pred, label)
        rows[int(label)] = [m.precision, m.recall, m.f1, m.support]
    report = pd.DataFrame.from_dict(rows, orient="index", columns=REPORT_COLUMNS)
    report.index.name = "label"
    report["support"] = report["support"].astype(int)
    return report
