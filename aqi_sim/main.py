# File: aqi_sim/main.py

"""
Runs the full simulation: generate, split, evaluate the rule-based predictor,
print the report, then label one interactive sample.

Usage:
    aqi-sim [--seed N]
    python run_simulation.py [--seed N]
"""

import argparse
import logging

from aqi_sim.config_loader import CONFIG, get_seed
from aqi_sim.data.generator import make_rng, generate_synthetic_samples, NUM_SAMPLES
from aqi_sim.data.sample import samples_to_frame
from aqi_sim.evaluation.metrics import accuracy, classification_report
from aqi_sim.exceptions import ConfigError
from aqi_sim.health_rules.labels import AQILevel, HealthRisk
from aqi_sim.interactive import resolve_sample_input, INVALID_INPUT_WARNING
from aqi_sim.modeling.rule_predictor import predict, predict_many
from aqi_sim.modeling.splitter import shuffle_and_split
from aqi_sim import report

log = logging.getLogger(__name__)


def run_simulation(rng, read_line, write=print, n_samples=NUM_SAMPLES):
    """
    Executes the pipeline and writes the report through `write`.

    Args:
        rng (np.random.Generator): The run's only random source.
        read_line (Callable[[str], str | None]): Called once with the prompt;
            returns the user's line, or None when input is exhausted.
        write (Callable[[str], None]): Receives each report line.
        n_samples (int): Dataset size. Defaults to NUM_SAMPLES.

    Returns:
        dict: 'accuracy' ({'aqi', 'health_risk'}), 'reports' (the two metrics
              DataFrames), 'sample', 'used_demo' and 'prediction'
              ((AQILevel, HealthRisk)) for the interactive sample.
    """
    # --- 1) Dataset ---
    samples = generate_synthetic_samples(rng, n_samples)
    dataset_df = samples_to_frame(samples)

    # --- 2) Split (train is kept for shape only; nothing is fitted) ---
    train, test = shuffle_and_split(samples, rng)

    # --- 3) Predict on the test partition ---
    y_true_aqi = [s.aqi_level for s in test]
    y_true_risk = [s.health_risk for s in test]
    y_pred_aqi, y_pred_risk = predict_many(test)

    # --- 4) Evaluate ---
    acc_aqi = accuracy(y_true_aqi, y_pred_aqi)
    acc_risk = accuracy(y_true_risk, y_pred_risk)
    aqi_report = classification_report(y_true_aqi, y_pred_aqi, labels=list(AQILevel))
    risk_report = classification_report(y_true_risk, y_pred_risk, labels=list(HealthRisk))
    log.info(f"Evaluation complete: AQI accuracy={acc_aqi:.3f}, health risk accuracy={acc_risk:.3f}")

    lines = (report.format_banner()
             + report.format_dataset_summary(dataset_df, len(train), len(test))
             + report.format_accuracy(acc_aqi, acc_risk)
             + report.format_classification_table("AQI_Level", aqi_report)
             + report.format_classification_table("Health_Risk", risk_report)
             + report.format_prompt())
    for line in lines:
        write(line)

    # --- 5) Interactive single sample ---
    raw_line = read_line(report.PROMPT)
    sample, used_demo, error = resolve_sample_input(raw_line)
    if error is not None:
        write(INVALID_INPUT_WARNING)
    level, risk = predict(sample)
    for line in report.format_prediction(sample, level, risk) + report.format_closing():
        write(line)

    return {
        "accuracy": {"aqi": acc_aqi, "health_risk": acc_risk},
        "reports": {"aqi": aqi_report, "health_risk": risk_report},
        "sample": sample,
        "used_demo": used_demo,
        "prediction": (level, risk),
    }


def read_stdin_line(prompt):
    """Reads one line from stdin, returning None at end of input.

    A blank first line (a stray newline left on the stream) is skipped and
    one more line is read in its place.
    """
    try:
        line = input(prompt)
        if not line.strip():
            line = input()
    except EOFError:
        return None
    return line


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Rule-based AQI and health risk simulator with self-evaluation.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random generator (overrides AQI_SIM_SEED and config)")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    try:
        seed = get_seed(CONFIG, override=args.seed)
    except ConfigError as e:
        log.warning(f"Ignoring invalid seed setting: {e}")
        seed = None
    rng = make_rng(seed)
    run_simulation(rng, read_stdin_line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
