# File: aqi_sim/report.py

"""
Text formatting for every section of the console report.

Each `format_*` function returns a list of lines without trailing newlines;
the caller decides where they are written.
"""

from aqi_sim.data.sample import FEATURE_COLUMNS
from aqi_sim.health_rules.info import AQI_DEFINITION, get_aqi_info, get_risk_advice
from aqi_sim.health_rules.interpreter import dominant_pollutant
from aqi_sim.health_rules.labels import AQILevel, aqi_score

BANNER = "Air Quality & Health Prediction (Rule-based Simulator)"
TABLE_HEADER = "Label  Precision  Recall   F1-score  Support"
INPUT_FORMAT = " ".join(FEATURE_COLUMNS.values()).replace("CityType", "CityType(0/1)")
INPUT_EXAMPLE = "33 65 550 150 180 80 60 3.5 1"
PROMPT = "Input: "
CLOSING = "Done. No model was trained: predictions re-apply the labeling rules."


def format_banner():
    return [BANNER, ""]


def format_dataset_summary(dataset_df, train_size, test_size):
    """Summarises the generated dataset: sizes and the AQI level distribution."""
    lines = ["Dataset Summary:",
             f"  Samples: {len(dataset_df)} (train {train_size} / test {test_size})",
             "  AQI_Level distribution:"]
    counts = dataset_df["AQI_Level"].value_counts()
    for level in AQILevel:
        lines.append(f"    {int(level)} {level.label:<10} {int(counts.get(int(level), 0)):>6}")
    lines.append("")
    return lines


def format_accuracy(aqi_accuracy, risk_accuracy):
    return ["Overall Accuracy:",
            f"  AQI_Level Accuracy: {aqi_accuracy:.3f}",
            f"  Health_Risk Accuracy: {risk_accuracy:.3f}",
            ""]


def format_classification_table(title, report_df):
    """Renders a per-class metrics DataFrame as a fixed-width table."""
    lines = [f"{title} Classification Report:", TABLE_HEADER]
    for label, row in report_df.iterrows():
        lines.append(f"{label:>5}  {row['precision']:>9.3f}  {row['recall']:>6.3f}  "
                     f"{row['f1']:>8.3f}  {int(row['support']):>7}")
    lines.append("")
    return lines


def format_prompt():
    return ["Enter a custom sample to predict (or type 'demo' to run a demo sample):",
            f"Format: {INPUT_FORMAT}",
            f"Example: {INPUT_EXAMPLE}"]


def format_prediction(sample, level, risk):
    """Renders the labels of the interactive sample, with score context."""
    score = aqi_score(sample)
    pollutant, contribution = dominant_pollutant(sample)
    info = get_aqi_info(level)
    return ["",
            "Prediction for the sample:",
            f"  AQI Score -> Level {int(level)} ({level.label})",
            f"  Health Risk -> {int(risk)} ({risk.label})",
            f"  Weighted Score: {score:.2f} (range {info['range']})",
            f"  Dominant Pollutant: {pollutant} ({contribution:.2f})",
            f"  Implications: {info['implications']}",
            f"  About the score: {' '.join(AQI_DEFINITION.split())}",
            f"  Advice: {get_risk_advice(risk)}"]


def format_closing():
    return ["", CLOSING]
