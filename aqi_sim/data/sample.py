# File: aqi_sim/data/sample.py

"""
The Sample record and its tabular view.
"""

from dataclasses import dataclass, astuple
from typing import Optional

import pandas as pd

from aqi_sim.health_rules.labels import AQILevel, HealthRisk


@dataclass(frozen=True)
class Sample:
    """One environmental observation.

    The eight readings and the city type are inputs; `aqi_level` and
    `health_risk` stay None until the sample is labeled.
    """
    temperature: float
    humidity: float
    co2: float
    pm25: float
    pm10: float
    no2: float
    o3: float
    wind_speed: float
    city_type: int  # 0 = rural, 1 = urban
    aqi_level: Optional[AQILevel] = None
    health_risk: Optional[HealthRisk] = None

    @property
    def is_labeled(self):
        return self.aqi_level is not None and self.health_risk is not None

    def features(self):
        """Returns the nine input values in input-line order."""
        return astuple(self)[:len(FEATURE_FIELDS)]


# Input order of a sample line, with the display name of each field.
FEATURE_COLUMNS = {
    "temperature": "Temperature",
    "humidity": "Humidity",
    "co2": "CO2",
    "pm25": "PM2.5",
    "pm10": "PM10",
    "no2": "NO2",
    "o3": "O3",
    "wind_speed": "WindSpeed",
    "city_type": "CityType",
}
FEATURE_FIELDS = list(FEATURE_COLUMNS)


def samples_to_frame(samples):
    """Builds a DataFrame with one row per sample.

    Columns use the display names of the features, plus `AQI_Level` and
    `Health_Risk` ordinals (nullable integers, missing for unlabeled samples).
    """
    rows = []
    for sample in samples:
        row = {FEATURE_COLUMNS[name]: getattr(sample, name) for name in FEATURE_FIELDS}
        row["AQI_Level"] = None if sample.aqi_level is None else int(sample.aqi_level)
        row["Health_Risk"] = None if sample.health_risk is None else int(sample.health_risk)
        rows.append(row)
    columns = list(FEATURE_COLUMNS.values()) + ["AQI_Level", "Health_Risk"]
    df = pd.DataFrame(rows, columns=columns)
    df["AQI_Level"] = df["AQI_Level"].astype("Int64")
    df["Health_Risk"] = df["Health_Risk"].astype("Int64")
    return df
