# File: aqi_sim/interactive.py

"""
Parsing of the single interactive sample line.

The line is either the literal token `demo` or nine whitespace-separated
values in the order Temperature Humidity CO2 PM2.5 PM10 NO2 O3 WindSpeed
CityType. Anything that cannot be parsed falls back to the fixed demo sample;
the caller is told so it can print a warning.
"""

import logging
import math

from aqi_sim.data.sample import Sample, FEATURE_FIELDS
from aqi_sim.exceptions import SampleParseError

log = logging.getLogger(__name__)

DEMO_TOKEN = "demo"
INVALID_INPUT_WARNING = "Invalid input. Running demo sample."

DEMO_SAMPLE = Sample(
    temperature=33.0,
    humidity=65.0,
    co2=550.0,
    pm25=150.0,
    pm10=180.0,
    no2=80.0,
    o3=60.0,
    wind_speed=3.5,
    city_type=1,
)


def parse_sample_line(line):
    """
    Parses a line of nine values into an unlabeled Sample.

    Args:
        line (str): Eight floats followed by an integer city type (0 or 1).

    Returns:
        Sample: The parsed, unlabeled sample.

    Raises:
        SampleParseError: On a wrong token count, a non-numeric or non-finite
                          reading, or a city type other than 0 or 1.
    """
    tokens = (line or "").split()
    if len(tokens) != len(FEATURE_FIELDS):
        raise SampleParseError(f"Expected {len(FEATURE_FIELDS)} values, got {len(tokens)}.", line=line)

    readings = {}
    for name, token in zip(FEATURE_FIELDS[:-1], tokens[:-1]):
        try:
            value = float(token)
        except ValueError as e:
            raise SampleParseError(f"Value for {name} is not a number: {token!r}.", line=line) from e
        if not math.isfinite(value):
            raise SampleParseError(f"Value for {name} must be finite: {token!r}.", line=line)
        readings[name] = value

    try:
        city_type = int(tokens[-1])
    except ValueError as e:
        raise SampleParseError(f"CityType must be an integer: {tokens[-1]!r}.", line=line) from e
    if city_type not in (0, 1):
        raise SampleParseError(f"CityType must be 0 or 1, got {city_type}.", line=line)

    return Sample(city_type=city_type, **readings)


def resolve_sample_input(line):
    """
    Turns the raw interactive line into the sample to predict.

    Args:
        line (str | None): The line read from the user (None on end of input).

    Returns:
        tuple[Sample, bool, SampleParseError | None]: The sample, whether the
        demo sample was used, and the parse error that forced the fallback
        (None when the input was valid or was the `demo` token).
    """
    text = (line or "").strip()
    if text == DEMO_TOKEN:
        log.info("Demo sample requested.")
        return DEMO_SAMPLE, True, None
    try:
        sample = parse_sample_line(text)
    except SampleParseError as e:
        log.info(f"Falling back to demo sample: {e}")
        return DEMO_SAMPLE, True, e
    log.info(f"Parsed interactive sample: {sample}")
    return sample, False, None
