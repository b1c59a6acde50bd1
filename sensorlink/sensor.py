"""Temperature sensor access and thermistor conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Thermistor constants for the Grove temperature sensor.
B_CONSTANT = 4275
R0 = 100_000
ADC_MAX = 1023.0
REFERENCE_KELVIN = 298.15
KELVIN_OFFSET = 273.15


@dataclass
class DummySensor:
    """A stand-in analog sensor that always returns the same raw reading."""

    value: int = 650

    def read(self) -> int:
        """Return the raw analog reading."""
        return self.value


def reading_to_celsius(reading: float) -> float:
    """Convert a raw 10-bit analog reading into degrees Celsius."""
    if reading <= 0 or reading >= ADC_MAX:
        raise ValueError(f"sensor reading out of range: {reading!r}")
    resistance = R0 * (ADC_MAX / float(reading) - 1.0)
    return 1.0 / (math.log(resistance / R0) / B_CONSTANT + 1 / REFERENCE_KELVIN) - KELVIN_OFFSET


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 9 / 5 + 32