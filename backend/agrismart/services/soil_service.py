# backend/agrismart/services/soil_service.py

"""
Weather -> synthetic soil reading.

There is no soil sensor behind this: moisture is derived from humidity and
the provider's condition keyword, the rest are random values in agronomically
plausible ranges. Output ranges are hard limits regardless of input weather
or of the random source that is plugged in.
"""

import math
from typing import Protocol

from agrismart.schemas.weather import WeatherObservation, DerivedReading

MOISTURE_MIN = 30.0
MOISTURE_MAX = 90.0
MOISTURE_HUMIDITY_FACTOR = 0.7
RAIN_ADJUSTMENT = 15.0
CLEAR_ADJUSTMENT = -10.0

PH_CENTER = 6.5
PH_SPREAD = 0.5

# (base, span): value = floor(base + uniform(0, span)) -> [base, base + span - 1]
NITROGEN_RANGE = (25, 15)
PHOSPHORUS_RANGE = (12, 8)
POTASSIUM_RANGE = (15, 10)


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float:
        ...


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def calculate_soil_moisture(humidity: float, weather_condition: str) -> float:
    moisture = humidity * MOISTURE_HUMIDITY_FACTOR

    # case-sensitive: matches the provider's vocabulary ("Rain", "Clear", "Clouds", ...)
    if "Rain" in weather_condition:
        moisture += RAIN_ADJUSTMENT
    elif "Clear" in weather_condition:
        moisture += CLEAR_ADJUSTMENT

    return _clamp(moisture, MOISTURE_MIN, MOISTURE_MAX)


def random_soil_ph(rng: RandomSource) -> float:
    ph = PH_CENTER + rng.uniform(-PH_SPREAD, PH_SPREAD)
    return _clamp(ph, PH_CENTER - PH_SPREAD, PH_CENTER + PH_SPREAD)


def random_nutrient(rng: RandomSource, base: int, span: int) -> int:
    value = math.floor(base + rng.uniform(0, span))
    # uniform() may return its upper bound
    return int(_clamp(value, base, base + span - 1))


def derive_soil_reading(observation: WeatherObservation, rng: RandomSource) -> DerivedReading:
    return DerivedReading(
        temperature=observation.temperature,
        humidity=observation.humidity,
        weather_condition=observation.condition,
        description=observation.description,
        soil_moisture=calculate_soil_moisture(observation.humidity, observation.condition),
        soil_ph=random_soil_ph(rng),
        nitrogen=random_nutrient(rng, *NITROGEN_RANGE),
        phosphorus=random_nutrient(rng, *PHOSPHORUS_RANGE),
        potassium=random_nutrient(rng, *POTASSIUM_RANGE),
    )


async def fetch_weather_reading(client, location: str, rng: RandomSource) -> DerivedReading:
    """fetch-weather: live observation for `location` plus derived soil values."""
    observation = await client.fetch_current_weather(location)
    return derive_soil_reading(observation, rng)
