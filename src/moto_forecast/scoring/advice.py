"""Riding advisories and gear recommendations.

Both lists are produced by walking a fixed, ordered set of rules. Each rule
contributes at most one line, and the output order is the rule order, so
callers can rely on the sequence and not just the contents.

## Advisory Order

1. High temperature (above 30°C)
2. Low temperature (below 10°C)
3. High wind (above 20 km/h)
4. Any chance of rain
5. Low visibility (below 5 km, only when visibility is known)

If nothing fires, a single "conditions are good" advisory is returned.

## Gear

Gear always starts with the base protective kit. Cold, wet and hot weather
gear are appended independently, so several can apply at once.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from moto_forecast.models.observation import WeatherObservation

ObservationPredicate = Callable[[WeatherObservation], bool]


@dataclass(frozen=True)
class AdviceRule:
    """A line of advice emitted when its predicate matches.

    Attributes:
        name: Short identifier for the rule
        message: Text to emit
        applies: Predicate over the observation
    """

    name: str
    message: str
    applies: ObservationPredicate

    def matches(self, observation: WeatherObservation) -> bool:
        return self.applies(observation)


def _low_visibility(observation: WeatherObservation) -> bool:
    return observation.visibility_km is not None and observation.visibility_km < 5


HIGH_TEMPERATURE_ADVICE = "High temperature - Take frequent breaks and stay hydrated"
LOW_TEMPERATURE_ADVICE = "Cold conditions - Watch for cold spots and reduced grip"
HIGH_WIND_ADVICE = "Strong winds - Be prepared for gusts and crosswinds"
RAIN_ADVICE = "Rain possible - Reduce speed and increase following distance"
LOW_VISIBILITY_ADVICE = "Poor visibility - Increase following distance and use lights"
GOOD_CONDITIONS_ADVICE = "Conditions are good for riding - Enjoy the ride"

RIDING_ADVICE_RULES: tuple[AdviceRule, ...] = (
    AdviceRule(
        name="high_temperature",
        message=HIGH_TEMPERATURE_ADVICE,
        applies=lambda o: o.temperature_c > 30,
    ),
    AdviceRule(
        name="low_temperature",
        message=LOW_TEMPERATURE_ADVICE,
        applies=lambda o: o.temperature_c < 10,
    ),
    AdviceRule(
        name="high_wind",
        message=HIGH_WIND_ADVICE,
        applies=lambda o: o.wind_speed_kph > 20,
    ),
    AdviceRule(
        name="rain",
        message=RAIN_ADVICE,
        applies=lambda o: o.precipitation_percent > 0,
    ),
    AdviceRule(
        name="low_visibility",
        message=LOW_VISIBILITY_ADVICE,
        applies=_low_visibility,
    ),
)

BASE_GEAR = "DOT-approved helmet, armored jacket, riding gloves and boots"
COLD_WEATHER_GEAR = "Thermal base layer, insulated riding gear and heated grips"
WET_WEATHER_GEAR = "Waterproof riding suit and anti-fog visor insert"
HOT_WEATHER_GEAR = "Mesh ventilated jacket, moisture-wicking base layer and hydration pack"

GEAR_RULES: tuple[AdviceRule, ...] = (
    AdviceRule(
        name="cold_weather",
        message=COLD_WEATHER_GEAR,
        applies=lambda o: o.temperature_c < 15,
    ),
    AdviceRule(
        name="wet_weather",
        message=WET_WEATHER_GEAR,
        applies=lambda o: o.precipitation_percent > 0,
    ),
    AdviceRule(
        name="hot_weather",
        message=HOT_WEATHER_GEAR,
        applies=lambda o: o.temperature_c > 25,
    ),
)


def recommendations(observation: WeatherObservation) -> list[str]:
    """Get ordered riding advisories for an observation.

    Args:
        observation: Observation in canonical units

    Returns:
        Advisory lines in fixed rule order, or a single good-conditions line
    """
    advice = [rule.message for rule in RIDING_ADVICE_RULES if rule.matches(observation)]
    return advice or [GOOD_CONDITIONS_ADVICE]


def gear_recommendations(observation: WeatherObservation) -> list[str]:
    """Get ordered gear lines for an observation.

    The base kit is always first; conditional gear follows in rule order.
    """
    gear = [BASE_GEAR]
    gear.extend(rule.message for rule in GEAR_RULES if rule.matches(observation))
    return gear
