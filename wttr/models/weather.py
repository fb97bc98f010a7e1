"""Normalized current-weather record parsed from extracted wttr.in JSON."""

import json
from dataclasses import dataclass
from typing import Any

from wttr.errors import MalformedRecord
from wttr.models.codes import CompassPoint16, WeatherCondition

INT_FIELDS = ("temp", "sens", "max", "min", "windspeed")


@dataclass(frozen=True)
class WeatherRecord:
    area: str
    temperature_c: int
    feels_like_c: int
    max_temperature_c: int
    min_temperature_c: int
    condition_code: WeatherCondition
    wind_direction: CompassPoint16
    wind_speed_kmh: int

    def __str__(self) -> str:
        return f"{self.wind_direction.into_symbol()} {self.condition_code.into_symbol()}"

    @classmethod
    def from_json(cls, text: str) -> "WeatherRecord":
        """Parse normalized JSON text. Raises MalformedRecord."""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise MalformedRecord(f"Invalid weather JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> "WeatherRecord":
        """Build a record from the 8-field normalized object.

        Every field is required. Coded fields must match a known variant;
        there is no fallback for unknown codes.
        """
        if not isinstance(data, dict):
            raise MalformedRecord(
                f"Weather record must be a JSON object, got {type(data).__name__}"
            )

        area = _require(data, "area")
        if not isinstance(area, str):
            raise MalformedRecord(f"Field 'area' must be a string, got {area!r}")
        try:
            area.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedRecord(f"Field 'area' is not valid text: {area!r}") from e

        ints = {}
        for name in INT_FIELDS:
            value = _require(data, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedRecord(f"Field '{name}' must be an integer, got {value!r}")
            ints[name] = value
        if ints["windspeed"] < 0:
            raise MalformedRecord(
                f"Field 'windspeed' must not be negative, got {ints['windspeed']}"
            )

        code = _require(data, "code")
        if isinstance(code, bool) or not isinstance(code, int):
            raise MalformedRecord(f"Field 'code' must be an integer, got {code!r}")
        try:
            condition_code = WeatherCondition.from_code(code)
        except ValueError as e:
            raise MalformedRecord(f"Unknown weather code: {code}") from e

        if "winddir16Point" in data:
            direction = data["winddir16Point"]
        else:
            direction = _require(data, "winddir16_point")
        if not isinstance(direction, str):
            raise MalformedRecord(
                f"Field 'winddir16Point' must be a string, got {direction!r}"
            )
        try:
            wind_direction = CompassPoint16(direction)
        except ValueError as e:
            raise MalformedRecord(f"Unknown wind direction: {direction!r}") from e

        return cls(
            area=area,
            temperature_c=ints["temp"],
            feels_like_c=ints["sens"],
            max_temperature_c=ints["max"],
            min_temperature_c=ints["min"],
            condition_code=condition_code,
            wind_direction=wind_direction,
            wind_speed_kmh=ints["windspeed"],
        )


def _require(data: dict, name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise MalformedRecord(f"Missing field '{name}' in weather record") from None
