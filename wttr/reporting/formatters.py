"""Output formatters for a single weather field or the full summary line."""

from enum import StrEnum

from wttr.models.weather import WeatherRecord

TEMP = "°C"
SPEED = "km/h"


class Field(StrEnum):
    AREA = "area"
    TEMPERATURE = "temperature"
    FEELS_LIKE = "feels-like"
    WIND_SPEED = "wind-speed"
    DESCRIPTION = "description"
    WIND_DIRECTION = "wind-direction"
    MIN_TEMPERATURE = "min-temperature"
    MAX_TEMPERATURE = "max-temperature"
    FULL = "full"


class Presentation(StrEnum):
    TEXT = "text"
    EMOJI = "emoji"


def format_field(
    record: WeatherRecord,
    field: Field,
    presentation: Presentation = Presentation.TEXT,
) -> str:
    """Render one field of the record. presentation only affects coded fields."""
    if field == Field.AREA:
        return record.area
    if field == Field.TEMPERATURE:
        return f"{record.temperature_c}{TEMP}"
    if field == Field.FEELS_LIKE:
        return f"{record.feels_like_c}{TEMP}"
    if field == Field.MAX_TEMPERATURE:
        return f"{record.max_temperature_c}{TEMP}"
    if field == Field.MIN_TEMPERATURE:
        return f"{record.min_temperature_c}{TEMP}"
    if field == Field.WIND_SPEED:
        return f"{record.wind_speed_kmh}{SPEED}"
    if field == Field.DESCRIPTION:
        if presentation == Presentation.EMOJI:
            return record.condition_code.into_symbol()
        return record.condition_code.into_text()
    if field == Field.WIND_DIRECTION:
        if presentation == Presentation.EMOJI:
            return record.wind_direction.into_symbol()
        return record.wind_direction.into_text()
    if field == Field.FULL:
        return format_full(record)
    raise ValueError(f"Unknown field: {field}")


def format_full(r: WeatherRecord) -> str:
    """One-line summary, e.g. 'London: ☀ 10°C (8°C) | ↑ 14km/h | max:12°C | min:5°C'."""
    return (
        f"{r.area}: {r.condition_code.into_symbol()} "
        f"{r.temperature_c}{TEMP} ({r.feels_like_c}{TEMP}) | "
        f"{r.wind_direction.into_symbol()} {r.wind_speed_kmh}{SPEED} | "
        f"max:{r.max_temperature_c}{TEMP} | min:{r.min_temperature_c}{TEMP}"
    )
