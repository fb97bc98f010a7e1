"""Tests for field and summary formatting."""

import pytest

from wttr.models.codes import CompassPoint16, WeatherCondition
from wttr.models.weather import WeatherRecord
from wttr.reporting.formatters import Field, Presentation, format_field, format_full


@pytest.fixture
def record(london_record_dict: dict) -> WeatherRecord:
    return WeatherRecord.from_dict(london_record_dict)


class TestFormatField:
    @pytest.mark.parametrize(
        "field,expected",
        [
            (Field.AREA, "London"),
            (Field.TEMPERATURE, "10°C"),
            (Field.FEELS_LIKE, "8°C"),
            (Field.MAX_TEMPERATURE, "12°C"),
            (Field.MIN_TEMPERATURE, "5°C"),
            (Field.WIND_SPEED, "14km/h"),
        ],
    )
    def test_plain_fields(self, record: WeatherRecord, field: Field, expected: str):
        assert format_field(record, field) == expected

    def test_description_text(self, record: WeatherRecord):
        assert format_field(record, Field.DESCRIPTION) == "Clear/Sunny"

    def test_description_emoji(self, record: WeatherRecord):
        assert format_field(record, Field.DESCRIPTION, Presentation.EMOJI) == "☀"

    def test_wind_direction_text(self, record: WeatherRecord):
        assert format_field(record, Field.WIND_DIRECTION) == "N"

    def test_wind_direction_emoji(self, record: WeatherRecord):
        assert format_field(record, Field.WIND_DIRECTION, Presentation.EMOJI) == "↑"

    def test_presentation_ignored_for_numbers(self, record: WeatherRecord):
        assert format_field(record, Field.TEMPERATURE, Presentation.EMOJI) == "10°C"


class TestFormatFull:
    def test_london(self, record: WeatherRecord):
        assert (
            format_field(record, Field.FULL)
            == "London: ☀ 10°C (8°C) | ↑ 14km/h | max:12°C | min:5°C"
        )

    def test_other_record(self):
        r = WeatherRecord(
            area="Oslo",
            temperature_c=-4,
            feels_like_c=-9,
            max_temperature_c=-1,
            min_temperature_c=-6,
            condition_code=WeatherCondition.LIGHT_SNOW,
            wind_direction=CompassPoint16.WSW,
            wind_speed_kmh=22,
        )
        assert format_full(r) == "Oslo: 🌨 -4°C (-9°C) | ↙ 22km/h | max:-1°C | min:-6°C"
