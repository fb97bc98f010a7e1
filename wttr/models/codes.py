"""Code tables for wttr.in coded values: compass points and weather codes."""

from enum import Enum, StrEnum


class CompassPoint16(StrEnum):
    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"

    def into_text(self) -> str:
        return self.name

    def into_symbol(self) -> str:
        return _ARROWS[self]


# Each 8-point arrow covers its cardinal point or the three 16-point
# directions between two cardinals.
_ARROWS: dict[CompassPoint16, str] = {
    CompassPoint16.N: "↑",
    CompassPoint16.NNE: "↗",
    CompassPoint16.NE: "↗",
    CompassPoint16.ENE: "↗",
    CompassPoint16.E: "→",
    CompassPoint16.ESE: "↘",
    CompassPoint16.SE: "↘",
    CompassPoint16.SSE: "↘",
    CompassPoint16.S: "↓",
    CompassPoint16.SSW: "↙",
    CompassPoint16.SW: "↙",
    CompassPoint16.WSW: "↙",
    CompassPoint16.W: "←",
    CompassPoint16.WNW: "↖",
    CompassPoint16.NW: "↖",
    CompassPoint16.NNW: "↖",
}

# Symbols follow wttr.in's own grouping of the World Weather Online codes.
SUNNY_GLYPH = "☀"
PARTLY_CLOUDY_GLYPH = "⛅"
CLOUDY_GLYPH = "☁"
FOG_GLYPH = "🌫"
LIGHT_RAIN_GLYPH = "🌦"
HEAVY_RAIN_GLYPH = "🌧"
LIGHT_SNOW_GLYPH = "🌨"
HEAVY_SNOW_GLYPH = "❄"
THUNDERY_SHOWERS_GLYPH = "⛈"
THUNDERY_HEAVY_RAIN_GLYPH = "🌩"


class WeatherCondition(int, Enum):
    """World Weather Online condition codes as emitted by wttr.in."""

    text: str
    symbol: str

    def __new__(cls, code: int, text: str, symbol: str):
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.text = text
        obj.symbol = symbol
        return obj

    CLEAR_SUNNY = (113, "Clear/Sunny", SUNNY_GLYPH)
    PARTLY_CLOUDY = (116, "Partly cloudy", PARTLY_CLOUDY_GLYPH)
    CLOUDY = (119, "Cloudy", CLOUDY_GLYPH)
    OVERCAST = (122, "Overcast", CLOUDY_GLYPH)
    MIST = (143, "Mist", FOG_GLYPH)
    PATCHY_RAIN_POSSIBLE = (176, "Patchy rain possible", LIGHT_RAIN_GLYPH)
    PATCHY_SNOW_POSSIBLE = (179, "Patchy snow possible", HEAVY_RAIN_GLYPH)
    PATCHY_SLEET_POSSIBLE = (182, "Patchy sleet possible", HEAVY_RAIN_GLYPH)
    PATCHY_FREEZING_DRIZZLE_POSSIBLE = (185, "Patchy freezing drizzle possible", HEAVY_RAIN_GLYPH)
    THUNDERY_OUTBREAKS_POSSIBLE = (200, "Thundery outbreaks possible", THUNDERY_SHOWERS_GLYPH)
    BLOWING_SNOW = (227, "Blowing snow", LIGHT_SNOW_GLYPH)
    BLIZZARD = (230, "Blizzard", HEAVY_SNOW_GLYPH)
    FOG = (248, "Fog", FOG_GLYPH)
    FREEZING_FOG = (260, "Freezing fog", FOG_GLYPH)
    PATCHY_LIGHT_DRIZZLE = (263, "Patchy light drizzle", LIGHT_RAIN_GLYPH)
    LIGHT_DRIZZLE = (266, "Light drizzle", LIGHT_RAIN_GLYPH)
    FREEZING_DRIZZLE = (281, "Freezing drizzle", HEAVY_RAIN_GLYPH)
    HEAVY_FREEZING_DRIZZLE = (284, "Heavy freezing drizzle", HEAVY_RAIN_GLYPH)
    PATCHY_LIGHT_RAIN = (293, "Patchy light rain", LIGHT_RAIN_GLYPH)
    LIGHT_RAIN = (296, "Light rain", LIGHT_RAIN_GLYPH)
    MODERATE_RAIN_AT_TIMES = (299, "Moderate rain at times", HEAVY_RAIN_GLYPH)
    MODERATE_RAIN = (302, "Moderate rain", HEAVY_RAIN_GLYPH)
    HEAVY_RAIN_AT_TIMES = (305, "Heavy rain at times", HEAVY_RAIN_GLYPH)
    HEAVY_RAIN = (308, "Heavy rain", HEAVY_RAIN_GLYPH)
    LIGHT_FREEZING_RAIN = (311, "Light freezing rain", HEAVY_RAIN_GLYPH)
    MODERATE_OR_HEAVY_FREEZING_RAIN = (314, "Moderate or heavy freezing rain", HEAVY_RAIN_GLYPH)
    LIGHT_SLEET = (317, "Light sleet", HEAVY_RAIN_GLYPH)
    MODERATE_OR_HEAVY_SLEET = (320, "Moderate or heavy sleet", LIGHT_SNOW_GLYPH)
    PATCHY_LIGHT_SNOW = (323, "Patchy light snow", LIGHT_SNOW_GLYPH)
    LIGHT_SNOW = (326, "Light snow", LIGHT_SNOW_GLYPH)
    PATCHY_MODERATE_SNOW = (329, "Patchy moderate snow", HEAVY_SNOW_GLYPH)
    MODERATE_SNOW = (332, "Moderate snow", HEAVY_SNOW_GLYPH)
    PATCHY_HEAVY_SNOW = (335, "Patchy heavy snow", HEAVY_SNOW_GLYPH)
    HEAVY_SNOW = (338, "Heavy snow", HEAVY_SNOW_GLYPH)
    ICE_PELLETS = (350, "Ice pellets", HEAVY_RAIN_GLYPH)
    LIGHT_RAIN_SHOWER = (353, "Light rain shower", LIGHT_RAIN_GLYPH)
    MODERATE_OR_HEAVY_RAIN_SHOWER = (356, "Moderate or heavy rain shower", HEAVY_RAIN_GLYPH)
    TORRENTIAL_RAIN_SHOWER = (359, "Torrential rain shower", HEAVY_RAIN_GLYPH)
    LIGHT_SLEET_SHOWERS = (362, "Light sleet showers", HEAVY_RAIN_GLYPH)
    MODERATE_OR_HEAVY_SLEET_SHOWERS = (365, "Moderate or heavy sleet showers", HEAVY_RAIN_GLYPH)
    LIGHT_SNOW_SHOWERS = (368, "Light snow showers", LIGHT_SNOW_GLYPH)
    MODERATE_OR_HEAVY_SNOW_SHOWERS = (371, "Moderate or heavy snow showers", HEAVY_SNOW_GLYPH)
    LIGHT_SHOWERS_OF_ICE_PELLETS = (374, "Light showers of ice pellets", HEAVY_RAIN_GLYPH)
    MODERATE_OR_HEAVY_SHOWERS_OF_ICE_PELLETS = (
        377, "Moderate or heavy showers of ice pellets", HEAVY_RAIN_GLYPH,
    )
    PATCHY_LIGHT_RAIN_WITH_THUNDER = (386, "Patchy light rain with thunder", THUNDERY_SHOWERS_GLYPH)
    MODERATE_OR_HEAVY_RAIN_WITH_THUNDER = (
        389, "Moderate or heavy rain with thunder", THUNDERY_HEAVY_RAIN_GLYPH,
    )
    PATCHY_LIGHT_SNOW_WITH_THUNDER = (392, "Patchy light snow with thunder", THUNDERY_SHOWERS_GLYPH)
    MODERATE_OR_HEAVY_SNOW_WITH_THUNDER = (
        395, "Moderate or heavy snow with thunder", HEAVY_SNOW_GLYPH,
    )

    @classmethod
    def from_code(cls, code: int) -> "WeatherCondition":
        """Look up a condition by its numeric code. Raises ValueError if unknown."""
        return cls(code)

    def into_text(self) -> str:
        return self.text

    def into_symbol(self) -> str:
        return self.symbol
