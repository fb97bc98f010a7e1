"""Reduce a wttr.in j1 payload to the normalized 8-field weather record."""

import json
from typing import Any

from wttr.errors import ExtractionFailed

# Output key -> path into the j1 payload, and whether the value is numeric.
EXTRACTION: dict[str, tuple[tuple[str | int, ...], bool]] = {
    "area": (("nearest_area", 0, "areaName", 0, "value"), False),
    "temp": (("current_condition", 0, "temp_C"), True),
    "sens": (("current_condition", 0, "FeelsLikeC"), True),
    "max": (("weather", 0, "maxtempC"), True),
    "min": (("weather", 0, "mintempC"), True),
    "code": (("current_condition", 0, "weatherCode"), True),
    "winddir16Point": (("current_condition", 0, "winddir16Point"), False),
    "windspeed": (("current_condition", 0, "windspeedKmph"), True),
}


def extract_record(raw: dict) -> str:
    """Apply the fixed extraction to a raw payload and return normalized JSON text.

    Numeric fields arrive as strings ("12") and are coerced to integers;
    area and wind direction stay strings.
    """
    record: dict[str, Any] = {}
    for key, (path, numeric) in EXTRACTION.items():
        value = _lookup(raw, path)
        record[key] = _to_number(key, value) if numeric else value
    return json.dumps(record, ensure_ascii=False)


def _lookup(raw: Any, path: tuple[str | int, ...]) -> Any:
    node = raw
    for step in path:
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError) as e:
            dotted = ".".join(str(p) for p in path)
            raise ExtractionFailed(f"Payload has no value at {dotted}") from e
    return node


def _to_number(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ExtractionFailed(f"Field '{key}' is not numeric: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ExtractionFailed(f"Field '{key}' is not numeric: {value!r}") from e
