"""Human readable labels for WMO weather interpretation codes."""
from __future__ import annotations

from typing import Dict, Optional

UNKNOWN_CONDITION = "Unknown"

WMO_CONDITIONS: Dict[int, str] = {
    0: "Clear",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing Rime Fog",
    51: "Light Drizzle",
    53: "Moderate Drizzle",
    55: "Dense Drizzle",
    56: "Light Freezing Drizzle",
    57: "Dense Freezing Drizzle",
    61: "Light Rain",
    63: "Moderate Rain",
    65: "Heavy Rain",
    66: "Light Freezing Rain",
    67: "Heavy Freezing Rain",
    71: "Light Snow",
    73: "Moderate Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Light Rain Showers",
    81: "Moderate Rain Showers",
    82: "Violent Rain Showers",
    85: "Light Snow Showers",
    86: "Heavy Snow Showers",
    95: "Thunderstorm",
    96: "Thunderstorm with Light Hail",
    99: "Thunderstorm with Hail",
}


def condition_for_code(code: Optional[int]) -> str:
    """Return the label for ``code`` or ``"Unknown"`` when it is not a known WMO code."""
    if code is None:
        return UNKNOWN_CONDITION
    return WMO_CONDITIONS.get(code, UNKNOWN_CONDITION)


__all__ = ["UNKNOWN_CONDITION", "WMO_CONDITIONS", "condition_for_code"]
