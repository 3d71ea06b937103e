"""WMO weather code to display text mapping."""
from typing import List, Optional

# Lowercase phrases; title-cased for display
WMO_CONDITIONS = {
    0: "clear",
    1: "partly cloudy",
    2: "partly cloudy",
    3: "partly cloudy",
    45: "fog",
    48: "fog",
    51: "drizzle",
    53: "drizzle",
    55: "drizzle",
    56: "drizzle",
    57: "drizzle",
    61: "rain",
    63: "rain",
    65: "rain",
    66: "rain",
    67: "rain",
    71: "snow",
    73: "snow",
    75: "snow",
    77: "snow",
    80: "showers",
    81: "showers",
    82: "showers",
    85: "snow showers",
    86: "snow showers",
    95: "thunderstorms",
    96: "thunderstorms",
    99: "thunderstorms",
}


def wmo_to_words(code: Optional[int]) -> str:
    """
    Get the lowercase phrase for a WMO weather interpretation code.

    Args:
        code: WMO code as reported by the forecast API (None if absent)

    Returns:
        Phrase such as "partly cloudy", or "" for unknown codes
    """
    if code is None:
        return ""
    return WMO_CONDITIONS.get(int(code), "")


def title_case(phrase: str) -> str:
    """Capitalize the first letter of every word and lowercase the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in phrase.split())


def condition(code: Optional[int]) -> str:
    """Get the display text for a weather code ("Partly Cloudy"), "" if unknown."""
    return title_case(wmo_to_words(code))


def condition_words(phrase: str, limit: int = 3) -> List[str]:
    """Lowercased leading words of a condition phrase, used to look up audio clips."""
    return [word.lower() for word in phrase.split()[:limit]]
