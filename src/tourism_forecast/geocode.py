# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
geocode.py — Resolve a destination to coordinates.

The forecast form offers a fixed set of destination keys; anything else is
looked up with the OpenWeatherMap Geocoding API (same API key as the
forecast).
API docs: https://openweathermap.org/api/geocoding-api
"""

import requests
from tourism_forecast.utils import with_retry

GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"

KNOWN_LOCATIONS = {
    "kingston":      {"latitude": 17.97, "longitude": -76.79, "country_code": "JM", "name": "Kingston, Jamaica"},
    "montego_bay":   {"latitude": 18.47, "longitude": -77.91, "country_code": "JM", "name": "Montego Bay, Jamaica"},
    "bridgetown":    {"latitude": 13.10, "longitude": -59.61, "country_code": "BB", "name": "Bridgetown, Barbados"},
    "nassau":        {"latitude": 25.04, "longitude": -77.35, "country_code": "BS", "name": "Nassau, Bahamas"},
    "port_of_spain": {"latitude": 10.65, "longitude": -61.51, "country_code": "TT", "name": "Port of Spain, Trinidad & Tobago"},
}


class LocationNotFoundError(LookupError):
    """No coordinates could be found for a place name."""


def _location_key(place: str) -> str:
    return place.strip().lower().replace(" ", "_")


def resolve_location(place: str, api_key: str | None = None) -> dict:
    """Look up coordinates for a destination.

    Args:
        place: A destination key such as 'montego_bay' / 'Montego Bay', or
            any place name, e.g. 'Castries, LC'.
        api_key: OpenWeatherMap API key, needed only for unknown places.

    Returns:
        Dict with keys: latitude (float), longitude (float), name (str),
        country_code (str).

    Raises:
        LocationNotFoundError: If the place is unknown and the API has no
            match, or no API key was given for an unknown place.
        ProviderFetchError: If all API retry attempts fail.
    """
    known = KNOWN_LOCATIONS.get(_location_key(place))
    if known is not None:
        return dict(known)

    if not api_key:
        raise LocationNotFoundError(
            f'Location "{place}" is not a known destination and no API key was given to look it up.'
        )

    params = {
        "q": place,
        "limit": 1,
        "appid": api_key,
    }

    def _call():
        r = requests.get(GEOCODING_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    results = with_retry(_call, label=f"Geocoding API for '{place}'")

    if not results:
        raise LocationNotFoundError(f'Location "{place}" not found. Try a more specific name.')

    result = results[0]
    # Build a human-readable canonical name: "City, State, CC"
    name_parts = [result.get("name", place)]
    if result.get("state"):
        name_parts.append(result["state"])
    if result.get("country"):
        name_parts.append(result["country"])

    return {
        "latitude": result["lat"],
        "longitude": result["lon"],
        "name": ", ".join(name_parts),
        "country_code": result.get("country", ""),
    }
