import httpx

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

# (low, high, description), inclusive
_WEATHER_RANGES = [
    (0, 0, "clear sky"),
    (1, 3, "partly cloudy"),
    (45, 45, "fog"),
    (48, 48, "fog"),
    (51, 57, "drizzle"),
    (61, 67, "rain"),
    (71, 77, "snow"),
    (80, 82, "showers"),
    (95, 96, "thunderstorm"),
    (99, 99, "thunderstorm"),
]


def describe_weather_code(code):
    """Map a WMO weathercode to a short description."""
    for low, high, description in _WEATHER_RANGES:
        if low <= code <= high:
            return description
    return "unknown weather"


def format_temperature(temperature):
    return f"{temperature:g}"


def parse_current_weather(payload):
    """Return (temperature, code) from the current_weather object only."""
    current = payload["current_weather"]
    return float(current["temperature"]), int(current["weathercode"])


async def fetch_weather(settings, client=None):
    """Fetch current conditions and return '<temp>°C, <description>'.

    Raises on network errors, non-2xx responses and malformed payloads;
    the caller decides on the fallback.
    """
    params = {
        "latitude": settings.latitude,
        "longitude": settings.longitude,
        "current_weather": "true",
    }
    if client is None:
        async with httpx.AsyncClient() as c:
            r = await c.get(FORECAST_URL, params=params)
    else:
        r = await client.get(FORECAST_URL, params=params)
    r.raise_for_status()

    temperature, code = parse_current_weather(r.json())
    return f"{format_temperature(temperature)}°C, {describe_weather_code(code)}"
