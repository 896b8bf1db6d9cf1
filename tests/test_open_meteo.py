import httpx
import pytest

from morning.integrations.open_meteo import (
    describe_weather_code,
    fetch_weather,
    parse_current_weather,
)

DESCRIPTIONS = {
    "clear sky", "partly cloudy", "fog", "drizzle", "rain",
    "snow", "showers", "thunderstorm", "unknown weather",
}


@pytest.mark.parametrize("code, expected", [
    (0, "clear sky"),
    (2, "partly cloudy"),
    (3, "partly cloudy"),
    (45, "fog"),
    (48, "fog"),
    (47, "unknown weather"),
    (55, "drizzle"),
    (63, "rain"),
    (77, "snow"),
    (81, "showers"),
    (96, "thunderstorm"),
    (97, "unknown weather"),
    (14, "unknown weather"),
    (-1, "unknown weather"),
])
def test_describe_weather_code(code, expected):
    assert describe_weather_code(code) == expected


def test_every_code_maps_to_known_description():
    assert {describe_weather_code(code) for code in range(-5, 120)} <= DESCRIPTIONS


def test_only_current_weather_is_consulted():
    payload = {
        "latitude": 55.75,
        "hourly": {"temperature_2m": [1, 2, 3]},
        "current_weather": {"temperature": 3.4, "weathercode": 61, "windspeed": 10.0},
    }
    assert parse_current_weather(payload) == (3.4, 61)


async def test_fetch_weather_formats_reading(settings, make_client):
    client = make_client(lambda request: httpx.Response(
        200, json={"current_weather": {"temperature": 12.5, "weathercode": 2}},
    ))

    assert await fetch_weather(settings, client=client) == "12.5°C, partly cloudy"

    (request,) = client.requests
    assert request.method == "GET"
    assert request.url.host == "api.open-meteo.com"
    assert request.url.params["latitude"] == "55.7558"
    assert request.url.params["longitude"] == "37.6173"
    assert request.url.params["current_weather"] == "true"


async def test_whole_degrees_have_no_decimal(settings, make_client):
    client = make_client(lambda request: httpx.Response(
        200, json={"current_weather": {"temperature": -3.0, "weathercode": 71}},
    ))
    assert await fetch_weather(settings, client=client) == "-3°C, snow"


async def test_malformed_payload_raises(settings, make_client):
    client = make_client(lambda request: httpx.Response(200, json={"hourly": {}}))
    with pytest.raises(KeyError):
        await fetch_weather(settings, client=client)


async def test_error_status_raises(settings, make_client):
    client = make_client(lambda request: httpx.Response(503))
    with pytest.raises(httpx.HTTPStatusError):
        await fetch_weather(settings, client=client)
