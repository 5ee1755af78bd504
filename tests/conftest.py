"""Shared fixtures: settings objects and recorded-style provider payloads."""
import pytest

from weather_mcp.config import Settings
from weather_mcp.dispatcher import WeatherToolDispatcher


def _forecast_day(date: str, max_c: float, max_f: float, text: str, rain: int) -> dict:
    return {
        "date": date,
        "date_epoch": 1760745600,
        "day": {
            "maxtemp_c": max_c,
            "maxtemp_f": max_f,
            "mintemp_c": max_c - 6.0,
            "mintemp_f": round(max_f - 10.8, 1),
            "avgtemp_c": max_c - 3.0,
            "avgtemp_f": round(max_f - 5.4, 1),
            "maxwind_mph": 11.2,
            "maxwind_kph": 18.0,
            "totalprecip_mm": 0.4,
            "avghumidity": 78,
            "daily_will_it_rain": 1,
            "daily_chance_of_rain": rain,
            "condition": {"text": text, "icon": "//cdn.weatherapi.com/weather/64x64/day/176.png", "code": 1063},
            "uv": 2.0,
        },
        "astro": {"sunrise": "07:24 AM", "sunset": "06:01 PM"},
        "hour": [],
    }


LOCATION = {
    "name": "London",
    "region": "City of London, Greater London",
    "country": "United Kingdom",
    "lat": 51.52,
    "lon": -0.11,
    "tz_id": "Europe/London",
    "localtime_epoch": 1760788800,
    "localtime": "2026-10-18 13:00",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(weather_api_key="test_key")


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(weather_api_key=None)


@pytest.fixture
def dispatcher(settings) -> WeatherToolDispatcher:
    return WeatherToolDispatcher(settings)


@pytest.fixture
def current_payload() -> dict:
    return {
        "location": dict(LOCATION),
        "current": {
            "last_updated": "2026-10-18 12:45",
            "temp_c": 14.0,
            "temp_f": 57.2,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png", "code": 1003},
            "wind_mph": 9.4,
            "wind_kph": 15.1,
            "wind_degree": 220,
            "wind_dir": "SW",
            "pressure_mb": 1012.0,
            "pressure_in": 29.88,
            "precip_mm": 0.0,
            "humidity": 72,
            "cloud": 50,
            "feelslike_c": 12.8,
            "feelslike_f": 55.0,
            "uv": 3.0,
        },
    }


@pytest.fixture
def forecast_payload() -> dict:
    days = [
        _forecast_day("2026-10-18", 15.2, 59.4, "Patchy rain nearby", 87),
        _forecast_day("2026-10-19", 13.1, 55.6, "Moderate rain", 92),
        _forecast_day("2026-10-20", 12.4, 54.3, "Overcast", 20),
        _forecast_day("2026-10-21", 14.8, 58.6, "Sunny", 0),
        _forecast_day("2026-10-22", 16.0, 60.8, "Partly cloudy", 10),
    ]
    return {"location": dict(LOCATION), "current": {}, "forecast": {"forecastday": days}}


@pytest.fixture
def alerts_payload() -> dict:
    return {
        "type": "FeatureCollection",
        "title": "Current watches, warnings, and advisories for California",
        "features": [
            {
                "id": "https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.1",
                "type": "Feature",
                "properties": {
                    "event": "Red Flag Warning",
                    "headline": "Red Flag Warning issued October 18 at 3:12AM PDT by NWS Los Angeles CA",
                    "description": "Gusty winds and low humidity.",
                    "severity": "Severe",
                    "urgency": "Expected",
                    "certainty": "Likely",
                    "areaDesc": "Los Angeles County Mountains",
                },
            },
            {
                "id": "https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.2",
                "type": "Feature",
                "properties": {
                    "event": "Wind Advisory",
                    "headline": "Wind Advisory issued October 18 at 2:40AM PDT by NWS San Diego CA",
                    "description": "Northeast winds 20 to 30 mph.",
                    "severity": "Moderate",
                    "urgency": "Expected",
                    "certainty": "Likely",
                    "areaDesc": "San Diego County Valleys",
                },
            },
        ],
    }
