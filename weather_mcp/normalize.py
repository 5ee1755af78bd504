"""Pure mappings from provider response shapes to the stable output models.

Each function raises KeyError, TypeError or pydantic's ValidationError when the
payload does not have the expected shape.
"""
from typing import Any, Optional

from weather_mcp.models import (
    AlertModel,
    AlertsResponse,
    Coordinates,
    CurrentConditionsModel,
    CurrentWeatherResponse,
    ForecastDayModel,
    ForecastResponse,
    ForecastTemperatureModel,
    ForecastWindModel,
    LocationModel,
    TemperatureModel,
    WindModel,
)

FORECAST_DAYS = 5

ALERT_FIELDS = ("event", "headline", "severity", "urgency", "certainty", "areaDesc")


def to_location(loc: dict[str, Any]) -> LocationModel:
    return LocationModel(
        name=loc["name"],
        region=loc["region"],
        country=loc["country"],
        coordinates=Coordinates(lat=loc["lat"], lon=loc["lon"]),
    )


def to_current_weather(data: dict[str, Any]) -> CurrentWeatherResponse:
    """WeatherAPI.com ``current.json`` → CurrentWeatherResponse."""
    current = data["current"]
    return CurrentWeatherResponse(
        location=to_location(data["location"]),
        current=CurrentConditionsModel(
            temperature=TemperatureModel(celsius=current["temp_c"], fahrenheit=current["temp_f"]),
            feels_like=TemperatureModel(
                celsius=current["feelslike_c"], fahrenheit=current["feelslike_f"]
            ),
            condition=current["condition"]["text"],
            wind=WindModel(
                mph=current["wind_mph"],
                kph=current["wind_kph"],
                direction=current["wind_dir"],
            ),
            humidity=current["humidity"],
            pressure_mb=current["pressure_mb"],
        ),
    )


def to_forecast_day(entry: dict[str, Any]) -> ForecastDayModel:
    day = entry["day"]
    return ForecastDayModel(
        date=entry["date"],
        temperature=ForecastTemperatureModel(
            max_celsius=day["maxtemp_c"],
            max_fahrenheit=day["maxtemp_f"],
            min_celsius=day["mintemp_c"],
            min_fahrenheit=day["mintemp_f"],
            avg_celsius=day["avgtemp_c"],
            avg_fahrenheit=day["avgtemp_f"],
        ),
        condition=day["condition"]["text"],
        wind=ForecastWindModel(max_mph=day["maxwind_mph"], max_kph=day["maxwind_kph"]),
        chance_of_rain=day["daily_chance_of_rain"],
    )


def to_forecast(data: dict[str, Any]) -> ForecastResponse:
    """WeatherAPI.com ``forecast.json`` → ForecastResponse, provider order kept."""
    days = data["forecast"]["forecastday"]
    return ForecastResponse(
        location=to_location(data["location"]),
        forecast=[to_forecast_day(entry) for entry in days[:FORECAST_DAYS]],
    )


def to_alert(feature: dict[str, Any]) -> AlertModel:
    props = feature["properties"]
    return AlertModel(**{field: props.get(field) for field in ALERT_FIELDS})


def alert_features(data: dict[str, Any]) -> Optional[list[dict[str, Any]]]:
    """The GeoJSON ``features`` list, or None when the payload has none."""
    features = data.get("features")
    if not isinstance(features, list):
        return None
    return features


def to_alerts(state: str, features: list[dict[str, Any]]) -> AlertsResponse:
    return AlertsResponse(state=state, alerts=[to_alert(feature) for feature in features])
