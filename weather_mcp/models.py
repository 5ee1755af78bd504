from typing import Optional, Union

from pydantic import BaseModel

# Provider numbers pass through untouched (no int -> float coercion)
Number = Union[int, float]


# ── Shared ───────────────────────────────────────────────────────────────────

class Coordinates(BaseModel):
    lat: Number
    lon: Number


class LocationModel(BaseModel):
    name: str
    region: str
    country: str
    coordinates: Coordinates


class TemperatureModel(BaseModel):
    celsius: Number
    fahrenheit: Number


# ── get_current_weather ──────────────────────────────────────────────────────

class WindModel(BaseModel):
    mph: Number
    kph: Number
    direction: str


class CurrentConditionsModel(BaseModel):
    temperature: TemperatureModel
    feels_like: TemperatureModel
    condition: str
    wind: WindModel
    humidity: Number
    pressure_mb: Number


class CurrentWeatherResponse(BaseModel):
    location: LocationModel
    current: CurrentConditionsModel


# ── get_forecast ─────────────────────────────────────────────────────────────

class ForecastTemperatureModel(BaseModel):
    max_celsius: Number
    max_fahrenheit: Number
    min_celsius: Number
    min_fahrenheit: Number
    avg_celsius: Number
    avg_fahrenheit: Number


class ForecastWindModel(BaseModel):
    max_mph: Number
    max_kph: Number


class ForecastDayModel(BaseModel):
    date: str
    temperature: ForecastTemperatureModel
    condition: str
    wind: ForecastWindModel
    chance_of_rain: Number


class ForecastResponse(BaseModel):
    location: LocationModel
    forecast: list[ForecastDayModel]


# ── get-alerts ───────────────────────────────────────────────────────────────

class AlertModel(BaseModel):
    event: Optional[str] = None
    headline: Optional[str] = None
    severity: Optional[str] = None
    urgency: Optional[str] = None
    certainty: Optional[str] = None
    areaDesc: Optional[str] = None


class AlertsResponse(BaseModel):
    state: str
    alerts: list[AlertModel]


class HealthResponse(BaseModel):
    status: str
    api_key_configured: bool
    tools: list[str]
