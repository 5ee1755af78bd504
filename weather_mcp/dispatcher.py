import logging
import re
from typing import Any, Awaitable, Callable, Optional

import httpx
from pydantic import BaseModel, Field

from weather_mcp.clients import fetch_nws_alerts, fetch_weatherapi
from weather_mcp.config import Settings
from weather_mcp.errors import UnknownToolError, ValidationError, WeatherToolError
from weather_mcp.normalize import FORECAST_DAYS, alert_features, to_alerts, to_current_weather, to_forecast
from weather_mcp.tools import GET_ALERTS, GET_CURRENT_WEATHER, GET_FORECAST

logger = logging.getLogger(__name__)

_STATE_CODE = re.compile(r"^[A-Za-z]{2}$")

# Raised by the normalize mappers when a 2xx payload has an unexpected shape
_MALFORMED = (KeyError, TypeError, AttributeError, ValueError)


class ToolRequest(BaseModel):
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    text: str
    is_error: bool = False


def _to_json(model: BaseModel) -> str:
    return model.model_dump_json(indent=2)


def _require_string(arguments: dict[str, Any], key: str, message: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value


class WeatherToolDispatcher:
    """Validates a tool call, runs its handler and shapes the payload.

    Dispatch-level failures come back as error-flagged results; upstream
    absences come back as plain informational text.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.http_client = http_client
        self._handlers: dict[str, Callable[[dict[str, Any]], Awaitable[ToolResult]]] = {
            GET_CURRENT_WEATHER: self._get_current_weather,
            GET_FORECAST: self._get_forecast,
            GET_ALERTS: self._get_alerts,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def dispatch(self, name: str, arguments: Optional[dict[str, Any]] = None) -> ToolResult:
        return await self.handle(ToolRequest(name=name, arguments=arguments or {}))

    async def handle(self, request: ToolRequest) -> ToolResult:
        logger.info("Incoming tool call: name=%s arguments=%r", request.name, request.arguments)
        try:
            handler = self._handlers.get(request.name)
            if handler is None:
                raise UnknownToolError(request.name)
            return await handler(request.arguments)
        except WeatherToolError as exc:
            logger.warning("Tool call %s rejected: %s", request.name, exc)
            return ToolResult(text=f"Error: {exc}", is_error=True)
        except Exception as exc:
            logger.error("Unexpected exception in tool call %s", request.name, exc_info=True)
            return ToolResult(text=f"Error: {exc}", is_error=True)

    # ── Handlers ─────────────────────────────────────────────────────────────

    async def _get_current_weather(self, arguments: dict[str, Any]) -> ToolResult:
        location = _require_string(arguments, "name", "Location name is required")
        unavailable = ToolResult(text=f"Could not fetch weather data for: {location}")

        result = await fetch_weatherapi(
            self.settings, "current.json", {"q": location, "aqi": "no"}, self.http_client
        )
        if not result.available:
            return unavailable

        try:
            report = to_current_weather(result.data)
        except _MALFORMED as exc:
            logger.warning("Unexpected current.json shape for %r: %s", location, exc)
            return unavailable
        return ToolResult(text=_to_json(report))

    async def _get_forecast(self, arguments: dict[str, Any]) -> ToolResult:
        location = _require_string(arguments, "name", "Location name is required")
        unavailable = ToolResult(text=f"Could not fetch forecast data for: {location}")

        params = {"q": location, "days": str(FORECAST_DAYS), "aqi": "no", "alerts": "no"}
        result = await fetch_weatherapi(self.settings, "forecast.json", params, self.http_client)
        if not result.available:
            return unavailable

        try:
            report = to_forecast(result.data)
        except _MALFORMED as exc:
            logger.warning("Unexpected forecast.json shape for %r: %s", location, exc)
            return unavailable
        return ToolResult(text=_to_json(report))

    async def _get_alerts(self, arguments: dict[str, Any]) -> ToolResult:
        raw_state = _require_string(arguments, "state", "State code is required")
        if not _STATE_CODE.match(raw_state.strip()):
            raise ValidationError(f"State code must be a two-letter code, got {raw_state!r}")
        state = raw_state.strip().upper()
        no_data = ToolResult(text=f"No alerts data available for {state}")

        result = await fetch_nws_alerts(self.settings, state, self.http_client)
        if not result.available:
            return no_data

        features = alert_features(result.data)
        if features is None:
            return no_data
        if not features:
            return ToolResult(text=f"No active alerts for {state}")

        try:
            report = to_alerts(state, features)
        except _MALFORMED as exc:
            logger.warning("Unexpected alerts shape for %s: %s", state, exc)
            return no_data
        return ToolResult(text=_to_json(report))
