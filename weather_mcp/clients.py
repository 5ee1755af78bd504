import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from weather_mcp.config import Settings

logger = logging.getLogger(__name__)

GEO_JSON = "application/geo+json"


class UpstreamUnavailable(Exception):
    """Upstream answered with a non-2xx status or an unusable body."""


@dataclass(frozen=True)
class UpstreamResult:
    """Either the decoded JSON object from a provider, or nothing."""

    data: Optional[dict[str, Any]] = None

    @property
    def available(self) -> bool:
        return self.data is not None


UNAVAILABLE = UpstreamResult()


async def _get_json(
    url: str,
    params: dict[str, str],
    headers: dict[str, str],
    timeout: float,
    client: Optional[httpx.AsyncClient],
) -> dict[str, Any]:
    if client is None:
        async with httpx.AsyncClient() as own_client:
            response = await own_client.get(url, params=params, headers=headers, timeout=timeout)
    else:
        response = await client.get(url, params=params, headers=headers, timeout=timeout)

    if not response.is_success:
        raise UpstreamUnavailable(f"status: {response.status_code}")

    data = response.json()
    if not isinstance(data, dict):
        raise UpstreamUnavailable(f"expected a JSON object, got {type(data).__name__}")
    return data


async def fetch_weatherapi(
    settings: Settings,
    endpoint: str,
    params: dict[str, str],
    client: Optional[httpx.AsyncClient] = None,
) -> UpstreamResult:
    """GET ``<weather_api_base>/<endpoint>`` from WeatherAPI.com.

    Raises ConfigurationError when no API key is configured. Every other
    failure (network, status, JSON) is logged and returned as UNAVAILABLE.
    """
    api_key = settings.require_weather_api_key()
    url = f"{settings.weather_api_base.rstrip('/')}/{endpoint}"
    query = {"key": api_key, **params}

    try:
        data = await _get_json(url, query, {}, settings.http_timeout, client)
    except httpx.TimeoutException:
        logger.error("WeatherAPI request timed out: endpoint=%s q=%r", endpoint, params.get("q"))
        return UNAVAILABLE
    except (httpx.HTTPError, UpstreamUnavailable, ValueError) as exc:
        logger.error("Error making WeatherAPI request: endpoint=%s q=%r: %s", endpoint, params.get("q"), exc)
        return UNAVAILABLE

    return UpstreamResult(data)


async def fetch_nws_alerts(
    settings: Settings,
    state: str,
    client: Optional[httpx.AsyncClient] = None,
) -> UpstreamResult:
    """GET active alerts for one area code from the National Weather Service."""
    url = f"{settings.nws_api_base.rstrip('/')}/alerts/active"
    headers = {"User-Agent": settings.user_agent, "Accept": GEO_JSON}

    try:
        data = await _get_json(url, {"area": state}, headers, settings.http_timeout, client)
    except httpx.TimeoutException:
        logger.error("NWS request timed out: area=%s", state)
        return UNAVAILABLE
    except (httpx.HTTPError, UpstreamUnavailable, ValueError) as exc:
        logger.error("Error making NWS request: area=%s: %s", state, exc)
        return UNAVAILABLE

    return UpstreamResult(data)
