import mcp.types as types

GET_CURRENT_WEATHER = "get_current_weather"
GET_FORECAST = "get_forecast"
GET_ALERTS = "get-alerts"

_LOCATION_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Location name (e.g., 'London', 'New York', 'Tokyo', 'Paris')",
        },
    },
    "required": ["name"],
}

CURRENT_WEATHER_TOOL = types.Tool(
    name=GET_CURRENT_WEATHER,
    description="Get current weather for any location worldwide",
    inputSchema=_LOCATION_SCHEMA,
)

FORECAST_TOOL = types.Tool(
    name=GET_FORECAST,
    description="Get 5-day weather forecast for any location worldwide",
    inputSchema=_LOCATION_SCHEMA,
)

ALERTS_TOOL = types.Tool(
    name=GET_ALERTS,
    description="Get weather alerts for a US state (US only)",
    inputSchema={
        "type": "object",
        "properties": {
            "state": {
                "type": "string",
                "description": "Two-letter US state code (e.g., 'CA', 'NY')",
            },
        },
        "required": ["state"],
    },
)

TOOL_LIST = [CURRENT_WEATHER_TOOL, FORECAST_TOOL, ALERTS_TOOL]
