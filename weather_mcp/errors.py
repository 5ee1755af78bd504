class WeatherToolError(Exception):
    """Base class for errors reported back to the caller as error payloads."""


class ValidationError(WeatherToolError):
    pass


class UnknownToolError(WeatherToolError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ConfigurationError(WeatherToolError):
    pass
