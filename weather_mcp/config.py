import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from weather_mcp.errors import ConfigurationError

# .env in the project root (one level above weather_mcp/)
DEFAULT_ENV_FILE = Path(__file__).parent.parent / ".env"

WEATHER_API_BASE = "https://api.weatherapi.com/v1"
NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"


class Settings(BaseModel):
    """Process-wide configuration, built once at startup and passed explicitly."""

    model_config = ConfigDict(frozen=True)

    weather_api_key: Optional[str] = None
    weather_api_base: str = WEATHER_API_BASE
    nws_api_base: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    http_timeout: float = 10.0
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        load_dotenv(dotenv_path=env_file or DEFAULT_ENV_FILE)

        values = {
            "weather_api_key": os.getenv("WEATHER_API_KEY") or None,
            "weather_api_base": os.getenv("WEATHER_API_BASE", WEATHER_API_BASE),
            "nws_api_base": os.getenv("NWS_API_BASE", NWS_API_BASE),
            "user_agent": os.getenv("NWS_USER_AGENT", USER_AGENT),
            "http_timeout": os.getenv("HTTP_TIMEOUT", "10.0"),
            "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
            "transport": os.getenv("MCP_TRANSPORT", "stdio").lower(),
            "host": os.getenv("MCP_HOST", "0.0.0.0"),
            "port": os.getenv("MCP_PORT", "8000"),
        }
        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
            raise ConfigurationError(f"Invalid configuration for: {fields}") from exc

    @property
    def api_key_configured(self) -> bool:
        return bool(self.weather_api_key)

    def require_weather_api_key(self) -> str:
        if not self.weather_api_key:
            raise ConfigurationError("WEATHER_API_KEY environment variable is required")
        return self.weather_api_key
