import asyncio
import logging
import sys
from contextlib import asynccontextmanager

import mcp.types as types
import uvicorn
from fastapi import FastAPI
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from weather_mcp import __version__
from weather_mcp.config import Settings
from weather_mcp.dispatcher import WeatherToolDispatcher
from weather_mcp.errors import ConfigurationError
from weather_mcp.models import HealthResponse
from weather_mcp.tools import TOOL_LIST

SERVER_NAME = "weather-server"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    # stderr only: stdout carries the stdio transport
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, which include the WeatherAPI key
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_server(dispatcher: WeatherToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return TOOL_LIST

    # Arguments are validated by the dispatcher so the caller gets its messages
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
        result = await dispatcher.dispatch(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.text)],
            isError=result.is_error,
        )

    return server


# ── Transports ───────────────────────────────────────────────────────────────

async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Weather MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def create_http_app(settings: Settings, server: Server) -> FastAPI:
    """FastAPI app with ``/health`` and the streamable-HTTP MCP endpoint at ``/mcp/``."""
    session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with session_manager.run():
            logger.info("Weather MCP Server running on http://%s:%d/mcp/", settings.host, settings.port)
            yield

    app = FastAPI(
        title="Weather MCP Server",
        description="MCP tools for current weather, forecasts and US weather alerts.",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            api_key_configured=settings.api_key_configured,
            tools=[tool.name for tool in TOOL_LIST],
        )

    async def handle_mcp(scope, receive, send) -> None:
        await session_manager.handle_request(scope, receive, send)

    app.mount("/mcp", app=handle_mcp)
    return app


# ── Entry point ──────────────────────────────────────────────────────────────

def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("Fatal configuration error: %s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    if not settings.api_key_configured:
        logger.warning(
            "WEATHER_API_KEY is not set. "
            "get_current_weather and get_forecast will fail until the key is configured."
        )

    server = build_server(WeatherToolDispatcher(settings))

    try:
        if settings.transport == "http":
            uvicorn.run(create_http_app(settings, server), host=settings.host, port=settings.port)
        else:
            asyncio.run(run_stdio(server))
    except Exception:
        logger.error("Fatal error in main()", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
