"""MCP server entry point: `python -m halden_weather.server`."""

import logging
import os
import sys
from contextlib import asynccontextmanager

from .registry import registered_tools
from .settings import Settings
from .tools import HaldenWeatherTools

logger = logging.getLogger("halden_weather.server")

SERVER_NAME = "halden-weather"


def configure_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Send diagnostics to stderr and to LOG_DIR; stdout carries the protocol."""
    os.makedirs(settings.log_dir, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(os.path.join(settings.log_dir, "halden_weather_server.log")),
        ],
    )


def log_readiness(settings: Settings) -> None:
    logger.info(f"🌤️  {settings.location_name} Weather MCP Server running...")
    logger.info("   📡 YR API: ✅ Ready")
    if settings.search_enabled:
        logger.info("   🔍 Search: ✅ Ready")
    else:
        logger.info("   🔍 Search: ❌ Disabled (no API key)")


def build_server(settings: Settings, tools: HaldenWeatherTools | None = None):
    """Create the FastMCP instance and register the enabled tools on it."""
    # Imported here so the rest of the package works without touching the SDK
    from mcp.server.fastmcp import FastMCP

    tools = tools or HaldenWeatherTools(settings)

    @asynccontextmanager
    async def announce(_server):
        # Runs once the transport is connected
        log_readiness(settings)
        yield {}

    m = FastMCP(SERVER_NAME, lifespan=announce)
    for fn, spec in registered_tools(settings.enabled_tools):
        m.tool(name=spec["name"], description=spec["description"])(getattr(tools, fn.__name__))
    return m


def run_server(settings: Settings | None = None, transport: str = "stdio") -> None:
    """Run the MCP server (convenience wrapper)."""
    settings = settings or Settings.from_env()
    build_server(settings).run(transport=transport)


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    try:
        run_server(settings)
    except Exception as e:
        logger.critical(f"💥 Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
