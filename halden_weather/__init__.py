"""Halden weather MCP server package.

Importing the package stays cheap: the clients, settings and result types are
imported eagerly, while the tool handlers and the FastMCP wiring load on first
attribute access. The agent can then import the stdio client without pulling
in the server, and `python -m halden_weather.server` runs a module that the
package has not already imported.
"""

from importlib import import_module

from .client import MCPClientError, MCPStdIOClient
from .models import Failure, Ok
from .settings import Settings

# attribute -> submodule that defines it
_LAZY = {
    "HaldenWeatherTools": ".tools",
    "build_server": ".server",
    "run_server": ".server",
}

__all__ = ["MCPStdIOClient", "MCPClientError", "Settings", "Ok", "Failure", *_LAZY]


def __getattr__(name: str):
    try:
        module = _LAZY[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
    return getattr(import_module(module, __package__), name)


def __dir__():
    return sorted(set(globals()) | set(_LAZY))
