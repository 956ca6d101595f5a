"""Tool metadata registry shared by the MCP server and the agent.

Handlers are declared with `@tool(...)`, which only records metadata; the MCP
SDK is not imported here. `server.build_server()` later binds the recorded
handlers to a FastMCP instance.
"""

import json
import logging
from typing import Callable, Iterable, Iterator

logger = logging.getLogger("halden_weather.registry")

NO_ARGS_SCHEMA = {"type": "object", "properties": {}, "additionalProperties": False}

# Declaration order is the order tools are listed to clients.
_TOOL_SPECS: list[dict] = []
_REGISTERED_FUNCS: list[Callable] = []


def tool(name: str, schema: dict | None = None):
    """Record `fn` as the handler of the tool called `name`.

    The description is taken from the first paragraph of the docstring.
    """
    def decorator(fn):
        doc = (fn.__doc__ or "").strip()
        spec = {
            "name": name,
            "description": doc.split("\n\n")[0].strip(),
            "input_schema": schema or NO_ARGS_SCHEMA,
        }
        _TOOL_SPECS.append(spec)
        _REGISTERED_FUNCS.append(fn)
        setattr(fn, "__tool_spec__", spec)
        return fn
    return decorator


def _selected(enabled: Iterable[str] | None) -> set[str] | None:
    if not enabled:
        return None
    wanted = set(enabled)
    known = {s["name"] for s in _TOOL_SPECS}
    for name in sorted(wanted - known):
        logger.warning(f"[Registry] ignoring unknown tool {name!r}")
    return wanted & known


def registered_tools(enabled: Iterable[str] | None = None) -> Iterator[tuple[Callable, dict]]:
    """Yield `(handler, spec)` pairs, limited to `enabled` when given."""
    selected = _selected(enabled)
    for fn, spec in zip(_REGISTERED_FUNCS, _TOOL_SPECS):
        if selected is None or spec["name"] in selected:
            yield fn, dict(spec)


def get_tool_specs(enabled: Iterable[str] | None = None) -> list[dict]:
    """Return copies of the registered tool specs."""
    return [spec for _, spec in registered_tools(enabled)]


def export_tools_json(path: str = "tools.json", enabled: Iterable[str] | None = None) -> None:
    """Write the exported tool metadata to a JSON file."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(get_tool_specs(enabled), fh, indent=2, ensure_ascii=False)
