import json
import logging
import os
import queue
import subprocess
import sys
import threading
from typing import Any, Dict, List, Optional

PROTOCOL_VERSION = "2024-11-05"
DEFAULT_SERVER_COMMAND = [sys.executable, "-m", "halden_weather.server"]


class MCPClientError(Exception):
    pass


def _file_logger(name: str, path: str, level: int) -> logging.Logger:
    """Logger writing only to `path`, attached once per file."""
    log = logging.getLogger(name)
    path = os.path.abspath(path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    if not any(
        isinstance(h, logging.FileHandler) and os.path.abspath(h.baseFilename) == path
        for h in log.handlers
    ):
        handler = logging.FileHandler(path)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        log.addHandler(handler)
    log.setLevel(level)
    # Server stderr would otherwise be echoed by the root logger as well
    log.propagate = False
    return log


class MCPStdIOClient:
    """JSON-RPC 2.0 client that runs the Halden weather server over stdio.

    Usage:
        with MCPStdIOClient() as client:
            print(client.call_tool("get-current-weather", {}))
    """

    def __init__(
        self,
        command: Optional[List[str]] = None,
        cwd: str = ".",
        timeout: float = 10.0,
        log_file: Optional[str] = None,
        log_level: int = logging.INFO,
    ):
        self.command = command or list(DEFAULT_SERVER_COMMAND)
        self.cwd = cwd
        self.timeout = timeout
        self.proc: Optional[subprocess.Popen] = None
        self.server_info: Dict[str, Any] = {}
        self._id = 0
        self._pending: Dict[int, queue.Queue] = {}
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()

        log_dir = os.environ.get("LOG_DIR", "logs")
        self.log_file = os.path.abspath(log_file or os.path.join(log_dir, "mcp_server.log"))
        self.logger = _file_logger("halden_weather.client", self.log_file, log_level)

    def __enter__(self) -> "MCPStdIOClient":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        return self.proc is not None and self.proc.poll() is None

    def start(self) -> None:
        """Spawn the server and complete the MCP initialize handshake."""
        if self.proc:
            return
        try:
            self.proc = subprocess.Popen(
                self.command,
                cwd=self.cwd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                bufsize=0,
            )
        except OSError as e:
            raise MCPClientError(f"Failed to start MCP server: {e}") from e

        threading.Thread(target=self._read_stdout, daemon=True).start()
        threading.Thread(target=self._read_stderr, daemon=True).start()

        try:
            result = self._request("initialize", {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {},
                "clientInfo": {"name": "halden-weather-client", "version": "1.0.0"},
            })
            self.server_info = (result or {}).get("serverInfo", {})
            self._notify("notifications/initialized")
        except MCPClientError:
            # A server that cannot finish the handshake must not outlive us
            self.stop()
            raise
        self.logger.info(f"[MCP client] connected to {self.server_info.get('name', 'server')}")

    def stop(self) -> None:
        if not self.proc:
            return
        proc, self.proc = self.proc, None
        proc.terminate()
        try:
            proc.wait(timeout=2)
        except subprocess.TimeoutExpired:
            proc.kill()

    def _read_stderr(self) -> None:
        proc = self.proc
        if not proc or not proc.stderr:
            return
        for line in iter(proc.stderr.readline, b""):
            msg = line.decode("utf-8", errors="replace").rstrip()
            if msg:
                self.logger.info(f"[MCP server] {msg}")

    def _read_stdout(self) -> None:
        """Dispatch newline-delimited JSON responses to their waiting callers."""
        proc = self.proc
        if not proc or not proc.stdout:
            return
        for line in iter(proc.stdout.readline, b""):
            text = line.decode("utf-8", errors="replace").strip()
            if not text:
                continue
            try:
                message = json.loads(text)
            except json.JSONDecodeError:
                self.logger.warning(f"[MCP server output] {text}")
                continue
            self._dispatch(message)

    def _dispatch(self, message: Dict[str, Any]) -> None:
        msg_id = message.get("id")
        if msg_id is None:
            # Server notification (log/progress); nothing waits on it
            return
        with self._lock:
            q = self._pending.get(msg_id)
        if q:
            q.put(message)
        else:
            self.logger.warning(f"[MCP client] response for unknown id: {msg_id}")

    def _next_id(self) -> int:
        with self._lock:
            self._id += 1
            return self._id

    def _write(self, message: Dict[str, Any]) -> None:
        if not self.running:
            raise MCPClientError("MCP server is not running")
        payload = (json.dumps(message) + "\n").encode("utf-8")
        try:
            with self._write_lock:
                self.proc.stdin.write(payload)
                self.proc.stdin.flush()
        except OSError as e:
            raise MCPClientError(f"Failed to write to MCP server: {e}") from e

    def _notify(self, method: str, params: Any = None) -> None:
        message: Dict[str, Any] = {"jsonrpc": "2.0", "method": method}
        if params is not None:
            message["params"] = params
        self._write(message)

    def _request(self, method: str, params: Any = None) -> Any:
        req_id = self._next_id()
        message: Dict[str, Any] = {"jsonrpc": "2.0", "id": req_id, "method": method}
        if params is not None:
            message["params"] = params

        q: queue.Queue = queue.Queue()
        with self._lock:
            self._pending[req_id] = q
        try:
            self._write(message)
            try:
                reply = q.get(timeout=self.timeout)
            except queue.Empty:
                raise MCPClientError(f"Timeout waiting for response to {method}")
        finally:
            with self._lock:
                self._pending.pop(req_id, None)

        if "error" in reply:
            raise MCPClientError(reply["error"].get("message", "Unknown error"))
        return reply.get("result")

    def list_tools(self) -> List[Dict[str, Any]]:
        result = self._request("tools/list", {})
        return (result or {}).get("tools", [])

    def call_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """Call a tool and return the text of its first content block."""
        result = self._request("tools/call", {"name": tool_name, "arguments": arguments or {}})
        return extract_text(result)


def extract_text(result: Any) -> str:
    """Pull the text payload out of a `tools/call` result."""
    if not isinstance(result, dict):
        return "" if result is None else str(result)
    content = result.get("content") or []
    text = ""
    if content:
        first = content[0]
        text = first.get("text", str(first)) if isinstance(first, dict) else str(first)
    if result.get("isError"):
        raise MCPClientError(text or "Tool call failed")
    return text
