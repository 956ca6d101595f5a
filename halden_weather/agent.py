#!/usr/bin/env python3
"""
Halden Assistant Agent
An MCP-powered agent that answers natural language questions with the Halden weather tools.
"""

import json
import logging
import os
import sys
from typing import Any, Dict

from .client import MCPClientError, MCPStdIOClient
from .prompts import SYSTEM_PROMPT, build_tools
from .settings import Settings

agent_logger = logging.getLogger("halden_weather.agent")

APOLOGY = "I encountered an error processing your request."


def configure_agent_logging(settings: Settings) -> None:
    """Tool calls and results go to LOG_DIR/agent_tools.log only."""
    os.makedirs(settings.log_dir, exist_ok=True)
    path = os.path.abspath(os.path.join(settings.log_dir, "agent_tools.log"))
    if not any(isinstance(h, logging.FileHandler) and os.path.abspath(h.baseFilename) == path
               for h in agent_logger.handlers):
        handler = logging.FileHandler(path)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        agent_logger.addHandler(handler)
    agent_logger.setLevel(logging.INFO)
    agent_logger.propagate = False


class HaldenAgent:
    def __init__(self, settings: Settings | None = None, llm=None, mcp_client=None):
        self.settings = settings or Settings.from_env()
        if llm is None:
            import anthropic
            llm = anthropic.Anthropic()
        self.llm = llm
        self.mcp_client = mcp_client
        self.tools = build_tools(self.settings.enabled_tools)
        self.conversation_history: list[Dict[str, Any]] = []

    def start_mcp_server(self) -> None:
        """Start the Halden weather server via the stdio JSON-RPC client."""
        if self.mcp_client is None:
            self.mcp_client = MCPStdIOClient()
        self.mcp_client.start()
        agent_logger.info("MCP Halden Weather Server started")

    def stop_mcp_server(self) -> None:
        if self.mcp_client:
            self.mcp_client.stop()
            self.mcp_client = None
            agent_logger.info("MCP Halden Weather Server stopped")

    def call_mcp_tool(self, tool_name: str, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Call a server tool; errors are returned to the model, not raised."""
        if not self.mcp_client:
            return {"error": "MCP server not started"}
        try:
            return {"result": self.mcp_client.call_tool(tool_name, parameters)}
        except MCPClientError as e:
            return {"error": str(e)}

    def _run_tools(self, content) -> list[Dict[str, Any]]:
        results = []
        for block in content:
            if block.type != "tool_use":
                continue
            agent_logger.info(f"Agent tool call: {block.name} - Parameters: {block.input}")
            result = self.call_mcp_tool(block.name, block.input)
            agent_logger.info(f"Agent tool result: {block.name} - Result: {result}")
            results.append({
                "type": "tool_result",
                "tool_use_id": block.id,
                "content": json.dumps(result, ensure_ascii=False),
            })
        return results

    def chat(self, user_message: str) -> str:
        """Process a user message and return the agent's response."""
        self.conversation_history.append({"role": "user", "content": user_message})

        # Keep calling the model until it stops asking for tools
        while True:
            response = self.llm.messages.create(
                model=self.settings.agent_model,
                max_tokens=4096,
                system=SYSTEM_PROMPT,
                tools=self.tools,
                messages=self.conversation_history,
            )

            if response.stop_reason == "tool_use":
                self.conversation_history.append({"role": "assistant", "content": response.content})
                self.conversation_history.append({"role": "user", "content": self._run_tools(response.content)})
            elif response.stop_reason == "end_turn":
                final_response = "".join(
                    block.text for block in response.content if getattr(block, "text", None)
                )
                self.conversation_history.append({"role": "assistant", "content": final_response})
                return final_response
            else:
                agent_logger.warning(f"Unexpected stop reason: {response.stop_reason}")
                # Close the turn so the next user message does not follow a user turn
                self.conversation_history.append({"role": "assistant", "content": APOLOGY})
                return APOLOGY


def main():
    settings = Settings.from_env()
    configure_agent_logging(settings)

    print("=" * 60)
    print(f"🌤️  {settings.location_name} Assistant Agent")
    print("=" * 60)
    print("\nAsk me about the weather or what to do in Halden!")
    print("Commands: 'quit' or 'exit' to stop\n")

    agent = HaldenAgent(settings)
    try:
        agent.start_mcp_server()
    except MCPClientError:
        agent_logger.exception("Failed to start MCP server")
        print("✗ Failed to start MCP server (see agent log for details).")
        agent.stop_mcp_server()
        sys.exit(1)

    try:
        while True:
            user_input = input("\n💬 You: ").strip()
            if user_input.lower() in ["quit", "exit", "bye"]:
                print("\n👋 Goodbye!")
                break
            if not user_input:
                continue
            print("\n🤔 Agent thinking...")
            print(f"\n🌤️  Agent: {agent.chat(user_input)}")
    except (KeyboardInterrupt, EOFError):
        print("\n\n👋 Goodbye!")
    finally:
        agent.stop_mcp_server()


if __name__ == "__main__":
    main()
