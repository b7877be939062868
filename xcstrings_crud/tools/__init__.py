"""Agent tool-calling front end."""

from .registry import TOOLS, execute_tool, list_tools

__all__ = ["TOOLS", "execute_tool", "list_tools"]
