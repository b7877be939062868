"""Tool listing and tool call endpoints."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel

from .registry import TOOLS, execute_tool, list_tools

logger = logging.getLogger(__name__)

router = APIRouter()


# Response models
class ToolDescription(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ToolCallResult(BaseModel):
    content: str
    isError: bool = False


@router.get("/health")
def health():
    return {"status": "ok", "tools": len(TOOLS)}


@router.get("/tools", response_model=list[ToolDescription])
def get_tools():
    """List every registered tool with its argument schema."""
    return list_tools()


@router.post("/tools/{name}", response_model=ToolCallResult)
def call_tool(name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
    """Run a tool. Failures come back as an error result, not an HTTP error."""
    if name not in TOOLS:
        raise HTTPException(404, f"Unknown tool: {name}")

    logger.debug("Calling %s with %s", name, arguments)
    content, is_error = execute_tool(name, arguments)
    return ToolCallResult(content=content, isError=is_error)
