"""
Named analysis tools and the MCP-style request dispatcher.

Each tool pairs an input model with an analyzer and exposes the JSON
schema of its input, so a tool host can list the tools and call them by
name with plain JSON arguments.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from financial_analysis.calculations import amortization, lease
from financial_analysis.calculations.schemas import (
    AmortizationInput,
    AnalysisResult,
    LeaseInput,
)
from financial_analysis.config import Settings, get_settings

logger = logging.getLogger(__name__)

METHOD_INITIALIZE = "initialize"
METHOD_TOOLS_LIST = "tools/list"
METHOD_TOOLS_CALL = "tools/call"
SUPPORTED_METHODS = (METHOD_INITIALIZE, METHOD_TOOLS_LIST, METHOD_TOOLS_CALL)


class ToolNotFoundError(LookupError):
    """Raised when a tools/call names a tool that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Tool {name} not found")
        self.name = name


class UnsupportedMethodError(ValueError):
    """Raised for request methods other than initialize, tools/list, tools/call."""

    def __init__(self, method: str):
        super().__init__(f"Method {method} not supported")
        self.method = method


@dataclass(frozen=True)
class AnalysisTool:
    """An analyzer exposed under a stable tool name."""

    name: str
    description: str
    input_model: Type[BaseModel]
    analyzer: Callable[[Any], AnalysisResult]

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def execute(self, arguments: Any) -> Dict[str, Any]:
        """Validate arguments, run the analyzer and dump the result by alias."""
        validated = self.input_model.model_validate(arguments)
        return self.analyzer(validated).model_dump(by_alias=True)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def create_tools() -> List[AnalysisTool]:
    """Build the tool list in listing order."""
    return [
        AnalysisTool(
            name="analyze_lease",
            description="Analyze lease agreement financials",
            input_model=LeaseInput,
            analyzer=lease.analyze,
        ),
        AnalysisTool(
            name="analyze_amortization",
            description="Analyze loan amortization schedule",
            input_model=AmortizationInput,
            analyzer=amortization.analyze,
        ),
    ]


def get_tool(name: str) -> AnalysisTool:
    """
    Look up a tool by name.

    Raises:
        ToolNotFoundError: If no tool has that name
    """
    for tool in create_tools():
        if tool.name == name:
            return tool
    raise ToolNotFoundError(name)


def handle_request(
    method: str,
    params: Optional[Dict[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    Dispatch one tool-host request.

    Args:
        method: initialize, tools/list or tools/call
        params: For tools/call, {"name": ..., "arguments": {...}}
        settings: Overrides the cached application settings

    Returns:
        JSON-serializable result for the method

    Raises:
        UnsupportedMethodError: Unknown method
        ToolNotFoundError: tools/call names an unknown tool
        ValidationError: tools/call arguments fail the tool's input schema
    """
    settings = settings or get_settings()
    params = params or {}
    logger.debug("Handling %s request", method)

    if method == METHOD_INITIALIZE:
        return {
            "protocolVersion": settings.mcp_protocol_version,
            "capabilities": {"tools": {"listChanged": True}},
            "serverInfo": {
                "name": settings.mcp_server_name,
                "version": settings.mcp_server_version,
            },
        }

    if method == METHOD_TOOLS_LIST:
        return {"tools": [tool.describe() for tool in create_tools()]}

    if method == METHOD_TOOLS_CALL:
        tool = get_tool(params.get("name", ""))
        result = tool.execute(params.get("arguments") or {})
        logger.debug("Tool %s returned %d periods", tool.name, len(result["schedule"]))
        return result

    raise UnsupportedMethodError(method)
