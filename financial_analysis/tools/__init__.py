"""
Tool registry for external tool hosts.
"""

from financial_analysis.tools.registry import (
    AnalysisTool,
    ToolNotFoundError,
    UnsupportedMethodError,
    create_tools,
    get_tool,
    handle_request,
)

__all__ = [
    "AnalysisTool",
    "ToolNotFoundError",
    "UnsupportedMethodError",
    "create_tools",
    "get_tool",
    "handle_request",
]
