"""
JSON-RPC 2.0 endpoint for tool hosts.

Wraps the tool registry's dispatcher. Protocol-level failures are
reported in the JSON-RPC error object with an HTTP 200 status.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from pydantic import ValidationError

from financial_analysis.api.analysis import format_issues, require_json
from financial_analysis.config import get_settings
from financial_analysis.tools import (
    ToolNotFoundError,
    UnsupportedMethodError,
    handle_request,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


def rpc_error(
    request_id: Any, code: int, message: str, data: Optional[Any] = None
) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


@router.post("/mcp")
async def mcp_endpoint(request: Request):
    """Handle initialize, tools/list and tools/call."""
    require_json(request)

    try:
        payload = await request.json()
    except ValueError:
        return rpc_error(None, PARSE_ERROR, "Parse error")

    if not isinstance(payload, dict) or not isinstance(payload.get("method"), str):
        request_id = payload.get("id") if isinstance(payload, dict) else None
        return rpc_error(request_id, INVALID_REQUEST, "Invalid Request")

    request_id = payload.get("id")
    params = payload.get("params")
    if params is not None and not isinstance(params, dict):
        return rpc_error(request_id, INVALID_PARAMS, "params must be an object")

    try:
        result = handle_request(payload["method"], params, settings=get_settings())
    except UnsupportedMethodError as e:
        return rpc_error(request_id, METHOD_NOT_FOUND, str(e))
    except ToolNotFoundError as e:
        return rpc_error(request_id, INVALID_PARAMS, str(e))
    except ValidationError as e:
        logger.info("Rejected tool arguments for %s", params.get("name"))
        return rpc_error(request_id, INVALID_PARAMS, "Invalid input", format_issues(e))

    return {"jsonrpc": "2.0", "id": request_id, "result": result}
