"""
Analysis API endpoints.

Thin adapters: read the JSON body, validate, call the engine and return
the result with camelCase field names. Validation failures become 400
responses listing every field issue.
"""

import logging
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from financial_analysis.calculations import amortization, lease
from financial_analysis.calculations.schemas import AnalysisResult
from financial_analysis.utils.stable_json import stable_hash

logger = logging.getLogger(__name__)

router = APIRouter()


def format_issues(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into path/message/code issues."""
    return [
        {"path": list(err["loc"]), "message": err["msg"], "code": err["type"]}
        for err in exc.errors()
    ]


def require_json(request: Request) -> None:
    """Reject requests whose body is not declared as JSON."""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type.lower():
        raise HTTPException(
            status_code=415, detail="Content-Type must be application/json"
        )


async def read_json(request: Request) -> Any:
    require_json(request)
    try:
        return await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Malformed JSON body")


async def _run_analysis(
    request: Request, kind: str, analyzer: Callable[[Any], AnalysisResult]
) -> JSONResponse:
    payload = await read_json(request)

    try:
        result = analyzer(payload)
    except ValidationError as e:
        issues = format_issues(e)
        logger.info("Rejected %s input with %d issue(s)", kind, len(issues))
        return JSONResponse(
            status_code=400, content={"detail": "Invalid input", "issues": issues}
        )

    return JSONResponse(
        content=result.model_dump(by_alias=True),
        headers={"ETag": f'"{stable_hash(result)}"'},
    )


@router.post("/amortization")
async def analyze_amortization(request: Request):
    """Generate a loan amortization schedule."""
    return await _run_analysis(request, "amortization", amortization.analyze)


@router.post("/lease")
async def analyze_lease(request: Request):
    """Generate a lease schedule down to the residual value."""
    return await _run_analysis(request, "lease", lease.analyze)
