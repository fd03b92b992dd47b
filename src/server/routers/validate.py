"""Validation endpoint for authoring tools."""

from __future__ import annotations

from fastapi import APIRouter

from daemonmd.schemas import ValidationReport
from daemonmd.validation import validate_text
from server.models import ValidateRequest

router = APIRouter()


@router.post("/api/validate", response_model=ValidationReport)
async def api_validate(validate_request: ValidateRequest) -> ValidationReport:
    """Check a document's format and security without publishing it.

    **Parameters**

    - **validate_request** (`ValidateRequest`): the raw document text

    **Returns**

    - **ValidationReport**: format errors, security violations, warnings, and section counts
    """
    return validate_text(validate_request.text)
