"""Complaint image analysis endpoint (POST on any path)."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.api_route("/{path:path}", methods=["POST"], summary="Analyze complaint image")
async def analyze_complaint_image(request: Request) -> JSONResponse:
    """
    Check whether a photo fits the declared civic issue type.

    Body: {"imageData": "<base64 or data URI>", "issueType": "<category>"}
    Returns {"is_relevant": true, "description": ...} or
    {"is_relevant": false, "reason": ...}.
    """
    analysis_service = request.app.state.analysis_service
    raw_body = await request.body()
    result = await analysis_service.handle(raw_body)
    return JSONResponse(content=result.body, status_code=result.status_code)
