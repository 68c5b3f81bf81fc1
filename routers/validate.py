"""Validate endpoint: geocode an address and score the match."""

from fastapi import APIRouter, Depends, Request

from auth import require_api_key
from models import ErrorResponse, ValidateRequest, ValidationResponse
from services.validator import validate_address

router = APIRouter(tags=["validate"])

_ERRORS = {
    code: {"model": ErrorResponse} for code in (400, 401, 429, 500, 502)
}


@router.post(
    "/validate",
    response_model=ValidationResponse,
    responses=_ERRORS,
    dependencies=[Depends(require_api_key)],
)
async def validate(req: ValidateRequest, request: Request) -> ValidationResponse:
    state = request.app.state
    return await validate_address(req.address, state.provider, state.settings)
