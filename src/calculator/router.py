"""FastAPI router for calculator endpoints."""

from fastapi import APIRouter, Depends, Request

from src.ratelimit import get_client_ip, rate_limit_dependency

from .schemas import CalculateRequest, CalculateResponse
from .service import run_calculation


router = APIRouter(tags=["calculator"])


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    dependencies=[Depends(rate_limit_dependency)],
)
async def calculate_endpoint(
    http_request: Request,
    request: CalculateRequest,
) -> CalculateResponse:
    """Evaluate a canonical measurement expression.
    
    Expressions are evaluated strictly left to right. A malformed expression
    or a division by zero is not an HTTP error: the response carries
    ``result: null``.
    
    Args:
        request: Expression and input method.
        
    Returns:
        CalculateResponse with result or null.
    """
    return run_calculation(request, client_ip=get_client_ip(http_request))
