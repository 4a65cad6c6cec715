"""Calculation service wrapping the engine with logging."""

import time

import structlog

from src.engine import calculate
from src.log import truncate

from .records import build_calculation_record, build_failed_record
from .schemas import CalculateRequest, CalculateResponse

logger = structlog.get_logger("calculator")


def run_calculation(request: CalculateRequest, client_ip: str | None = None) -> CalculateResponse:
    """Evaluate a request and log the outcome.
    
    Args:
        request: Expression and input method.
        client_ip: Caller address, logged truncated.
        
    Returns:
        CalculateResponse whose result is None if the expression failed.
    """
    start_time = time.perf_counter()
    result = calculate(request.expression)
    duration_ms = int((time.perf_counter() - start_time) * 1000)
    
    if result is None:
        record = build_failed_record(request.expression, input_method=request.input_method)
        logger.info(
            "calculation_no_result",
            input_method=record.input_method.value,
            expression=record.input_expression,
            duration_ms=duration_ms,
            ip=truncate(client_ip, 10),
        )
        return CalculateResponse(result=None)
    
    record = build_calculation_record(result, input_method=request.input_method)
    logger.info(
        "calculation_completed",
        calc_type=record.calc_type.value,
        calc_subtype=record.calc_subtype,
        input_method=record.input_method.value,
        result_formatted=record.result_formatted,
        duration_ms=duration_ms,
        ip=truncate(client_ip, 10),
    )
    return CalculateResponse(result=result)
