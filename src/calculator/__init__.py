"""Calculator API module."""

from .router import router
from .schemas import CalculateRequest, CalculateResponse, CalculationRecord, CalcType, InputMethod
from .records import detect_calc_type, detect_calc_subtype, build_calculation_record, build_failed_record
from .service import run_calculation

__all__ = [
    "router",
    "CalculateRequest",
    "CalculateResponse",
    "CalculationRecord",
    "CalcType",
    "InputMethod",
    "detect_calc_type",
    "detect_calc_subtype",
    "build_calculation_record",
    "build_failed_record",
    "run_calculation",
]
