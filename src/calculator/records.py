"""Classification of results into calculation records."""

from src.engine.schemas import CalculationResult

from .schemas import CalcType, CalculationRecord, InputMethod


def detect_calc_type(is_inch_mode: bool) -> CalcType:
    """Measurements are lengths; everything else is a custom calculation."""
    return CalcType.LENGTH if is_inch_mode else CalcType.CUSTOM


def detect_calc_subtype(expression: str, is_inch_mode: bool) -> str:
    """Describe which units an expression was written with.
    
    Args:
        expression: Expression as entered.
        is_inch_mode: Whether the result was computed in measurement mode.
        
    Returns:
        One of "feet_inches", "feet_only", "inches_fractions", "mixed", "decimal".
    """
    if not is_inch_mode:
        return "decimal"
    if "'" in expression and '"' in expression:
        return "feet_inches"
    if "'" in expression:
        return "feet_only"
    if '"' in expression or "/" in expression:
        return "inches_fractions"
    return "mixed"


def build_calculation_record(
    result: CalculationResult,
    input_method: InputMethod = InputMethod.KEYPAD,
    voice_log_id: str | None = None,
    trade_context: str | None = None,
    app_version: str | None = None,
) -> CalculationRecord:
    """Build the record for a successful calculation.
    
    Args:
        result: Engine result.
        input_method: How the expression was entered.
        voice_log_id: Identifier of the voice log that produced the expression.
        trade_context: Free-form trade tag (e.g. "framing").
        app_version: Client version string.
        
    Returns:
        CalculationRecord marked successful.
    """
    return CalculationRecord(
        calc_type=detect_calc_type(result.is_inch_mode),
        calc_subtype=detect_calc_subtype(result.expression, result.is_inch_mode),
        input_expression=result.expression,
        result_value=result.result_decimal,
        result_unit="inches" if result.is_inch_mode else "decimal",
        result_formatted=result.result_feet_inches if result.is_inch_mode else result.result_total_inches,
        input_method=input_method,
        voice_log_id=voice_log_id,
        trade_context=trade_context,
        was_successful=True,
        app_version=app_version,
    )


def build_failed_record(
    expression: str,
    input_method: InputMethod = InputMethod.KEYPAD,
    app_version: str | None = None,
) -> CalculationRecord:
    """Build the record for an expression that produced no result."""
    return CalculationRecord(
        calc_type=CalcType.CUSTOM,
        input_expression=expression,
        input_method=input_method,
        was_successful=False,
        app_version=app_version,
    )
