"""Pydantic schemas for engine results."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CalculationResult(BaseModel):
    """Result of evaluating one canonical expression.

    Attributes:
        expression: The expression as submitted.
        result_decimal: Final value in inches as a number.
        result_feet_inches: Feet-inches-fraction display (plain number outside measurement mode).
        result_total_inches: Final value in inches as a trimmed decimal string.
        is_inch_mode: Whether the input was a measurement (feet/inches/fractions).
    """

    expression: str = Field(..., description="Expression as submitted")
    result_decimal: float = Field(..., description="Final value as a number")
    result_feet_inches: str = Field(..., description="Feet-inches-fraction display string")
    result_total_inches: str = Field(..., description="Total inches as a decimal string")
    is_inch_mode: bool = Field(..., description="Measurement mode flag")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
