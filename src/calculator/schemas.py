"""Pydantic schemas for the calculator API."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from src.config import get_settings
from src.engine.schemas import CalculationResult


class InputMethod(StrEnum):
    """How the expression was entered."""
    KEYPAD = "keypad"
    VOICE = "voice"
    CAMERA = "camera"


class CalcType(StrEnum):
    """Broad category of a calculation."""
    LENGTH = "length"
    AREA = "area"
    VOLUME = "volume"
    MATERIAL = "material"
    CONVERSION = "conversion"
    CUSTOM = "custom"


class CalculateRequest(BaseModel):
    """Request to evaluate one canonical expression.
    
    Attributes:
        expression: Canonical expression, e.g. "5 1/2 + 3 1/4".
        input_method: Keypad or voice (voice expressions come from the speech pipeline).
    """
    
    expression: str = Field(..., description="Canonical measurement expression")
    input_method: InputMethod = Field(default=InputMethod.KEYPAD, description="How the expression was entered")
    
    @field_validator("expression")
    @classmethod
    def validate_expression_length(cls, value: str) -> str:
        """Reject expressions longer than the configured limit.
        
        Raises:
            ValueError: If the expression is too long.
        """
        if len(value) > get_settings().MAX_EXPRESSION_LENGTH:
            raise ValueError("expression exceeds max length")
        return value


class CalculateResponse(BaseModel):
    """Calculation outcome. ``result`` is null when nothing could be computed."""
    
    result: CalculationResult | None = Field(default=None, description="Result, or null on failure")


class CalculationRecord(BaseModel):
    """Shape of a calculation as a history store would keep it.
    
    The service only builds this record; storing it is up to the caller.
    """
    
    calc_type: CalcType
    calc_subtype: str | None = None
    input_expression: str
    result_value: float | None = None
    result_unit: str | None = None
    result_formatted: str | None = None
    input_method: InputMethod = InputMethod.KEYPAD
    voice_log_id: str | None = None
    trade_context: str | None = None
    was_successful: bool
    app_version: str | None = None
