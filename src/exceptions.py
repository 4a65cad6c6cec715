"""Base exception for the measure calculator service."""


class MeasureCalculatorError(Exception):
    """Base exception for all measure calculator errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)
