from typing import Dict, Optional


class MortgageCalculatorError(Exception):
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidLoanInputError(MortgageCalculatorError):
    """Carries a message per form field (amount, term, rate, type)."""

    def __init__(self, message: str, errors: Dict[str, str]):
        super().__init__(message, {"fields": sorted(errors)})
        self.errors = dict(errors)
