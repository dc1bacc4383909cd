from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from models import RepaymentType


class MortgageForm(BaseModel):
    # Fields arrive exactly as typed into the form; numbers are accepted too.
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    amount: Optional[str] = Field(default=None, description="Mortgage amount as entered")
    term: Optional[str] = Field(default=None, description="Mortgage term in years as entered")
    rate: Optional[str] = Field(default=None, description="Interest rate (%) as entered")
    repayment_type: RepaymentType = Field(default=RepaymentType.REPAYMENT, alias="type")


class RepaymentSummary(BaseModel):
    repayment_type: RepaymentType
    monthly_payment: Decimal
    total_repayment: Decimal
    monthly_display: str
    total_display: str


class RepaymentTypeOption(BaseModel):
    value: RepaymentType
    label: str


class ErrorResponse(BaseModel):
    errors: Dict[str, str]
