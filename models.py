from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config import MAX_AMOUNT, MAX_RATE_PERCENT, MAX_TERM_YEARS


class RepaymentType(str, Enum):
    REPAYMENT = "repayment"
    INTEREST_ONLY = "interest-only"


REPAYMENT_TYPE_LABELS = {
    RepaymentType.REPAYMENT: "Repayment",
    RepaymentType.INTEREST_ONLY: "Interest Only",
}


class LoanInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(
        gt=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Principal borrowed"
    )
    term_years: int = Field(ge=1, le=MAX_TERM_YEARS, description="Mortgage term in years")
    annual_rate_percent: Decimal = Field(
        ge=0,
        le=MAX_RATE_PERCENT,
        allow_inf_nan=False,
        description="Nominal annual interest rate (%)",
    )
    repayment_type: RepaymentType = RepaymentType.REPAYMENT


class RepaymentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_payment: Decimal
    total_repayment: Decimal
