import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Optional, Union

from pydantic import ValidationError

import config
from exceptions import InvalidLoanInputError
from models import LoanInput, RepaymentResult, RepaymentType

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

REQUIRED_MESSAGES = {
    "amount": "Mortgage amount is required.",
    "term": "Mortgage term is required.",
    "rate": "Interest rate is required.",
}

MALFORMED_MESSAGES = {
    "amount": "Mortgage amount must be a number.",
    "term": "Mortgage term must be a whole number of years.",
    "rate": "Interest rate must be a number.",
    "type": "Mortgage type must be repayment or interest-only.",
}

OUT_OF_RANGE_MESSAGES = {
    "amount": f"Mortgage amount must be greater than 0 and at most {config.MAX_AMOUNT}.",
    "term": f"Mortgage term must be between 1 and {config.MAX_TERM_YEARS} years.",
    "rate": f"Interest rate must be between 0 and {config.MAX_RATE_PERCENT}%.",
}

# pydantic error types produced by the Field bounds on LoanInput
RANGE_ERROR_TYPES = {"greater_than", "greater_than_equal", "less_than_equal"}

# 1 + monthly_rate must stay distinct from 1 for the smallest rates worth pricing
PRECISION = 60

FORM_FIELDS = {
    "amount": "amount",
    "term_years": "term",
    "annual_rate_percent": "rate",
    "repayment_type": "type",
}


def validate(
    raw_amount: Optional[str], raw_term: Optional[str], raw_rate: Optional[str]
) -> Dict[str, str]:
    # presence only; non-numeric text is caught by parse_loan_input
    errors = {}
    for field, raw in (("amount", raw_amount), ("term", raw_term), ("rate", raw_rate)):
        if not raw:
            errors[field] = REQUIRED_MESSAGES[field]
    return errors


def parse_loan_input(
    raw_amount: str,
    raw_term: str,
    raw_rate: str,
    repayment_type: Union[RepaymentType, str] = RepaymentType.REPAYMENT,
) -> LoanInput:
    try:
        return LoanInput(
            amount=raw_amount,
            term_years=raw_term,
            annual_rate_percent=raw_rate,
            repayment_type=repayment_type,
        )
    except ValidationError as exc:
        errors = {}
        for error in exc.errors():
            field = FORM_FIELDS[error["loc"][0]]
            if error["type"] in RANGE_ERROR_TYPES:
                messages = OUT_OF_RANGE_MESSAGES
            else:
                messages = MALFORMED_MESSAGES
            errors.setdefault(field, messages[field])
        raise InvalidLoanInputError("Loan input could not be parsed", errors) from exc


def compute_repayment(loan: LoanInput) -> RepaymentResult:
    months = loan.term_years * 12

    with localcontext() as ctx:
        ctx.prec = PRECISION
        monthly_rate = loan.annual_rate_percent / Decimal(100) / Decimal(12)

        if loan.repayment_type is RepaymentType.INTEREST_ONLY:
            monthly_payment = loan.amount * monthly_rate
        else:
            denominator = 1 - (1 + monthly_rate) ** -months
            if denominator == 0:
                # zero rate, or a rate too small to register: spread the principal evenly
                monthly_payment = loan.amount / months
            else:
                monthly_payment = (loan.amount * monthly_rate) / denominator

        # total uses the unrounded monthly figure
        total_repayment = monthly_payment * months

        logger.debug(
            "Computed %s payment over %d months: %s/month, %s total",
            loan.repayment_type.value,
            months,
            monthly_payment,
            total_repayment,
        )
        return RepaymentResult(
            monthly_payment=monthly_payment.quantize(CENT, rounding=ROUND_HALF_UP),
            total_repayment=total_repayment.quantize(CENT, rounding=ROUND_HALF_UP),
        )


def calculate(
    raw_amount: Optional[str],
    raw_term: Optional[str],
    raw_rate: Optional[str],
    repayment_type: Union[RepaymentType, str] = RepaymentType.REPAYMENT,
) -> RepaymentResult:
    errors = validate(raw_amount, raw_term, raw_rate)
    if errors:
        raise InvalidLoanInputError("Required fields are missing", errors)

    loan = parse_loan_input(raw_amount, raw_term, raw_rate, repayment_type)
    return compute_repayment(loan)


def format_money(value: Decimal, symbol: Optional[str] = None) -> str:
    if symbol is None:
        symbol = config.CURRENCY_SYMBOL
    return f"{symbol}{value:.2f}"
