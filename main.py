import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import config
from calculator import calculate, format_money
from exceptions import InvalidLoanInputError
from models import REPAYMENT_TYPE_LABELS, RepaymentType
from schemas import ErrorResponse, MortgageForm, RepaymentSummary, RepaymentTypeOption

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=config.LOG_LEVEL)
    yield


app = FastAPI(title="Mortgage Repayment Calculator", lifespan=lifespan)


@app.exception_handler(InvalidLoanInputError)
async def invalid_loan_input_handler(request: Request, exc: InvalidLoanInputError):
    logger.info("Rejected %s: invalid fields %s", request.url.path, sorted(exc.errors))
    return JSONResponse(status_code=422, content={"errors": exc.errors})


@app.post(
    "/calculate",
    response_model=RepaymentSummary,
    responses={422: {"model": ErrorResponse}},
)
async def calculate_repayments(form: MortgageForm):
    result = calculate(form.amount, form.term, form.rate, form.repayment_type)

    return RepaymentSummary(
        repayment_type=form.repayment_type,
        monthly_payment=result.monthly_payment,
        total_repayment=result.total_repayment,
        monthly_display=format_money(result.monthly_payment),
        total_display=format_money(result.total_repayment),
    )


@app.get("/repayment-types", response_model=List[RepaymentTypeOption])
async def get_repayment_types():
    return [
        RepaymentTypeOption(value=repayment_type, label=REPAYMENT_TYPE_LABELS[repayment_type])
        for repayment_type in RepaymentType
    ]
