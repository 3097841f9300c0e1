# This project was developed with assistance from AI tools.
"""Mortgage calculation pipeline.

Validates the request, resolves the program rate, computes the annuity on the
loan sum and assembles the Result. ``today`` is always passed in so the last
payment date is deterministic under test.
"""

import logging
from datetime import date

from dateutil.relativedelta import relativedelta

from ..schemas.mortgage import Aggregates, ExecuteRequest, Params, Program, Result
from .calculator import compute_annuity
from .programs import resolve_rate
from .validation import check_down_payment, validate_program_selection

logger = logging.getLogger(__name__)


def last_payment_date(today: date, months: int) -> str:
    """Return ``today`` plus ``months`` calendar months as ``YYYY-MM-DD``.

    Days past the end of the target month clamp to its last day
    (Jan 31 + 1 month -> Feb 28/29).
    """
    return (today + relativedelta(months=months)).isoformat()


def assemble_result(
    req: ExecuteRequest,
    program: Program,
    rate: int,
    monthly_payment: int,
    overpayment: int,
    *,
    today: date,
) -> Result:
    """Combine the request and calculated figures into a Result."""
    return Result(
        params=Params(
            object_cost=req.object_cost,
            initial_payment=req.initial_payment,
            months=req.months,
        ),
        program=program,
        aggregates=Aggregates(
            rate=rate,
            loan_sum=req.object_cost - req.initial_payment,
            monthly_payment=monthly_payment,
            overpayment=overpayment,
            last_payment_date=last_payment_date(today, req.months),
        ),
    )


def compute(req: ExecuteRequest, *, today: date) -> Result:
    """Validate ``req`` and return the calculated Result.

    Raises:
        InsufficientDownPayment, NoProgramSelected, MultipleProgramsSelected:
            the input was rejected; nothing was calculated.
    """
    check_down_payment(req.object_cost, req.initial_payment)
    program_name = validate_program_selection(req.program)

    rate, program = resolve_rate(program_name)
    loan_sum = req.object_cost - req.initial_payment
    monthly_payment, overpayment = compute_annuity(float(loan_sum), float(rate), req.months)

    result = assemble_result(req, program, rate, monthly_payment, overpayment, today=today)
    logger.debug(
        "Computed %s loan: sum=%d payment=%d overpayment=%d",
        program_name,
        loan_sum,
        monthly_payment,
        overpayment,
    )
    return result
