# This project was developed with assistance from AI tools.
"""Tests for the calculation pipeline and result assembly."""

from datetime import date

import pytest

from mortgage_api.schemas.mortgage import ExecuteRequest, Program
from mortgage_api.services.mortgage import assemble_result, compute, last_payment_date
from mortgage_api.services.validation import (
    InsufficientDownPayment,
    MultipleProgramsSelected,
    NoProgramSelected,
)


class TestLastPaymentDate:
    def test_adds_calendar_months(self):
        assert last_payment_date(date(2024, 2, 18), 12) == "2025-02-18"

    def test_long_term(self):
        assert last_payment_date(date(2024, 2, 18), 240) == "2044-02-18"

    def test_clamps_to_month_end(self):
        assert last_payment_date(date(2024, 1, 31), 1) == "2024-02-29"
        assert last_payment_date(date(2023, 1, 31), 1) == "2023-02-28"

    def test_year_rollover(self):
        assert last_payment_date(date(2024, 11, 5), 3) == "2025-02-05"


def test_assemble_result(base_request, today):
    result = assemble_result(base_request, Program(base=True), 10, 7034, 4408, today=today)

    assert result.params.object_cost == 100000
    assert result.params.initial_payment == 20000
    assert result.params.months == 12
    assert result.program == Program(base=True)
    assert result.aggregates.rate == 10
    assert result.aggregates.loan_sum == 80000
    assert result.aggregates.monthly_payment == 7034
    assert result.aggregates.overpayment == 4408
    assert result.aggregates.last_payment_date == "2025-02-18"


def test_compute_base_program(base_request, today):
    result = compute(base_request, today=today)
    assert result.aggregates.rate == 10
    assert result.aggregates.loan_sum == 80000
    assert result.aggregates.monthly_payment == 7034
    assert result.aggregates.overpayment == 4408
    assert result.program == Program(base=True)


@pytest.mark.parametrize("name,rate", [("military", 9), ("salary", 8)])
def test_compute_uses_program_rate(name, rate, today):
    req = ExecuteRequest(
        object_cost=100000,
        initial_payment=20000,
        months=12,
        program=Program(**{name: True}),
    )
    result = compute(req, today=today)
    assert result.aggregates.rate == rate
    assert result.program == Program(**{name: True})


def test_compute_is_deterministic(base_request, today):
    assert compute(base_request, today=today) == compute(base_request, today=today)


def test_compute_rejects_small_down_payment(today):
    req = ExecuteRequest(
        object_cost=100000, initial_payment=10000, months=12, program=Program(base=True)
    )
    with pytest.raises(InsufficientDownPayment):
        compute(req, today=today)


def test_down_payment_checked_before_program(today):
    req = ExecuteRequest(object_cost=100000, initial_payment=0, months=12)
    with pytest.raises(InsufficientDownPayment):
        compute(req, today=today)


def test_compute_rejects_missing_program(today):
    req = ExecuteRequest(object_cost=100000, initial_payment=20000, months=12)
    with pytest.raises(NoProgramSelected):
        compute(req, today=today)


def test_compute_rejects_multiple_programs(today):
    req = ExecuteRequest(
        object_cost=100000,
        initial_payment=20000,
        months=12,
        program=Program(salary=True, military=True),
    )
    with pytest.raises(MultipleProgramsSelected):
        compute(req, today=today)
