# This project was developed with assistance from AI tools.
"""Annuity payment calculation.

Pure math, no I/O.
"""

import math


def compute_annuity(principal: float, annual_rate_percent: float, months: int) -> tuple[int, int]:
    """Return ``(monthly_payment, overpayment)`` for an annuity loan, both rounded up.

    P = L * [r(1+r)^n] / [(1+r)^n - 1]

    Preconditions: ``annual_rate_percent > 0`` and ``months >= 1``. A zero rate
    or term divides by zero; the caller guarantees both.
    """
    monthly_rate = annual_rate_percent / (100 * 12)
    factor = (1 + monthly_rate) ** months

    monthly_payment = math.ceil(principal * monthly_rate * factor / (factor - 1))
    overpayment = math.ceil(monthly_payment * months - principal)
    return int(monthly_payment), int(overpayment)
