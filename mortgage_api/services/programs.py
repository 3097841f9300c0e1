# This project was developed with assistance from AI tools.
"""Loan program catalog.

Fixed annual rates per program. Kept in the service layer so the calculation
and any future listing endpoint share one table.
"""

from ..schemas.mortgage import Program

PROGRAM_RATES: dict[str, int] = {
    "base": 10,
    "military": 9,
    "salary": 8,
}


def resolve_rate(program_name: str) -> tuple[int, Program]:
    """Return the annual rate (percent) and normalized flags for a program.

    An unknown name yields ``(0, Program())`` rather than an error; callers
    validate the selection first, so that path is not reached in practice.
    """
    rate = PROGRAM_RATES.get(program_name)
    if rate is None:
        return 0, Program()
    return rate, Program(**{program_name: True})
