# This project was developed with assistance from AI tools.
"""Input validation for mortgage calculations.

Both checks run before any calculation or cache write, so a rejected request
never leaves partial state behind. The exception message is the text returned
to the client.
"""

import logging

from ..schemas.mortgage import Program

logger = logging.getLogger(__name__)

PROGRAM_NAMES = ("base", "military", "salary")

# Down payment must be at least 1/5 (20%) of the object cost.
MIN_DOWN_PAYMENT_DIVISOR = 5


class MortgageValidationError(ValueError):
    """Base class for rejected calculation input."""


class InsufficientDownPayment(MortgageValidationError):
    """Raised when the down payment is zero, above cost, or below 20% of cost."""

    def __init__(self) -> None:
        super().__init__("the initial payment should be more")


class NoProgramSelected(MortgageValidationError):
    """Raised when no loan program flag is set."""

    def __init__(self) -> None:
        super().__init__("choose program")


class MultipleProgramsSelected(MortgageValidationError):
    """Raised when more than one loan program flag is set."""

    def __init__(self) -> None:
        super().__init__("choose only 1 program")


def validate_down_payment(object_cost: int, initial_payment: int) -> bool:
    """Return True when the down payment is positive, within cost and >= 20% of it."""
    if initial_payment > object_cost:
        return False
    if object_cost == 0 and initial_payment == 0:
        return False
    if initial_payment == 0:
        return False
    if initial_payment * MIN_DOWN_PAYMENT_DIVISOR < object_cost:
        return False
    return True


def check_down_payment(object_cost: int, initial_payment: int) -> None:
    """Raise InsufficientDownPayment unless ``validate_down_payment`` passes."""
    if not validate_down_payment(object_cost, initial_payment):
        logger.info(
            "Rejected down payment %d for object cost %d", initial_payment, object_cost
        )
        raise InsufficientDownPayment()


def validate_program_selection(program: Program) -> str:
    """Return the name of the single selected program.

    Raises:
        NoProgramSelected: no flag is set.
        MultipleProgramsSelected: more than one flag is set.
    """
    if not (program.base or program.military or program.salary):
        raise NoProgramSelected()

    selected = [name for name in PROGRAM_NAMES if getattr(program, name)]
    if not selected:
        raise NoProgramSelected()
    if len(selected) > 1:
        logger.info("Rejected program selection %s", selected)
        raise MultipleProgramsSelected()
    return selected[0]
