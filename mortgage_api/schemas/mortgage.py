# This project was developed with assistance from AI tools.
"""Mortgage calculation and cache schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer

# The calculation carries 32-bit signed integers end to end.
INT32_MAX = 2**31 - 1

# 1000 years. Longer terms overflow the annuity factor and the calendar.
MAX_TERM_MONTHS = 12_000


class Program(BaseModel):
    """Loan program flags. Exactly one should be set."""

    model_config = ConfigDict(frozen=True)

    salary: bool = False
    military: bool = False
    base: bool = False

    @model_serializer(mode="plain")
    def serialize_selected(self) -> dict[str, Any]:
        # Unselected programs are omitted from the wire format.
        return {name: True for name in ("salary", "military", "base") if getattr(self, name)}


class Params(BaseModel):
    """Loan parameters as submitted."""

    model_config = ConfigDict(frozen=True)

    object_cost: int
    initial_payment: int
    months: int


class Aggregates(BaseModel):
    """Calculated loan figures."""

    model_config = ConfigDict(frozen=True)

    rate: int
    loan_sum: int
    monthly_payment: int
    overpayment: int
    last_payment_date: str


class Result(BaseModel):
    """Calculation result returned to the caller and stored in the cache."""

    model_config = ConfigDict(frozen=True)

    params: Params
    program: Program
    aggregates: Aggregates


class CacheEntry(BaseModel):
    """A stored result plus its cache-assigned ID."""

    model_config = ConfigDict(frozen=True)

    id: int
    params: Params
    program: Program
    aggregates: Aggregates


class ExecuteRequest(BaseModel):
    """Input for the mortgage calculation."""

    object_cost: int = Field(ge=0, le=INT32_MAX)
    initial_payment: int = Field(ge=0, le=INT32_MAX)
    months: int = Field(ge=1, le=MAX_TERM_MONTHS)
    program: Program = Field(default_factory=Program)


class ExecuteResponse(BaseModel):
    """Envelope for a successful calculation."""

    result: Result
