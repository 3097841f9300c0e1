# This project was developed with assistance from AI tools.
"""Mortgage calculation and cache routes.

Handlers are plain ``def`` so Starlette runs each request on its worker
thread pool; the Store is the only state they share.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.mortgage import CacheEntry, ExecuteRequest, ExecuteResponse
from ..services.cache import Store, get_store
from ..services.mortgage import compute
from ..services.validation import MortgageValidationError

router = APIRouter()

EMPTY_CACHE_DETAIL = "empty cache"


def get_today() -> date:
    """Current date used for the last payment date. Overridden in tests."""
    return date.today()


@router.post("/execute", response_model=ExecuteResponse)
def execute(
    req: ExecuteRequest,
    store: Store = Depends(get_store),
    today: date = Depends(get_today),
) -> ExecuteResponse:
    """Calculate mortgage aggregates and cache the result.

    The down payment must be at least 20% of the object cost and exactly one
    program (base 10%, military 9%, salary 8%) must be selected.
    """
    try:
        result = compute(req, today=today)
    except MortgageValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )
    store.insert(result)
    return ExecuteResponse(result=result)


@router.get("/cache", response_model=list[CacheEntry])
def list_cache(store: Store = Depends(get_store)) -> list[CacheEntry]:
    """Return every cached calculation. An empty cache is reported as 400."""
    if not store.has_data():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=EMPTY_CACHE_DETAIL,
        )
    return store.list_all()
