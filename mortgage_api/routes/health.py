# This project was developed with assistance from AI tools.
"""Health check endpoint."""

from fastapi import APIRouter, Depends

from .. import __version__
from ..schemas import HealthItem
from ..services.cache import Store, get_store

router = APIRouter()


@router.get("/", response_model=list[HealthItem])
def health(store: Store = Depends(get_store)) -> list[HealthItem]:
    """Report API and cache status."""
    return [
        HealthItem(
            name="API",
            status="healthy",
            message="Mortgage calculator is running",
            version=__version__,
        ),
        HealthItem(
            name="Cache",
            status="healthy",
            message=f"In-memory store holds {len(store)} entries",
        ),
    ]
