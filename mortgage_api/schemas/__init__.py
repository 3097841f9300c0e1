# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel


class HealthItem(BaseModel):
    """Health status of one service component."""

    name: str
    status: str
    message: str = ""
    version: str | None = None
