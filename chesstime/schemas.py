from typing import Dict

from pydantic import BaseModel


class PlaytimeResponse(BaseModel):
    totalTimePlayed: str  # e.g. "12h 3m 40s"
    monthlyBreakdown: Dict[str, str]  # {"2024-03": "1h 2m 0s", ...}


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
