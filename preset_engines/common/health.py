"""Health check endpoint."""
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(prefix="/api", tags=["system"])


class HealthStatus(BaseModel):
    ok: bool
    now: str


@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(ok=True, now=datetime.now(timezone.utc).isoformat())
