# selva/routes/health.py
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

health_router = APIRouter(tags=["Health"])


def _uptime(request: Request) -> float:
    return round(time.monotonic() - request.app.state.started_at, 3)


@health_router.get("/health")
@health_router.get("/healthz")
async def health(request: Request):
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": _uptime(request),
    }


@health_router.get("/api/initialize")
async def initialize():
    return {
        "status": "success",
        "message": "Application initialized successfully",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
