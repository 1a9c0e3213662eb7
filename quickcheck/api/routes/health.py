from fastapi import APIRouter

from quickcheck.core.config import get_settings

router = APIRouter()
settings = get_settings()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "environment": settings.ENVIRONMENT,
        "simulatedLatencyMs": settings.SIMULATED_LATENCY_MS,
    }
