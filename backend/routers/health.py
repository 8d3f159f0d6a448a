import time
from fastapi import APIRouter, Depends

from controllers.context import AppContext
from routers.dependencies import get_context

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(context: AppContext = Depends(get_context)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "countries_loaded": len(context.dataset),
    }
