import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from controllers.base_controller import InvalidPayload, UnknownEvent
from controllers.context import AppContext
from routers.dependencies import get_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.post("/{component}/{event}")
async def dispatch_event(
    component: str,
    event: str,
    payload: dict[str, Any] | None = Body(default=None),
    context: AppContext = Depends(get_context),
):
    controller = context.controllers.get(component)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"Unknown component: {component}")

    try:
        await controller.dispatch(event, payload)
    except UnknownEvent as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidPayload as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Dispatched %s.%s", component, event)
    return context.snapshot()
