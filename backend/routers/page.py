from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from controllers.context import AppContext
from models.query import SearchField
from routers.dependencies import get_context
from services.render_service import render_page

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
async def index(context: AppContext = Depends(get_context)):
    return render_page(
        title="Country Directory",
        page=context.page,
        modal=context.modal.snapshot(),
        overlay=context.overlay.snapshot(),
        search_fields=[f.value for f in SearchField],
        hover_delay_ms=context.hover.delay_ms,
    )


@router.get("/state")
async def state(context: AppContext = Depends(get_context)):
    return context.snapshot()
