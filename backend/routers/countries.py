from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from controllers.context import AppContext
from models.country import CountryDetail, CountrySummary
from models.query import FilterQuery, SearchField
from routers.dependencies import get_context
from services.detail_service import fetch_detail
from services.filter_service import filter_countries

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


class CountryListResponse(BaseModel):
    countries: list[CountrySummary]
    status: str


class CountryDetailResponse(BaseModel):
    summary: CountrySummary
    detail: CountryDetail | None = None


@router.get("", response_model=CountryListResponse)
async def list_countries(
    q: str = "",
    field: str = SearchField.NAME.value,
    context: AppContext = Depends(get_context),
):
    result = filter_countries(context.dataset, FilterQuery(text=q, field=field))
    return CountryListResponse(countries=result.countries, status=result.status)


@router.get("/{code}", response_model=CountrySummary)
async def get_country(code: str, context: AppContext = Depends(get_context)):
    country = context.dataset.get_by_code(code)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("/{code}/detail", response_model=CountryDetailResponse)
@limiter.limit(settings.detail_rate_limit)
async def get_country_detail(
    request: Request,
    code: str,
    context: AppContext = Depends(get_context),
):
    country = context.dataset.get_by_code(code)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    detail = await fetch_detail(context.client, country.alpha3_code)
    return CountryDetailResponse(summary=country, detail=detail)
