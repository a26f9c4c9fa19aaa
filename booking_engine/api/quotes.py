"""Price quote endpoint"""
from typing import Optional
from fastapi import APIRouter, Body, Depends

from booking_engine.schemas.quote import QuoteRequest, QuoteResponse
from booking_engine.services.pricing import calculate_quote
from booking_engine.core.security import require_api_key

router = APIRouter(prefix="/api", tags=["booking"], dependencies=[Depends(require_api_key)])


@router.post("/quote", response_model=QuoteResponse)
async def quote(req: Optional[QuoteRequest] = Body(default=None)):
    # A request without a body is quoted with every default
    return calculate_quote(req or QuoteRequest())
