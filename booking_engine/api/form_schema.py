from typing import Optional
from fastapi import APIRouter, Depends, Query

from booking_engine.schemas.form_schema import FormSchemaResponse
from booking_engine.services.form_schema import build_form_schema
from booking_engine.core.security import require_api_key

router = APIRouter(prefix="/api", tags=["booking"], dependencies=[Depends(require_api_key)])


@router.get("/form-schema", response_model=FormSchemaResponse)
async def get_form_schema(
    tenant: Optional[str] = Query(default=None),
    booking_type: Optional[str] = Query(default=None),
):
    return build_form_schema(tenant, booking_type)
