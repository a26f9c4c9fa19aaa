from pydantic import BaseModel
from typing import List


class FormSection(BaseModel):
    id: str
    fields: List[str]


class VehicleOption(BaseModel):
    code: str
    label: str
    seats_total: int


class ExtraOption(BaseModel):
    code: str
    label: str
    price: float


class FormSchemaResponse(BaseModel):
    ok: bool = True
    tenant: str
    booking_type: str
    sections: List[FormSection]
    vehicles: List[VehicleOption]
    extras: List[ExtraOption]
