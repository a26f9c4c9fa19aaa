from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any
from booking_engine.core.enums import VehicleType

DEFAULT_TENANT = "all-limos"
DEFAULT_BOOKING_TYPE = "general"


class QuoteHints(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Left raw: services.pricing.parse_distance_km decides what counts as a distance
    distance_km: Any = None


class QuoteRequest(BaseModel):
    tenant: str = DEFAULT_TENANT
    booking_type: str = DEFAULT_BOOKING_TYPE
    route: Any = Field(default_factory=dict)
    pax: Any = 1
    vehicle: str = VehicleType.SEDAN.value
    hints: QuoteHints = Field(default_factory=QuoteHints)

    @field_validator("tenant", "booking_type", "route", "pax", "vehicle", mode="before")
    @classmethod
    def null_means_default(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @field_validator("hints", mode="before")
    @classmethod
    def hints_must_be_object(cls, value):
        if not isinstance(value, (dict, QuoteHints)):
            return {}
        return value


class QuoteInputs(BaseModel):
    route: Any
    pax: Any
    vehicle: str
    km: float


class PriceBreakdown(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base: float
    per_km: float = Field(alias="perKm")
    km: float
    vehicle_adj: float = Field(alias="vehicleAdj")


class QuoteResponse(BaseModel):
    ok: bool = True
    tenant: str
    booking_type: str
    inputs: QuoteInputs
    currency: str
    breakdown: PriceBreakdown
    total: float
