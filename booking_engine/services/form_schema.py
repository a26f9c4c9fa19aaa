from typing import Optional
from booking_engine.schemas.form_schema import FormSchemaResponse, FormSection, VehicleOption, ExtraOption
from booking_engine.schemas.quote import DEFAULT_TENANT, DEFAULT_BOOKING_TYPE
from booking_engine.core.enums import VehicleType

SECTIONS = [
    FormSection(id="basics", fields=["pickup", "dropoff", "date", "time", "pax", "luggage"]),
    FormSection(id="vehicle", fields=["vehicle"]),
]

VEHICLES = [
    VehicleOption(code=VehicleType.SEDAN.value, label="Sedan", seats_total=4),
    VehicleOption(code=VehicleType.SUV.value, label="SUV", seats_total=6),
    VehicleOption(code=VehicleType.VAN.value, label="Van", seats_total=7),
]

EXTRAS = [
    ExtraOption(code="water", label="Bottled Water", price=0),
]


def build_form_schema(tenant: Optional[str] = None, booking_type: Optional[str] = None) -> FormSchemaResponse:
    """The booking form layout. Tenant and booking type are only echoed back."""
    return FormSchemaResponse(
        tenant=tenant or DEFAULT_TENANT,
        booking_type=booking_type or DEFAULT_BOOKING_TYPE,
        sections=SECTIONS,
        vehicles=VEHICLES,
        extras=EXTRAS,
    )
