import logging
import math
import sys
from decimal import Context, Decimal, ROUND_HALF_EVEN
from typing import Any
from booking_engine.schemas.quote import QuoteRequest, QuoteResponse, QuoteInputs, PriceBreakdown
from booking_engine.core.enums import VehicleType
from booking_engine.core.metrics import quotes_calculated

logger = logging.getLogger(__name__)

BASE_FEE = 30
PER_KM = 3
DEFAULT_DISTANCE_KM = 10.0
CURRENCY = "AUD"

VEHICLE_MULTIPLIER = {
    VehicleType.VAN.value: 1.35,
    VehicleType.SUV.value: 1.2,
}
DEFAULT_MULTIPLIER = 1.0

KNOWN_VEHICLES = {v.value for v in VehicleType}

# Beyond this the fare no longer fits in a float
MAX_DISTANCE_KM = sys.float_info.max / (2 * PER_KM * max(VEHICLE_MULTIPLIER.values()))

CENTS = Decimal("0.01")
# Enough digits to quantize any finite float to the cent
MONEY_CONTEXT = Context(prec=sys.float_info.max_10_exp + 20, rounding=ROUND_HALF_EVEN)


def parse_distance_km(value: Any, default: float = DEFAULT_DISTANCE_KM) -> float:
    """Return ``value`` as a distance in km, or ``default`` when it is not one.

    Accepts ints, floats and numeric strings. Everything else (None,
    booleans, blank or non-numeric strings, NaN, infinities, containers)
    falls back to the default, as do magnitudes above ``MAX_DISTANCE_KM``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if not isinstance(value, (int, float)):
        return default
    try:
        km = float(value)
    except OverflowError:
        return default
    if not math.isfinite(km) or abs(km) > MAX_DISTANCE_KM:
        return default
    return km


def vehicle_multiplier(vehicle: str) -> float:
    return VEHICLE_MULTIPLIER.get(vehicle, DEFAULT_MULTIPLIER)


def round_money(amount: float) -> float:
    # Ties are broken to even on the shortest decimal form of the float,
    # so 33.375 -> 33.38 and 34.125 -> 34.12
    return float(Decimal(repr(amount)).quantize(CENTS, context=MONEY_CONTEXT))


def calculate_quote(req: QuoteRequest) -> QuoteResponse:
    km = parse_distance_km(req.hints.distance_km)
    multiplier = vehicle_multiplier(req.vehicle)

    raw = BASE_FEE + km * PER_KM
    total = round_money(raw * multiplier)

    quotes_calculated.labels(
        vehicle=req.vehicle if req.vehicle in KNOWN_VEHICLES else "other"
    ).inc()
    logger.debug(f"Quote for tenant={req.tenant} vehicle={req.vehicle} km={km}: {total} {CURRENCY}")

    return QuoteResponse(
        tenant=req.tenant,
        booking_type=req.booking_type,
        inputs=QuoteInputs(route=req.route, pax=req.pax, vehicle=req.vehicle, km=km),
        currency=CURRENCY,
        breakdown=PriceBreakdown(base=BASE_FEE, per_km=PER_KM, km=km, vehicle_adj=multiplier),
        total=total,
    )
