"""Tiered price evaluation endpoints."""

from fastapi import APIRouter

from printsheet.application.dtos import PriceInput, PriceOutput
from printsheet.domain import PriceBand
from printsheet.web.dependencies import PriceCommandDep
from printsheet.web.exceptions import CalculationError
from printsheet.web.schemas.common import PriceBandSchema
from printsheet.web.schemas.requests import PriceRequest
from printsheet.web.schemas.responses import PriceResponseSchema, TierHintSchema

router = APIRouter(tags=["pricing"])


def _band_to_domain(band: PriceBandSchema) -> PriceBand:
    return PriceBand(
        min_qty=band.min_qty,
        max_qty=band.max_qty,
        unit_price=band.unit_price,
        discount_percent=band.discount_percent,
        label=band.label,
        is_active=band.is_active,
    )


def _band_to_schema(band: PriceBand) -> PriceBandSchema:
    return PriceBandSchema(
        min_qty=band.min_qty,
        max_qty=band.max_qty,
        unit_price=band.unit_price,
        discount_percent=band.discount_percent,
        label=band.label,
        is_active=band.is_active,
    )


def price_output_to_schema(output: PriceOutput) -> PriceResponseSchema:
    """Convert a successful PriceOutput to the response schema.

    Raises:
        CalculationError: If the output carries errors.
    """
    if not output.is_valid or output.result is None:
        raise CalculationError(output.errors, output.error_type)

    result = output.result
    next_tier = None
    if output.next_tier is not None:
        hint = output.next_tier
        next_tier = TierHintSchema(
            band=_band_to_schema(hint.band),
            next_min_qty=hint.next_min_qty,
            additional_quantity=hint.additional_quantity,
            additional_discount=hint.additional_discount,
        )

    return PriceResponseSchema(
        quantity=result.quantity,
        total_price=result.total_price,
        unit_price=result.unit_price,
        band=_band_to_schema(result.band),
        next_tier=next_tier,
    )


@router.post("/price", response_model=PriceResponseSchema)
async def evaluate_price(
    request: PriceRequest,
    command: PriceCommandDep,
) -> PriceResponseSchema:
    """Price a quantity against tiered bands.

    Raises:
        CalculationError: If no band matches, the quantity is below 1, or
            strict checking finds overlapping or unsorted bands.
    """
    output = command.execute(
        PriceInput(
            bands=[_band_to_domain(b) for b in request.bands],
            quantity=request.quantity,
            base_unit_price=request.base_unit_price,
            strict=request.strict,
        )
    )
    return price_output_to_schema(output)
