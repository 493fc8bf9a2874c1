"""Pydantic request schemas for the REST API."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from printsheet.web.schemas.common import (
    ImpositionSchema,
    ItemSchema,
    PriceBandSchema,
    SheetSchema,
)


class LayoutRequest(BaseModel):
    """Request for the items-per-sheet layout."""

    sheet: SheetSchema = Field(..., description="Press sheet")
    item: ItemSchema = Field(..., description="Item trim size")


class ImpositionRequestSchema(BaseModel):
    """Request for sheets needed for a production run."""

    sheet: SheetSchema = Field(..., description="Press sheet")
    item: ItemSchema = Field(..., description="Item trim size")
    imposition: ImpositionSchema = Field(
        default_factory=ImpositionSchema, description="Run parameters"
    )


class PriceRequest(BaseModel):
    """Request for pricing a quantity."""

    bands: list[PriceBandSchema] = Field(
        ..., min_length=1, max_length=100, description="Bands in evaluation order"
    )
    quantity: int = Field(..., description="Number of items to price")
    base_unit_price: Decimal | None = Field(
        default=None, ge=0, description="Base price that discounts apply to"
    )
    strict: bool = Field(
        default=True, description="Reject unsorted or overlapping bands"
    )


class CalculateRequest(BaseModel):
    """Request for a full job calculation from a configuration."""

    config: dict[str, Any] = Field(..., description="Print job configuration JSON")
    quantity: int | None = Field(default=None, description="Override the run quantity")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Print job configuration JSON")
