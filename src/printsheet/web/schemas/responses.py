"""Pydantic response schemas for the REST API."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from printsheet.web.schemas.common import PriceBandSchema


class GridSchema(BaseModel):
    """Item grid for one orientation."""

    items_per_sheet: int = Field(..., description="Items on one sheet face")
    columns: int = Field(..., description="Items across the sheet width")
    rows: int = Field(..., description="Items along the sheet height")


class ImpositionPlanSchema(BaseModel):
    """Sheets needed for a production run."""

    pages_per_sheet: int = Field(..., description="Pages carried by one sheet")
    sheets_per_product: int = Field(..., description="Sheets for one product")
    total_sheets: int = Field(..., description="Sheets for the whole run")


class LayoutResponseSchema(BaseModel):
    """Response for layout and imposition calculation."""

    sheet_width: float = Field(..., description="Sheet width in mm")
    sheet_height: float = Field(..., description="Sheet height in mm")
    item_width: float = Field(..., description="Item width in mm")
    item_height: float = Field(..., description="Item height in mm")
    items_per_sheet: int = Field(..., description="Reported yield per sheet face")
    columns: int = Field(..., description="Columns of the reported grid")
    rows: int = Field(..., description="Rows of the reported grid")
    rotated: bool = Field(..., description="Whether the item is turned 90 degrees")
    tie_break_applied: bool = Field(
        ..., description="Whether the rotated grid was preferred for edge clearance"
    )
    unrotated: GridSchema = Field(..., description="Grid with the item as given")
    rotated_candidate: GridSchema = Field(..., description="Grid with the item turned")
    utilization_percentage: float = Field(
        ..., description="Share of the sheet covered by items"
    )
    imposition: ImpositionPlanSchema | None = Field(
        default=None, description="Sheets needed, when a run was given"
    )


class TierHintSchema(BaseModel):
    """Next cheaper tier above the priced quantity."""

    band: PriceBandSchema = Field(..., description="The upcoming band")
    next_min_qty: int = Field(..., description="Quantity at which it starts")
    additional_quantity: int = Field(..., description="Extra items needed to reach it")
    additional_discount: Decimal | None = Field(
        default=None, description="Extra discount percent over the current band"
    )


class PriceResponseSchema(BaseModel):
    """Response for price evaluation."""

    quantity: int = Field(..., description="Priced quantity")
    total_price: Decimal = Field(..., description="Total price, full precision")
    unit_price: Decimal = Field(..., description="Total divided by quantity")
    band: PriceBandSchema = Field(..., description="Band that set the price")
    next_tier: TierHintSchema | None = Field(default=None, description="Upsell hint")


class CalculateResponseSchema(BaseModel):
    """Response for a full job calculation."""

    layout: LayoutResponseSchema = Field(..., description="Layout and sheets needed")
    price: PriceResponseSchema | None = Field(
        default=None, description="Price, when the job has price bands"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 valid, 1 errors, 2 warnings")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class PresetSchema(BaseModel):
    """Named sheet format."""

    code: str = Field(..., description="Preset code")
    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")


class PresetListSchema(BaseModel):
    """Response listing sheet presets."""

    presets: list[PresetSchema] = Field(..., description="Available presets")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
