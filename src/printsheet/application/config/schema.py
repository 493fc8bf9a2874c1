"""Pydantic models for print job configuration files.

A job file describes the press sheet, the item trim size, and optionally the
production run and the product's price bands:

    {
        "schema_version": "1.0",
        "sheet": {"preset": "SRA3"},
        "item": {"width": 90, "height": 50},
        "imposition": {"sides": 2, "pages_per_product": 8, "quantity": 100},
        "pricing": {
            "base_unit_price": "1.20",
            "bands": [{"min_qty": 1, "max_qty": 99, "unit_price": "10"}]
        }
    }

Press margins are not part of the file; they are fixed by the press.
"""

from decimal import Decimal
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from printsheet.domain.value_objects import SheetPreset

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SheetConfig(BaseModel):
    """Press sheet: a preset code or a custom width and height in mm.

    Attributes:
        preset: Preset code (SRA3, A3, A4); wins over width/height.
        width: Custom sheet width in millimeters.
        height: Custom sheet height in millimeters.
    """

    model_config = ConfigDict(extra="forbid")

    preset: SheetPreset | None = None
    width: float | None = Field(default=None, gt=0, le=5000)
    height: float | None = Field(default=None, gt=0, le=5000)

    @field_validator("preset", mode="before")
    @classmethod
    def normalize_preset(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @model_validator(mode="after")
    def require_size(self) -> "SheetConfig":
        if self.preset is None and (self.width is None or self.height is None):
            raise ValueError("sheet needs a preset or both width and height")
        return self


class ItemConfig(BaseModel):
    """Item trim size in millimeters."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=5000)
    height: float = Field(..., gt=0, le=5000)


class ImpositionConfig(BaseModel):
    """Production run: printed sides, pages per product and quantity."""

    model_config = ConfigDict(extra="forbid")

    sides: Literal[1, 2] = 1
    pages_per_product: int = Field(default=1, ge=1)
    quantity: int = Field(default=1, ge=0)


class PriceBandConfig(BaseModel):
    """One quantity band with either a unit price or a discount.

    Attributes:
        min_qty: First quantity of the band.
        max_qty: Last quantity of the band; omitted for open-ended bands.
        unit_price: Absolute price per item.
        discount_percent: Discount from the base unit price, 0 to 100.
        label: Optional display name.
        is_active: Inactive bands are ignored.
    """

    model_config = ConfigDict(extra="forbid")

    min_qty: int = Field(..., ge=0)
    max_qty: int | None = Field(default=None, ge=0)
    unit_price: Decimal | None = Field(default=None, ge=0)
    discount_percent: Decimal | None = Field(default=None, ge=0, le=100)
    label: str | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_range(self) -> "PriceBandConfig":
        if self.max_qty is not None and self.max_qty < self.min_qty:
            raise ValueError("max_qty must not be below min_qty")
        return self


class PricingConfig(BaseModel):
    """Price bands for the product and the base price discounts apply to."""

    model_config = ConfigDict(extra="forbid")

    base_unit_price: Decimal | None = Field(default=None, ge=0)
    bands: list[PriceBandConfig] = Field(default_factory=list, max_length=100)


class PrintJobConfiguration(BaseModel):
    """Root model of a print job configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    sheet: SheetConfig
    item: ItemConfig
    imposition: ImpositionConfig | None = None
    pricing: PricingConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema_version {value!r}. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return value
