"""Common Pydantic schemas shared across requests and responses."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from printsheet.domain import SheetPreset


class SheetSchema(BaseModel):
    """Press sheet: a preset or a custom size in millimeters."""

    preset: SheetPreset | None = Field(
        default=None, description="Preset code; wins over width/height"
    )
    width: float | None = Field(default=None, gt=0, le=5000, description="Width in mm")
    height: float | None = Field(
        default=None, gt=0, le=5000, description="Height in mm"
    )

    @field_validator("preset", mode="before")
    @classmethod
    def normalize_preset(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @model_validator(mode="after")
    def require_size(self) -> "SheetSchema":
        if self.preset is None and (self.width is None or self.height is None):
            raise ValueError("sheet needs a preset or both width and height")
        return self


class ItemSchema(BaseModel):
    """Item trim size in millimeters."""

    width: float = Field(..., gt=0, le=5000, description="Trim width in mm")
    height: float = Field(..., gt=0, le=5000, description="Trim height in mm")


class ImpositionSchema(BaseModel):
    """Production run parameters."""

    sides: int = Field(default=1, ge=1, le=2, description="1 simplex, 2 duplex")
    pages_per_product: int = Field(default=1, ge=1, description="Pages per product")
    quantity: int = Field(default=1, ge=0, description="Number of products")


class PriceBandSchema(BaseModel):
    """Quantity band priced by unit price or by discount."""

    min_qty: int = Field(..., ge=0, description="First quantity of the band")
    max_qty: int | None = Field(
        default=None, ge=0, description="Last quantity; omitted for open-ended"
    )
    unit_price: Decimal | None = Field(default=None, ge=0, description="Price per item")
    discount_percent: Decimal | None = Field(
        default=None, ge=0, le=100, description="Discount from the base price"
    )
    label: str | None = Field(default=None, description="Display name")
    is_active: bool = Field(default=True, description="Inactive bands are ignored")

    @model_validator(mode="after")
    def check_range(self) -> "PriceBandSchema":
        if self.max_qty is not None and self.max_qty < self.min_qty:
            raise ValueError("max_qty must not be below min_qty")
        return self
