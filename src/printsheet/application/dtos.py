"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from printsheet.domain import (
    ImpositionPlan,
    PriceBand,
    PriceResult,
    SheetPreset,
    SheetSpec,
    Sides,
    TierHint,
    YieldDecision,
)


@dataclass
class SheetInput:
    """Input DTO for the press sheet: a preset code or a custom size."""

    preset: str | None = None
    width: float | None = None
    height: float | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.preset:
            valid_presets = [p.value for p in SheetPreset]
            if self.preset.strip().upper() not in valid_presets:
                errors.append(
                    f"Sheet preset must be one of: {', '.join(valid_presets)}"
                )
        elif self.width is None or self.height is None:
            errors.append("Sheet needs a preset or both width and height")
        return errors

    def to_sheet_spec(self) -> SheetSpec:
        """Convert to SheetSpec value object."""
        if self.preset:
            return SheetSpec.from_preset(self.preset)
        return SheetSpec.custom(self.width, self.height)  # type: ignore[arg-type]


@dataclass
class ItemInput:
    """Input DTO for the item trim size in millimeters."""

    width: float
    height: float


@dataclass
class ImpositionInput:
    """Input DTO for a multi-page production run."""

    sides: int = 1
    pages_per_product: int = 1
    quantity: int = 1

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.sides not in (Sides.SIMPLEX, Sides.DUPLEX):
            errors.append("Sides must be 1 (simplex) or 2 (duplex)")
        if self.pages_per_product < 1:
            errors.append("Pages per product must be at least 1")
        if self.quantity < 0:
            errors.append("Quantity cannot be negative")
        return errors


@dataclass
class PriceInput:
    """Input DTO for pricing a quantity against a set of bands.

    Attributes:
        bands: Price bands in evaluation order.
        quantity: Number of items to price.
        base_unit_price: Unit price that discount bands apply to.
        strict: Reject unsorted or overlapping bands instead of using the
            first match.
    """

    bands: list[PriceBand]
    quantity: int
    base_unit_price: Decimal | None = None
    strict: bool = True


@dataclass
class YieldOutput:
    """Output DTO for layout and imposition calculation.

    Attributes:
        decision: Orientation decision, present when the sizes were valid.
        plan: Sheets needed for the run, present when imposition was requested
            and the layout fits.
        errors: Error messages if the calculation failed.
        error_type: Category of the first error, for API consumers.
    """

    decision: YieldDecision | None = None
    plan: ImpositionPlan | None = None
    errors: list[str] = field(default_factory=list)
    error_type: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the calculation succeeded."""
        return len(self.errors) == 0


@dataclass
class PriceOutput:
    """Output DTO for price evaluation."""

    result: PriceResult | None = None
    next_tier: TierHint | None = None
    errors: list[str] = field(default_factory=list)
    error_type: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the price was evaluated successfully."""
        return len(self.errors) == 0


@dataclass
class JobOutput:
    """Output DTO for a full job: layout, sheets needed and price."""

    yield_output: YieldOutput
    price_output: PriceOutput | None = None

    @property
    def errors(self) -> list[str]:
        errors = list(self.yield_output.errors)
        if self.price_output is not None:
            errors.extend(self.price_output.errors)
        return errors

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0
