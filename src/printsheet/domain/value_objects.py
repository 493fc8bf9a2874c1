"""Value objects for sheet yield, imposition and pricing.

All classes are frozen dataclasses constructed fresh per calculation, so they
can be shared between threads without locking. Lengths are in millimeters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum

from .exceptions import InvalidDimensionError, UnknownSheetPresetError


def _check_length(field_name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDimensionError(field_name, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError(field_name, value)


@dataclass(frozen=True)
class Dimension:
    """Immutable width/height pair in millimeters."""

    width: float
    height: float

    def __post_init__(self) -> None:
        _check_length("width", self.width)
        _check_length("height", self.height)

    @property
    def area(self) -> float:
        """Area in square millimeters."""
        return self.width * self.height

    def rotated(self) -> Dimension:
        """The same footprint turned by 90 degrees."""
        return Dimension(width=self.height, height=self.width)


class SheetPreset(str, Enum):
    """Named press sheet formats."""

    SRA3 = "SRA3"
    A3 = "A3"
    A4 = "A4"

    @property
    def dimension(self) -> Dimension:
        return _PRESET_SIZES[self]

    @classmethod
    def from_code(cls, code: str) -> SheetPreset:
        """Look up a preset by its code, ignoring case and whitespace.

        Raises:
            UnknownSheetPresetError: If the code is not in the preset table.
        """
        normalized = code.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise UnknownSheetPresetError(code, [p.value for p in cls]) from None


_PRESET_SIZES: dict[SheetPreset, Dimension] = {
    SheetPreset.SRA3: Dimension(width=320.0, height=450.0),
    SheetPreset.A3: Dimension(width=297.0, height=420.0),
    SheetPreset.A4: Dimension(width=210.0, height=297.0),
}


@dataclass(frozen=True)
class SheetSpec:
    """Either a named preset or a custom sheet size.

    When a preset is set it wins over any custom width/height carried
    alongside it.
    """

    preset: SheetPreset | None = None
    width: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        if self.preset is None and (self.width is None or self.height is None):
            raise ValueError("Sheet spec needs a preset or both width and height")

    @classmethod
    def from_preset(cls, code: str | SheetPreset) -> SheetSpec:
        preset = code if isinstance(code, SheetPreset) else SheetPreset.from_code(code)
        return cls(preset=preset)

    @classmethod
    def custom(cls, width: float, height: float) -> SheetSpec:
        return cls(width=width, height=height)

    @property
    def is_preset(self) -> bool:
        return self.preset is not None


@dataclass(frozen=True)
class MarginProfile:
    """Physical press allowances applied to every layout.

    Attributes:
        bleed: Cutting allowance per item edge, assumed already part of the
            item's trim size but re-added when checking edge clearance.
        gap: Spacing between adjacent items; defines the grid step.
        gripper: Feed strip along one width edge of the sheet only.
        safety_margin: Extra slack a grid must leave before it is accepted.
    """

    bleed: float = 2.0
    gap: float = 2.0
    gripper: float = 5.0
    safety_margin: float = 3.0

    def __post_init__(self) -> None:
        for name in ("bleed", "gap", "gripper", "safety_margin"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Margin {name} must be non-negative")

    @property
    def edge_allowance(self) -> float:
        """Bleed on both outer edges plus the safety slack."""
        return 2 * self.bleed + self.safety_margin


@dataclass(frozen=True)
class SelectionPolicy:
    """Thresholds for preferring a rotated layout with real clearance.

    Attributes:
        max_yield_difference: Largest yield advantage of the unrotated layout
            that may still be given up for the rotated one.
        min_headroom: Edge clearance in millimeters below which the unrotated
            layout counts as edge-hugging.
    """

    max_yield_difference: int = 4
    min_headroom: float = 15.0

    def __post_init__(self) -> None:
        if self.max_yield_difference < 0:
            raise ValueError("Maximum yield difference must be non-negative")
        if self.min_headroom < 0:
            raise ValueError("Minimum headroom must be non-negative")


DEFAULT_MARGINS = MarginProfile()
DEFAULT_SELECTION_POLICY = SelectionPolicy()


@dataclass(frozen=True)
class LayoutResult:
    """Grid of items obtained from one orientation attempt."""

    items_per_sheet: int
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.items_per_sheet < 0 or self.columns < 0 or self.rows < 0:
            raise ValueError("Layout counts must be non-negative")
        if self.items_per_sheet != self.columns * self.rows:
            raise ValueError("Items per sheet must equal columns x rows")

    @classmethod
    def zero(cls) -> LayoutResult:
        """The orientation does not fit at all."""
        return cls(items_per_sheet=0, columns=0, rows=0)

    @property
    def fits(self) -> bool:
        return self.items_per_sheet > 0


@dataclass(frozen=True)
class YieldDecision:
    """Chosen layout for an item on a sheet.

    Attributes:
        layout: The reported layout.
        rotated: True if the item is turned 90 degrees in ``layout``.
        unrotated: Candidate layout with the item as given.
        rotated_candidate: Candidate layout with the item turned.
        tie_break_applied: True if the smaller rotated layout was chosen
            because the unrotated one left too little edge clearance.
        item: Item trim size the decision was made for.
        sheet: Sheet size the decision was made for.
    """

    layout: LayoutResult
    rotated: bool
    unrotated: LayoutResult
    rotated_candidate: LayoutResult
    tie_break_applied: bool
    item: Dimension
    sheet: Dimension

    @property
    def items_per_sheet(self) -> int:
        return self.layout.items_per_sheet

    @property
    def is_feasible(self) -> bool:
        """False when the item does not fit the sheet in any orientation."""
        return self.layout.items_per_sheet > 0

    @property
    def utilization_percentage(self) -> float:
        """Share of the sheet area covered by trimmed items."""
        return self.items_per_sheet * self.item.area / self.sheet.area * 100

    @property
    def waste_percentage(self) -> float:
        return 100 - self.utilization_percentage


class Sides(IntEnum):
    """Printed sides per sheet."""

    SIMPLEX = 1
    DUPLEX = 2


@dataclass(frozen=True)
class ImpositionRequest:
    """Inputs for converting per-sheet yield into sheets needed."""

    items_per_sheet_face: int
    sides: Sides
    pages_per_product: int
    quantity: int

    def __post_init__(self) -> None:
        # Sides(3) raises ValueError, keeping sides to exactly 1 or 2
        object.__setattr__(self, "sides", Sides(self.sides))
        if self.items_per_sheet_face < 0:
            raise ValueError("Items per sheet face cannot be negative")
        if self.pages_per_product < 1:
            raise ValueError("Pages per product must be at least 1")


@dataclass(frozen=True)
class ImpositionPlan:
    """Sheets required for a production run."""

    pages_per_sheet: int
    sheets_per_product: int
    total_sheets: int


@dataclass(frozen=True)
class PriceBand:
    """Quantity range with either an absolute unit price or a discount.

    A band without ``max_qty`` is open-ended upward.
    """

    min_qty: int
    max_qty: int | None = None
    unit_price: Decimal | None = None
    discount_percent: Decimal | None = None
    label: str | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.min_qty < 0:
            raise ValueError("Band minimum quantity cannot be negative")
        if self.max_qty is not None and self.max_qty < self.min_qty:
            raise ValueError("Band maximum quantity must not be below its minimum")
        if self.unit_price is not None:
            object.__setattr__(self, "unit_price", Decimal(str(self.unit_price)))
            if self.unit_price < 0:
                raise ValueError("Unit price cannot be negative")
        if self.discount_percent is not None:
            object.__setattr__(
                self, "discount_percent", Decimal(str(self.discount_percent))
            )
            if not 0 <= self.discount_percent <= 100:
                raise ValueError("Discount percent must be between 0 and 100")

    def contains(self, quantity: int) -> bool:
        """Check whether ``quantity`` lies in [min_qty, max_qty]."""
        if quantity < self.min_qty:
            return False
        return self.max_qty is None or quantity <= self.max_qty

    @property
    def is_open_ended(self) -> bool:
        return self.max_qty is None


@dataclass(frozen=True)
class PriceResult:
    """Price for a quantity; ``unit_price`` is exactly total / quantity."""

    total_price: Decimal
    unit_price: Decimal
    quantity: int
    band: PriceBand


@dataclass(frozen=True)
class TierHint:
    """Nearest cheaper tier above the current quantity."""

    band: PriceBand
    next_min_qty: int
    additional_quantity: int
    additional_discount: Decimal | None = None

