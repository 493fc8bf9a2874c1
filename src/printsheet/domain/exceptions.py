"""Domain exceptions for sheet yield and pricing calculations.

Every failure in the engine is data-dependent and recoverable by changing
inputs (a different sheet, another quantity, an extra price band). None of
these exceptions is fatal; callers translate them into user-facing messages.
"""

from __future__ import annotations


class PrintSheetError(Exception):
    """Base class for all calculation errors."""

    error_type: str = "printsheet"


class InvalidDimensionError(PrintSheetError, ValueError):
    """Raised when a width or height is not positive or not finite."""

    error_type = "invalid_dimension"

    def __init__(self, field_name: str, value: object) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"{field_name} must be a positive finite number in millimeters, got {value!r}"
        )


class UnknownSheetPresetError(PrintSheetError, ValueError):
    """Raised when a sheet preset code is not in the preset table."""

    error_type = "unknown_preset"

    def __init__(self, code: str, available: list[str]) -> None:
        self.code = code
        self.available = available
        super().__init__(
            f"Unknown sheet preset: {code!r}. Available: {', '.join(available)}"
        )


class LayoutInfeasibleError(PrintSheetError):
    """Raised when the item does not fit the sheet in either orientation."""

    error_type = "layout_infeasible"

    def __init__(self, item_width: float, item_height: float, sheet_width: float, sheet_height: float) -> None:
        self.item_width = item_width
        self.item_height = item_height
        self.sheet_width = sheet_width
        self.sheet_height = sheet_height
        super().__init__(
            f"Item {item_width:g}x{item_height:g}mm does not fit sheet "
            f"{sheet_width:g}x{sheet_height:g}mm in either orientation"
        )


class ImpositionUnconfiguredError(PrintSheetError):
    """Raised when pages per sheet is zero, so sheets needed is undefined."""

    error_type = "imposition_unconfigured"

    def __init__(self) -> None:
        super().__init__("Layout not configured: pages per sheet is 0")


class PricingError(PrintSheetError):
    """Base class for price band evaluation errors."""

    error_type = "pricing"


class NoMatchingBandError(PricingError):
    """Raised when a quantity falls outside every configured price band."""

    error_type = "no_matching_band"

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"No price band covers quantity {quantity}")


class InvalidQuantityError(PricingError, ValueError):
    """Raised when a quantity below 1 reaches the price evaluator."""

    error_type = "invalid_quantity"

    def __init__(self, quantity: object) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be at least 1, got {quantity!r}")


class MissingBasePriceError(PricingError):
    """Raised when a discount band matches but no base unit price was given."""

    error_type = "missing_base_price"

    def __init__(self, min_qty: int) -> None:
        self.min_qty = min_qty
        super().__init__(
            f"Band starting at {min_qty} applies a discount but no base unit price was supplied"
        )


class BandConfigurationError(PricingError, ValueError):
    """Raised when a set of price bands is unsorted, overlapping or ambiguous."""

    error_type = "band_configuration"

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid price bands: " + "; ".join(problems))
