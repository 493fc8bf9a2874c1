"""Unit tests for domain value objects.

These tests verify:
- Dimension validation and rotation
- SheetPreset lookup and SheetSpec construction
- MarginProfile and SelectionPolicy defaults and validation
- LayoutResult, ImpositionRequest and PriceBand invariants
"""

import math
from decimal import Decimal

import pytest

from printsheet.domain import (
    DEFAULT_MARGINS,
    DEFAULT_SELECTION_POLICY,
    Dimension,
    ImpositionRequest,
    InvalidDimensionError,
    LayoutResult,
    MarginProfile,
    PriceBand,
    SelectionPolicy,
    SheetPreset,
    SheetSpec,
    Sides,
    UnknownSheetPresetError,
)


class TestDimension:
    """Tests for Dimension value object."""

    def test_valid_creation(self) -> None:
        """Dimension should store width, height and area."""
        dim = Dimension(width=90.0, height=50.0)
        assert dim.width == 90.0
        assert dim.height == 50.0
        assert dim.area == 4500.0

    def test_rotated_swaps_width_and_height(self) -> None:
        """rotated() should swap width and height."""
        dim = Dimension(width=90.0, height=50.0).rotated()
        assert dim == Dimension(width=50.0, height=90.0)

    @pytest.mark.parametrize("width", [0, -1.0, math.inf, math.nan])
    def test_rejects_invalid_width(self, width: float) -> None:
        """Zero, negative, infinite and NaN widths should be rejected."""
        with pytest.raises(InvalidDimensionError) as exc_info:
            Dimension(width=width, height=50.0)
        assert exc_info.value.field_name == "width"

    def test_rejects_non_numeric(self) -> None:
        """A non-numeric width should be rejected."""
        with pytest.raises(InvalidDimensionError):
            Dimension(width="wide", height=50.0)  # type: ignore[arg-type]

    def test_rejects_bool(self) -> None:
        """A boolean should not be accepted as a size."""
        with pytest.raises(InvalidDimensionError):
            Dimension(width=True, height=50.0)  # type: ignore[arg-type]

    def test_invalid_dimension_is_value_error(self) -> None:
        """InvalidDimensionError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            Dimension(width=90.0, height=0)

    def test_is_immutable(self) -> None:
        """Dimension should be frozen."""
        dim = Dimension(width=90.0, height=50.0)
        with pytest.raises(AttributeError):
            dim.width = 100.0  # type: ignore[misc]


class TestSheetPreset:
    """Tests for SheetPreset lookup."""

    def test_preset_sizes(self) -> None:
        """Each preset should carry its size in millimeters."""
        assert SheetPreset.SRA3.dimension == Dimension(width=320.0, height=450.0)
        assert SheetPreset.A3.dimension == Dimension(width=297.0, height=420.0)
        assert SheetPreset.A4.dimension == Dimension(width=210.0, height=297.0)

    def test_from_code_ignores_case_and_whitespace(self) -> None:
        """Preset lookup should ignore case and surrounding spaces."""
        assert SheetPreset.from_code("sra3") is SheetPreset.SRA3
        assert SheetPreset.from_code(" a4 ") is SheetPreset.A4

    def test_unknown_code_raises(self) -> None:
        """An unknown preset should raise with the available codes."""
        with pytest.raises(UnknownSheetPresetError) as exc_info:
            SheetPreset.from_code("B2")
        assert exc_info.value.code == "B2"
        assert exc_info.value.available == ["SRA3", "A3", "A4"]

    def test_unknown_code_is_value_error(self) -> None:
        """UnknownSheetPresetError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            SheetPreset.from_code("letter")


class TestSheetSpec:
    """Tests for SheetSpec construction."""

    def test_from_preset(self) -> None:
        """from_preset should build a preset spec from its code."""
        spec = SheetSpec.from_preset("A3")
        assert spec.preset is SheetPreset.A3
        assert spec.is_preset

    def test_custom(self) -> None:
        """custom should build a spec without a preset."""
        spec = SheetSpec.custom(500.0, 700.0)
        assert spec.preset is None
        assert spec.width == 500.0
        assert not spec.is_preset

    def test_requires_preset_or_size(self) -> None:
        """A spec with neither a preset nor both sizes should be rejected."""
        with pytest.raises(ValueError, match="preset or both"):
            SheetSpec(width=500.0)


class TestMarginProfile:
    """Tests for MarginProfile defaults and validation."""

    def test_press_defaults(self) -> None:
        """The default margins should match the press allowances."""
        assert DEFAULT_MARGINS.bleed == 2.0
        assert DEFAULT_MARGINS.gap == 2.0
        assert DEFAULT_MARGINS.gripper == 5.0
        assert DEFAULT_MARGINS.safety_margin == 3.0

    def test_edge_allowance(self) -> None:
        """The edge allowance should be two bleeds plus the safety margin."""
        assert DEFAULT_MARGINS.edge_allowance == 7.0
        assert MarginProfile(bleed=3.0, safety_margin=0.0).edge_allowance == 6.0

    def test_rejects_negative_margin(self) -> None:
        """A negative margin should be rejected by name."""
        with pytest.raises(ValueError, match="gripper"):
            MarginProfile(gripper=-1.0)

    def test_zero_margins_allowed(self) -> None:
        """All margins may be zero."""
        margins = MarginProfile(bleed=0, gap=0, gripper=0, safety_margin=0)
        assert margins.edge_allowance == 0


class TestSelectionPolicy:
    """Tests for SelectionPolicy defaults and validation."""

    def test_defaults(self) -> None:
        """The default policy should allow four items of difference and require 15mm."""
        assert DEFAULT_SELECTION_POLICY.max_yield_difference == 4
        assert DEFAULT_SELECTION_POLICY.min_headroom == 15.0

    def test_rejects_negative_values(self) -> None:
        """Negative policy thresholds should be rejected."""
        with pytest.raises(ValueError):
            SelectionPolicy(max_yield_difference=-1)
        with pytest.raises(ValueError):
            SelectionPolicy(min_headroom=-0.5)


class TestLayoutResult:
    """Tests for LayoutResult invariants."""

    def test_zero(self) -> None:
        """LayoutResult.zero() should be an empty grid that does not fit."""
        layout = LayoutResult.zero()
        assert layout.items_per_sheet == 0
        assert not layout.fits

    def test_items_must_match_grid(self) -> None:
        """The item count should equal columns times rows."""
        with pytest.raises(ValueError, match="columns x rows"):
            LayoutResult(items_per_sheet=10, columns=3, rows=3)

    def test_rejects_negative_counts(self) -> None:
        """Negative grid counts should be rejected."""
        with pytest.raises(ValueError):
            LayoutResult(items_per_sheet=0, columns=-1, rows=0)


class TestImpositionRequest:
    """Tests for ImpositionRequest validation."""

    def test_sides_coerced_to_enum(self) -> None:
        """An integer side count should become a Sides member."""
        request = ImpositionRequest(
            items_per_sheet_face=8, sides=2, pages_per_product=4, quantity=10  # type: ignore[arg-type]
        )
        assert request.sides is Sides.DUPLEX

    def test_rejects_three_sides(self) -> None:
        """Only simplex and duplex should be accepted."""
        with pytest.raises(ValueError):
            ImpositionRequest(
                items_per_sheet_face=8, sides=3, pages_per_product=4, quantity=10  # type: ignore[arg-type]
            )

    def test_rejects_zero_pages(self) -> None:
        """A product needs at least one page."""
        with pytest.raises(ValueError, match="Pages per product"):
            ImpositionRequest(
                items_per_sheet_face=8,
                sides=Sides.SIMPLEX,
                pages_per_product=0,
                quantity=10,
            )

    def test_negative_quantity_is_accepted(self) -> None:
        """A negative run is left to the imposition plan, which needs no sheets for it."""
        request = ImpositionRequest(
            items_per_sheet_face=8,
            sides=Sides.SIMPLEX,
            pages_per_product=1,
            quantity=-1,
        )
        assert request.quantity == -1


class TestPriceBand:
    """Tests for PriceBand validation and matching."""

    def test_contains_inclusive_bounds(self) -> None:
        """A band should contain both its minimum and its maximum."""
        band = PriceBand(min_qty=100, max_qty=499, unit_price=Decimal("8"))
        assert band.contains(100)
        assert band.contains(499)
        assert not band.contains(99)
        assert not band.contains(500)

    def test_open_ended(self) -> None:
        """A band without a maximum should contain any larger quantity."""
        band = PriceBand(min_qty=1000, discount_percent=Decimal("15"))
        assert band.is_open_ended
        assert band.contains(10**9)

    def test_amounts_coerced_to_decimal(self) -> None:
        """Prices and discounts should be stored as Decimal."""
        band = PriceBand(min_qty=1, unit_price="0.10", discount_percent=5)  # type: ignore[arg-type]
        assert band.unit_price == Decimal("0.10")
        assert band.discount_percent == Decimal("5")

    def test_rejects_max_below_min(self) -> None:
        """A maximum below the minimum should be rejected."""
        with pytest.raises(ValueError, match="maximum"):
            PriceBand(min_qty=100, max_qty=50, unit_price=Decimal("1"))

    def test_rejects_discount_above_hundred(self) -> None:
        """A discount above 100% should be rejected."""
        with pytest.raises(ValueError, match="Discount"):
            PriceBand(min_qty=1, discount_percent=Decimal("101"))

    def test_rejects_negative_price(self) -> None:
        """A negative unit price should be rejected."""
        with pytest.raises(ValueError, match="Unit price"):
            PriceBand(min_qty=1, unit_price=Decimal("-1"))
