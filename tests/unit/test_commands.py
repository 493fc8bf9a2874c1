"""Unit tests for application commands."""

from decimal import Decimal

from printsheet.application import (
    CalculateJobCommand,
    CalculateYieldCommand,
    EvaluatePriceCommand,
    ImpositionInput,
    ItemInput,
    PriceInput,
    SheetInput,
)
from printsheet.domain import MarginProfile, PriceBand, SelectionPolicy


class TestCalculateYieldCommand:
    """Tests for CalculateYieldCommand."""

    def test_preset_sheet(self, yield_command: CalculateYieldCommand) -> None:
        """A preset sheet should yield 24 business cards and no plan without a run."""
        output = yield_command.execute(SheetInput(preset="SRA3"), ItemInput(90, 50))
        assert output.is_valid
        assert output.decision is not None
        assert output.decision.items_per_sheet == 24
        assert output.plan is None

    def test_lowercase_preset(self, yield_command: CalculateYieldCommand) -> None:
        """Preset codes should be accepted in any case."""
        output = yield_command.execute(SheetInput(preset="sra3"), ItemInput(90, 50))
        assert output.is_valid

    def test_custom_sheet(self, yield_command: CalculateYieldCommand) -> None:
        """A custom sheet the size of SRA3 should yield the same as the preset."""
        output = yield_command.execute(
            SheetInput(width=320, height=450), ItemInput(90, 50)
        )
        assert output.decision is not None
        assert output.decision.items_per_sheet == 24

    def test_with_imposition(self, yield_command: CalculateYieldCommand) -> None:
        """Run parameters should add an imposition plan to the output."""
        output = yield_command.execute(
            SheetInput(preset="SRA3"),
            ItemInput(90, 50),
            ImpositionInput(sides=2, pages_per_product=2, quantity=500),
        )
        assert output.is_valid
        assert output.plan is not None
        assert output.plan.total_sheets == 500

    def test_unknown_preset(self, yield_command: CalculateYieldCommand) -> None:
        """An unknown preset should be reported with the available codes."""
        output = yield_command.execute(SheetInput(preset="B2"), ItemInput(90, 50))
        assert not output.is_valid
        assert output.error_type == "validation"
        assert "SRA3" in output.errors[0]

    def test_missing_sheet_size(self, yield_command: CalculateYieldCommand) -> None:
        """A custom sheet without a height should fail before any layout is made."""
        output = yield_command.execute(SheetInput(width=320), ItemInput(90, 50))
        assert not output.is_valid
        assert output.decision is None

    def test_invalid_item(self, yield_command: CalculateYieldCommand) -> None:
        """A zero item width should be reported as an invalid dimension."""
        output = yield_command.execute(SheetInput(preset="SRA3"), ItemInput(0, 50))
        assert output.error_type == "invalid_dimension"

    def test_infeasible_layout_keeps_decision(
        self, yield_command: CalculateYieldCommand
    ) -> None:
        """An item that does not fit should still return the zero-yield decision."""
        output = yield_command.execute(SheetInput(preset="SRA3"), ItemInput(500, 500))
        assert output.error_type == "layout_infeasible"
        assert output.decision is not None
        assert output.decision.items_per_sheet == 0

    def test_invalid_imposition(self, yield_command: CalculateYieldCommand) -> None:
        """Every invalid run parameter should be reported at once."""
        output = yield_command.execute(
            SheetInput(preset="SRA3"),
            ItemInput(90, 50),
            ImpositionInput(sides=3, pages_per_product=0, quantity=-1),
        )
        assert output.error_type == "validation"
        assert len(output.errors) == 3

    def test_custom_margins_and_policy(self) -> None:
        """Margins and policy passed to the command should drive the layout."""
        command = CalculateYieldCommand(
            margins=MarginProfile(bleed=0, gap=0, gripper=0, safety_margin=0),
            policy=SelectionPolicy(max_yield_difference=0),
        )
        output = command.execute(SheetInput(width=300, height=300), ItemInput(100, 100))
        assert output.decision is not None
        assert output.decision.items_per_sheet == 9


class TestEvaluatePriceCommand:
    """Tests for EvaluatePriceCommand."""

    def test_price_with_hint(
        self, price_command: EvaluatePriceCommand, unit_price_bands: list[PriceBand]
    ) -> None:
        """A priced quantity should come with the hint for the next band."""
        output = price_command.execute(PriceInput(bands=unit_price_bands, quantity=50))
        assert output.is_valid
        assert output.result is not None
        assert output.result.total_price == Decimal("500")
        assert output.next_tier is not None
        assert output.next_tier.additional_quantity == 50

    def test_strict_rejects_overlap(self, price_command: EvaluatePriceCommand) -> None:
        """Overlapping bands should be rejected when pricing strictly."""
        bands = [
            PriceBand(min_qty=1, max_qty=100, unit_price=Decimal("10")),
            PriceBand(min_qty=50, unit_price=Decimal("8")),
        ]
        output = price_command.execute(PriceInput(bands=bands, quantity=60))
        assert output.error_type == "band_configuration"

    def test_lenient_uses_first_match(
        self, price_command: EvaluatePriceCommand
    ) -> None:
        """Lenient pricing should use the first band that matches."""
        bands = [
            PriceBand(min_qty=1, max_qty=100, unit_price=Decimal("10")),
            PriceBand(min_qty=50, unit_price=Decimal("8")),
        ]
        output = price_command.execute(PriceInput(bands=bands, quantity=60, strict=False))
        assert output.result is not None
        assert output.result.unit_price == Decimal("10")

    def test_invalid_quantity(
        self, price_command: EvaluatePriceCommand, unit_price_bands: list[PriceBand]
    ) -> None:
        """Quantity 0 should be reported as an invalid quantity."""
        output = price_command.execute(PriceInput(bands=unit_price_bands, quantity=0))
        assert output.error_type == "invalid_quantity"

    def test_no_matching_band(
        self, price_command: EvaluatePriceCommand, discount_bands: list[PriceBand]
    ) -> None:
        """A quantity outside every band should be reported, not priced at zero."""
        output = price_command.execute(
            PriceInput(bands=discount_bands, quantity=50, base_unit_price=Decimal("2"))
        )
        assert output.error_type == "no_matching_band"

    def test_missing_base_price(
        self, price_command: EvaluatePriceCommand, discount_bands: list[PriceBand]
    ) -> None:
        """A discount band without a base price should be reported."""
        output = price_command.execute(PriceInput(bands=discount_bands, quantity=500))
        assert output.error_type == "missing_base_price"


class TestCalculateJobCommand:
    """Tests for CalculateJobCommand."""

    def test_layout_and_price(
        self, job_command: CalculateJobCommand, discount_bands: list[PriceBand]
    ) -> None:
        """A full job should carry both the imposition plan and the price."""
        output = job_command.execute(
            SheetInput(preset="SRA3"),
            ItemInput(90, 50),
            ImpositionInput(sides=2, pages_per_product=2, quantity=500),
            PriceInput(
                bands=discount_bands, quantity=500, base_unit_price=Decimal("2.00")
            ),
        )
        assert output.is_valid
        assert output.yield_output.plan is not None
        assert output.yield_output.plan.total_sheets == 500
        assert output.price_output is not None
        assert output.price_output.result is not None
        assert output.price_output.result.total_price == Decimal("900")

    def test_layout_only(self, job_command: CalculateJobCommand) -> None:
        """A job without bands should have no price output."""
        output = job_command.execute(SheetInput(preset="A4"), ItemInput(90, 50))
        assert output.is_valid
        assert output.price_output is None

    def test_errors_collected_from_both_parts(
        self, job_command: CalculateJobCommand, discount_bands: list[PriceBand]
    ) -> None:
        """Errors from the layout and the pricing should both be reported."""
        output = job_command.execute(
            SheetInput(preset="SRA3"),
            ItemInput(500, 500),
            None,
            PriceInput(bands=discount_bands, quantity=10),
        )
        assert not output.is_valid
        assert len(output.errors) == 2
