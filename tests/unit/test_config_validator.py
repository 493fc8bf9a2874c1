"""Unit tests for semantic validation of job configurations."""

from pathlib import Path
from typing import Any

from printsheet.application.config import (
    ValidationResult,
    check_layout,
    check_pricing,
    load_config,
    load_config_from_dict,
    validate_config,
)


def _config(**overrides: Any):
    data: dict[str, Any] = {
        "sheet": {"preset": "SRA3"},
        "item": {"width": 90, "height": 50},
    }
    data.update(overrides)
    return load_config_from_dict(data)


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_result_is_valid(self) -> None:
        """An empty result should be valid with exit code 0."""
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        """Warnings alone should give exit code 2."""
        result = ValidationResult().add_warning("item", "tight", suggestion="resize")
        assert result.is_valid
        assert result.exit_code == 2
        assert result.warnings[0].suggestion == "resize"

    def test_error_wins_over_warning(self) -> None:
        """Errors should give exit code 1 even with warnings."""
        result = ValidationResult().add_warning("a", "w").add_error("b", "e", value=3)
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == 3

    def test_merge(self) -> None:
        """merge should append the other result's problems in place."""
        first = ValidationResult().add_error("a", "e")
        second = ValidationResult().add_warning("b", "w")
        merged = first.merge(second)
        assert merged is first
        assert len(merged.errors) == 1
        assert len(merged.warnings) == 1


class TestValidateFixtures:
    """Tests for validate_config against job file fixtures."""

    def test_minimal_is_clean(self, fixtures_path: Path) -> None:
        """A minimal job should validate cleanly."""
        result = validate_config(load_config(fixtures_path / "valid_minimal.json"))
        assert result.exit_code == 0

    def test_full_is_clean(self, fixtures_path: Path) -> None:
        """The full job fixture should have neither errors nor warnings."""
        result = validate_config(load_config(fixtures_path / "valid_full.json"))
        assert result.errors == []
        assert result.warnings == []

    def test_warnings_fixture(self, fixtures_path: Path) -> None:
        """The warnings fixture should flag the tie-break and the quantity gap."""
        result = validate_config(load_config(fixtures_path / "valid_with_warnings.json"))
        assert result.exit_code == 2
        messages = " ".join(w.message for w in result.warnings)
        assert "edge clearance" in messages
        assert "100-199" in messages

    def test_infeasible_layout(self, fixtures_path: Path) -> None:
        """An item larger than the sheet should be an error at item."""
        result = validate_config(load_config(fixtures_path / "infeasible_layout.json"))
        assert result.exit_code == 1
        assert result.errors[0].path == "item"
        assert "does not fit" in result.errors[0].message

    def test_overlapping_bands(self, fixtures_path: Path) -> None:
        """Overlapping bands should be an error."""
        result = validate_config(load_config(fixtures_path / "overlapping_bands.json"))
        assert not result.is_valid
        assert any("overlaps" in e.message for e in result.errors)


class TestCheckLayout:
    """Tests for layout advisories."""

    def test_low_utilization_warning(self) -> None:
        """A layout using under half the sheet should be flagged."""
        result = check_layout(_config(item={"width": 160, "height": 160}))
        assert result.is_valid
        assert [w.path for w in result.warnings] == ["sheet"]
        assert "of the sheet is used" in result.warnings[0].message

    def test_tie_break_warning(self) -> None:
        """A tie-break override should be flagged with the chosen yield."""
        result = check_layout(_config(item={"width": 100, "height": 70}))
        assert len(result.warnings) == 1
        assert "16/sheet" in result.warnings[0].message


class TestCheckPricing:
    """Tests for price band checks."""

    def test_no_pricing_section(self) -> None:
        """A job without pricing should pass the price checks."""
        assert check_pricing(_config()).exit_code == 0

    def test_empty_bands_warning(self) -> None:
        """An empty band list should be a warning."""
        result = check_pricing(_config(pricing={"bands": []}))
        assert result.exit_code == 2
        assert "No price bands" in result.warnings[0].message

    def test_discount_without_base_price(self) -> None:
        """A discount band without a base price should be an error at the band."""
        result = check_pricing(
            _config(pricing={"bands": [{"min_qty": 1, "discount_percent": "10"}]})
        )
        assert not result.is_valid
        assert result.errors[0].path == "pricing.bands[0]"

    def test_missing_open_ended_band(self) -> None:
        """Bands with an upper bound everywhere should be flagged."""
        result = check_pricing(
            _config(
                pricing={"bands": [{"min_qty": 1, "max_qty": 99, "unit_price": "1"}]}
            )
        )
        assert result.is_valid
        assert any("open-ended" in w.message for w in result.warnings)

    def test_small_orders_below_first_band_warned(self) -> None:
        """Bands starting above 1 should leave a warning for the unpriced small orders."""
        result = check_pricing(
            _config(
                pricing={
                    "bands": [
                        {"min_qty": 100, "max_qty": 499, "unit_price": "2"},
                        {"min_qty": 500, "unit_price": "1.50"},
                    ]
                }
            )
        )
        assert result.is_valid
        assert result.exit_code == 2
        assert len(result.warnings) == 1
        assert result.warnings[0].message.startswith("Quantities 1-99 are below")
        assert result.warnings[0].suggestion == "Start the lowest band at min_qty 1"

    def test_run_quantity_outside_bands(self) -> None:
        """A run quantity no band covers should be an error."""
        result = check_pricing(
            _config(
                imposition={"quantity": 50},
                pricing={"bands": [{"min_qty": 100, "unit_price": "1"}]},
            )
        )
        assert [e.path for e in result.errors] == ["imposition.quantity"]

    def test_inactive_overlap_ignored(self) -> None:
        """An inactive overlapping band should not be an error."""
        result = check_pricing(
            _config(
                pricing={
                    "bands": [
                        {"min_qty": 1, "unit_price": "2"},
                        {"min_qty": 50, "unit_price": "1", "is_active": False},
                    ]
                }
            )
        )
        assert result.exit_code == 0
