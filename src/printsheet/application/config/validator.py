"""Validation structures and production advisory checks.

Schema validation is done by Pydantic when the file is loaded. This module
adds the semantic checks: whether the item fits the sheet, whether the price
bands are well formed, and advisories for layouts and band sets that work
but deserve a second look.
"""

from dataclasses import dataclass, field
from typing import Any

from printsheet.application.config.adapter import (
    config_to_bands,
    config_to_item,
    config_to_sheet_spec,
)
from printsheet.application.config.schema import PrintJobConfiguration
from printsheet.domain import resolve_sheet, select_orientation
from printsheet.domain.services.pricing import check_bands, coverage_gaps, find_band

# Below this share of the sheet area covered by items a layout is flagged
LOW_UTILIZATION_PERCENTAGE: float = 50.0


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "pricing.bands[1]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_layout(config: PrintJobConfiguration) -> ValidationResult:
    """Check that the item fits the sheet and flag marginal layouts."""
    result = ValidationResult()
    sheet = resolve_sheet(config_to_sheet_spec(config))
    item = config_to_item(config)
    decision = select_orientation(item, sheet)

    if not decision.is_feasible:
        return result.add_error(
            "item",
            f"Item {item.width:g}x{item.height:g}mm does not fit sheet "
            f"{sheet.width:g}x{sheet.height:g}mm in either orientation",
            value={"width": item.width, "height": item.height},
        )

    if decision.tie_break_applied:
        result.add_warning(
            "item",
            f"Unrotated layout ({decision.unrotated.items_per_sheet}/sheet) leaves "
            f"too little edge clearance; using rotated layout "
            f"({decision.items_per_sheet}/sheet)",
            suggestion="Consider a larger sheet or a slightly smaller trim size",
        )

    if decision.utilization_percentage < LOW_UTILIZATION_PERCENTAGE:
        result.add_warning(
            "sheet",
            f"Only {decision.utilization_percentage:.1f}% of the sheet is used "
            f"({decision.items_per_sheet} items per sheet)",
            suggestion="A smaller sheet format may waste less stock",
        )
    return result


def check_pricing(config: PrintJobConfiguration) -> ValidationResult:
    """Check price bands for ordering, overlaps, gaps and missing prices."""
    result = ValidationResult()
    if config.pricing is None:
        return result

    bands = config_to_bands(config)
    if not bands:
        return result.add_warning(
            "pricing.bands",
            "No price bands configured",
            suggestion="Add at least one band or remove the pricing section",
        )

    for problem in check_bands(bands):
        result.add_error("pricing.bands", problem)

    if config.pricing.base_unit_price is None:
        for index, band in enumerate(bands):
            if band.is_active and band.discount_percent is not None:
                result.add_error(
                    f"pricing.bands[{index}]",
                    "Discount band requires pricing.base_unit_price",
                    value=str(band.discount_percent),
                )

    for first, last in coverage_gaps(bands):
        if first == 1:
            result.add_warning(
                "pricing.bands",
                f"Quantities {first}-{last} are below the first band and have no price",
                suggestion="Start the lowest band at min_qty 1",
            )
            continue
        result.add_warning(
            "pricing.bands",
            f"Quantities {first}-{last} are not covered by any band",
            suggestion="Extend a neighbouring band or add a band for this range",
        )

    active = [b for b in bands if b.is_active]
    if active and not any(b.is_open_ended for b in active):
        result.add_warning(
            "pricing.bands",
            "No open-ended band: large quantities will have no price",
            suggestion="Omit max_qty on the highest band",
        )

    if config.imposition is not None and config.imposition.quantity >= 1:
        quantity = config.imposition.quantity
        if find_band(bands, quantity) is None:
            result.add_error(
                "imposition.quantity",
                f"No price band covers quantity {quantity}",
                value=quantity,
            )
    return result


def validate_config(config: PrintJobConfiguration) -> ValidationResult:
    """Perform full semantic validation of a loaded configuration."""
    result = ValidationResult()
    result.merge(check_layout(config))
    result.merge(check_pricing(config))
    return result
