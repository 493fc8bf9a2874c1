"""Conversion of configuration models into domain values and input DTOs."""

from __future__ import annotations

from printsheet.application.config.schema import (
    PriceBandConfig,
    PrintJobConfiguration,
)
from printsheet.application.dtos import (
    ImpositionInput,
    ItemInput,
    PriceInput,
    SheetInput,
)
from printsheet.domain import (
    Dimension,
    ImpositionRequest,
    PriceBand,
    SheetSpec,
    Sides,
    resolve_item,
)


def config_to_sheet_spec(config: PrintJobConfiguration) -> SheetSpec:
    """Convert the sheet section to a SheetSpec."""
    sheet = config.sheet
    if sheet.preset is not None:
        return SheetSpec.from_preset(sheet.preset)
    return SheetSpec.custom(sheet.width, sheet.height)  # type: ignore[arg-type]


def config_to_item(config: PrintJobConfiguration) -> Dimension:
    """Convert the item section to a Dimension."""
    return resolve_item(config.item.width, config.item.height)


def config_to_imposition(
    config: PrintJobConfiguration, items_per_sheet_face: int
) -> ImpositionRequest | None:
    """Build an ImpositionRequest for a known yield, or None without a run."""
    if config.imposition is None:
        return None
    return ImpositionRequest(
        items_per_sheet_face=items_per_sheet_face,
        sides=Sides(config.imposition.sides),
        pages_per_product=config.imposition.pages_per_product,
        quantity=config.imposition.quantity,
    )


def band_config_to_domain(band: PriceBandConfig) -> PriceBand:
    return PriceBand(
        min_qty=band.min_qty,
        max_qty=band.max_qty,
        unit_price=band.unit_price,
        discount_percent=band.discount_percent,
        label=band.label,
        is_active=band.is_active,
    )


def config_to_bands(config: PrintJobConfiguration) -> list[PriceBand]:
    """Convert configured price bands in file order."""
    if config.pricing is None:
        return []
    return [band_config_to_domain(b) for b in config.pricing.bands]


def config_to_inputs(
    config: PrintJobConfiguration,
    quantity: int | None = None,
) -> tuple[SheetInput, ItemInput, ImpositionInput | None, PriceInput | None]:
    """Convert a configuration into the input DTOs of CalculateJobCommand.

    Args:
        config: Loaded job configuration.
        quantity: Overrides the run quantity used for pricing. Defaults to
            the imposition quantity, or 1 without an imposition section.
    """
    sheet_input = SheetInput(
        preset=config.sheet.preset.value if config.sheet.preset else None,
        width=config.sheet.width,
        height=config.sheet.height,
    )
    item_input = ItemInput(width=config.item.width, height=config.item.height)

    imposition_input = None
    if config.imposition is not None:
        imposition_input = ImpositionInput(
            sides=config.imposition.sides,
            pages_per_product=config.imposition.pages_per_product,
            quantity=config.imposition.quantity if quantity is None else quantity,
        )

    price_input = None
    if config.pricing is not None and config.pricing.bands:
        if quantity is None:
            quantity = config.imposition.quantity if config.imposition else 1
        price_input = PriceInput(
            bands=config_to_bands(config),
            quantity=quantity,
            base_unit_price=config.pricing.base_unit_price,
        )

    return sheet_input, item_input, imposition_input, price_input
