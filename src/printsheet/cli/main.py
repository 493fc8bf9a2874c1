"""Typer CLI for print sheet yield, imposition and pricing."""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Annotated

import typer

from printsheet.application import (
    CalculateJobCommand,
    CalculateYieldCommand,
    EvaluatePriceCommand,
    ImpositionInput,
    ItemInput,
    PriceInput,
    SheetInput,
    YieldOutput,
)
from printsheet.application.config import (
    ConfigError,
    config_to_bands,
    config_to_inputs,
    load_config,
)
from printsheet.cli.commands import validate_command
from printsheet.domain import PriceBand
from printsheet.infrastructure import (
    JsonExporter,
    PresetListFormatter,
    PriceReportFormatter,
    SheetDiagramFormatter,
    YieldReportFormatter,
)

OUTPUT_FORMATS = ("text", "json", "diagram")

app = typer.Typer(
    name="printsheet",
    help="Calculate items per press sheet, sheets needed and tiered prices.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _check_format(output_format: str) -> str:
    normalized = output_format.lower()
    if normalized not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Output format must be one of: {', '.join(OUTPUT_FORMATS)}",
            param_hint="--format",
        )
    return normalized


def _parse_decimal(value: str, option: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise typer.BadParameter(f"Not a number: {value!r}", param_hint=option)


def _parse_band(text: str) -> PriceBand:
    """Parse a band given as ``MIN-MAX:PRICE`` or ``MIN+:DISCOUNT%``.

    Examples:
        ``1-99:10`` prices 1 to 99 items at 10 each.
        ``500+:15%`` gives 15% off the base price from 500 items upward.
    """
    try:
        quantities, amount = text.split(":", 1)
        if quantities.endswith("+"):
            min_qty, max_qty = int(quantities[:-1]), None
        else:
            low, high = quantities.split("-", 1)
            min_qty, max_qty = int(low), int(high)
        amount = amount.strip()
        if amount.endswith("%"):
            return PriceBand(
                min_qty=min_qty,
                max_qty=max_qty,
                discount_percent=Decimal(amount[:-1]),
            )
        return PriceBand(min_qty=min_qty, max_qty=max_qty, unit_price=Decimal(amount))
    except (ValueError, InvalidOperation) as e:
        raise typer.BadParameter(
            f"Invalid band {text!r} (expected MIN-MAX:PRICE or MIN+:PERCENT%): {e}",
            param_hint="--band",
        )


def _load_config_or_fail(config_file: Path):
    try:
        return load_config(config_file)
    except ConfigError as e:
        _fail(str(e))


def _echo_yield(output: YieldOutput, output_format: str) -> None:
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export_yield(output))
    elif output_format == "diagram":
        typer.echo(SheetDiagramFormatter().format(output.decision))
    else:
        typer.echo(YieldReportFormatter().format(output))


@app.command()
def layout(
    width: Annotated[float, typer.Option("--width", "-w", help="Item trim width in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Item trim height in mm")],
    sheet: Annotated[
        str | None,
        typer.Option("--sheet", "-s", help="Sheet preset: SRA3, A3, A4"),
    ] = None,
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", help="Custom sheet width in mm"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", help="Custom sheet height in mm"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram"),
    ] = "text",
) -> None:
    """Show how many items fit on one sheet and in which orientation."""
    output_format = _check_format(output_format)
    sheet_input = SheetInput(preset=sheet, width=sheet_width, height=sheet_height)
    item_input = ItemInput(width=width, height=height)

    result = CalculateYieldCommand().execute(sheet_input, item_input)
    _echo_yield(result, output_format)


@app.command()
def sheets(
    width: Annotated[float, typer.Option("--width", "-w", help="Item trim width in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Item trim height in mm")],
    quantity: Annotated[int, typer.Option("--quantity", "-q", help="Number of products")],
    pages: Annotated[
        int, typer.Option("--pages", "-p", help="Pages per product")
    ] = 1,
    sides: Annotated[
        int, typer.Option("--sides", help="Printed sides: 1 (simplex) or 2 (duplex)")
    ] = 1,
    sheet: Annotated[
        str | None,
        typer.Option("--sheet", "-s", help="Sheet preset: SRA3, A3, A4"),
    ] = None,
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", help="Custom sheet width in mm"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", help="Custom sheet height in mm"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """Calculate the sheets needed for a multi-page production run."""
    output_format = _check_format(output_format)
    sheet_input = SheetInput(preset=sheet, width=sheet_width, height=sheet_height)
    item_input = ItemInput(width=width, height=height)
    imposition_input = ImpositionInput(
        sides=sides, pages_per_product=pages, quantity=quantity
    )

    result = CalculateYieldCommand().execute(sheet_input, item_input, imposition_input)
    _echo_yield(result, output_format)


@app.command()
def price(
    quantity: Annotated[int, typer.Option("--quantity", "-q", help="Number of items to price")],
    bands: Annotated[
        list[str] | None,
        typer.Option(
            "--band",
            "-b",
            help="Price band MIN-MAX:PRICE or MIN+:PERCENT% (repeatable)",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Job file whose pricing section to use"),
    ] = None,
    base_price: Annotated[
        str | None,
        typer.Option("--base-price", help="Base unit price that discounts apply to"),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            help="Use the first matching band even if bands overlap or are unsorted",
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """Price a quantity against tiered price bands."""
    output_format = _check_format(output_format)

    price_bands: list[PriceBand] = []
    base_unit_price = None
    if config_file is not None:
        config = _load_config_or_fail(config_file)
        price_bands.extend(config_to_bands(config))
        if config.pricing is not None:
            base_unit_price = config.pricing.base_unit_price
    price_bands.extend(_parse_band(text) for text in bands or [])
    if base_price is not None:
        base_unit_price = _parse_decimal(base_price, "--base-price")

    if not price_bands:
        _fail("No price bands given. Use --band or --config.")

    price_input = PriceInput(
        bands=price_bands,
        quantity=quantity,
        base_unit_price=base_unit_price,
        strict=not lenient,
    )
    result = EvaluatePriceCommand().execute(price_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export_price(result))
    else:
        typer.echo(PriceReportFormatter().format(result))


@app.command()
def calculate(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ],
    quantity: Annotated[
        int | None,
        typer.Option("--quantity", "-q", help="Override the run quantity"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """Calculate layout, sheets needed and price for a job file."""
    output_format = _check_format(output_format)
    config = _load_config_or_fail(config_file)
    sheet_input, item_input, imposition_input, price_input = config_to_inputs(
        config, quantity=quantity
    )

    result = CalculateJobCommand().execute(
        sheet_input, item_input, imposition_input, price_input
    )

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export_job(result))
        return

    typer.echo(YieldReportFormatter().format(result.yield_output))
    if result.price_output is not None:
        typer.echo()
        typer.echo(PriceReportFormatter().format(result.price_output))


@app.command()
def presets(
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """List the named sheet presets."""
    output_format = _check_format(output_format)
    if output_format == "json":
        typer.echo(JsonExporter().export_presets())
    else:
        typer.echo(PresetListFormatter().format())


if __name__ == "__main__":
    app()
