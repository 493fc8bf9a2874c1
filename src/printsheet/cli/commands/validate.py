"""The ``validate`` command: check a print job file before quoting it.

Besides the errors and warnings of ``validate_config`` the command prints
what the job resolves to, so the operator can confirm the layout the press
will get and which quantities the bands price:

    Job:
      Sheet:   SRA3 (320 x 450 mm)
      Item:    100 x 70 mm
      Layout:  16 per sheet (4 x 4), rotated for edge clearance (unrotated 18)
      Run:     500 x 2 pages, duplex = 500 sheets
      Bands:   1-99 (Standard)      2.00 each
               100-499 (Bronze)     5% off
               not covered          500-999
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from printsheet.application.config import (
    ConfigError,
    PrintJobConfiguration,
    ValidationResult,
    config_to_bands,
    config_to_imposition,
    config_to_item,
    config_to_sheet_spec,
    load_config,
    validate_config,
)
from printsheet.domain import PriceBand, plan_imposition, resolve_sheet, select_orientation
from printsheet.domain.services.pricing import coverage_gaps
from printsheet.infrastructure import format_money

_BAND_COLUMN = 20


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a print job file and show the layout and bands it resolves to.

    Exit codes:
        0 - Job is valid with no warnings
        1 - Job has errors and cannot be quoted
        2 - Job is valid but has warnings
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _echo_load_problems(e)
        raise typer.Exit(code=1)

    for line in job_summary(config):
        typer.echo(line)
    typer.echo()

    result = validate_config(config)
    _echo_result(result)
    raise typer.Exit(code=result.exit_code)


def job_summary(config: PrintJobConfiguration) -> list[str]:
    """Describe the sheet, layout, run and price bands a job resolves to."""
    spec = config_to_sheet_spec(config)
    sheet = resolve_sheet(spec)
    item = config_to_item(config)
    decision = select_orientation(item, sheet)

    sheet_name = f"{spec.preset.value} " if spec.preset is not None else ""
    lines = [
        "Job:",
        f"  Sheet:   {sheet_name}({sheet.width:g} x {sheet.height:g} mm)",
        f"  Item:    {item.width:g} x {item.height:g} mm",
    ]

    if not decision.is_feasible:
        lines.append("  Layout:  does not fit in either orientation")
        return lines + _band_lines(config_to_bands(config))

    layout = decision.layout
    if decision.tie_break_applied:
        how = (
            f"rotated for edge clearance "
            f"(unrotated {decision.unrotated.items_per_sheet})"
        )
    else:
        how = "rotated" if decision.rotated else "unrotated"
    lines.append(
        f"  Layout:  {layout.items_per_sheet} per sheet "
        f"({layout.columns} x {layout.rows}), {how}, "
        f"{decision.utilization_percentage:.1f}% used"
    )

    request = config_to_imposition(config, decision.items_per_sheet)
    if request is not None:
        plan = plan_imposition(request)
        lines.append(
            f"  Run:     {request.quantity} x {request.pages_per_product} pages, "
            f"{request.sides.name.lower()} = {plan.total_sheets} sheets"
        )
    return lines + _band_lines(config_to_bands(config))


def _band_lines(bands: list[PriceBand]) -> list[str]:
    if not bands:
        return []
    rows: list[tuple[str, str]] = []
    for band in bands:
        span = f"{band.min_qty}+" if band.max_qty is None else f"{band.min_qty}-{band.max_qty}"
        name = f"{span} ({band.label})" if band.label else span
        if band.unit_price is not None:
            price = f"{format_money(band.unit_price)} each"
        elif band.discount_percent is not None:
            price = f"{band.discount_percent:g}% off"
        else:
            price = "no price set"
        if not band.is_active:
            price += " (inactive)"
        rows.append((name, price))
    rows.extend(("not covered", f"{first}-{last}") for first, last in coverage_gaps(bands))

    lines = []
    for index, (name, price) in enumerate(rows):
        prefix = "  Bands:   " if index == 0 else "           "
        lines.append(f"{prefix}{name:<{_BAND_COLUMN}} {price}")
    return lines


def _echo_load_problems(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if not error.details:
        typer.echo(f"  {error.message}", err=True)
    for detail in error.details:
        typer.echo(f"  {_locate(detail)}: {detail.get('message')}", err=True)
        if detail.get("text"):
            typer.echo(f"    {detail['text']}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _locate(detail: dict[str, Any]) -> str:
    if "line" in detail:
        return f"JSON syntax, line {detail['line']} column {detail['column']}"
    where = detail.get("path") or "(root)"
    if detail.get("context"):
        where = f"{where} [{detail['context']}]"
    return where


def _echo_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Job is ready to quote.")
