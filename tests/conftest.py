"""Pytest configuration and shared fixtures for print sheet tests."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from printsheet.application.commands import (
    CalculateJobCommand,
    CalculateYieldCommand,
    EvaluatePriceCommand,
)
from printsheet.domain import Dimension, PriceBand, SheetPreset

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


# =============================================================================
# Sheets and items
# =============================================================================


@pytest.fixture
def sra3() -> Dimension:
    """SRA3 press sheet, 320 x 450 mm."""
    return SheetPreset.SRA3.dimension


@pytest.fixture
def a3() -> Dimension:
    """A3 press sheet, 297 x 420 mm."""
    return SheetPreset.A3.dimension


@pytest.fixture
def business_card() -> Dimension:
    """Standard 90 x 50 mm business card."""
    return Dimension(width=90.0, height=50.0)


# =============================================================================
# Price bands
# =============================================================================


@pytest.fixture
def unit_price_bands() -> list[PriceBand]:
    """Two bands with absolute unit prices: 1-99 at 10, 100+ at 8."""
    return [
        PriceBand(min_qty=1, max_qty=99, unit_price=Decimal("10")),
        PriceBand(min_qty=100, unit_price=Decimal("8")),
    ]


@pytest.fixture
def discount_bands() -> list[PriceBand]:
    """Volume discount bands starting at 100 items."""
    return [
        PriceBand(min_qty=100, max_qty=499, discount_percent=Decimal("5")),
        PriceBand(min_qty=500, max_qty=999, discount_percent=Decimal("10")),
        PriceBand(min_qty=1000, max_qty=4999, discount_percent=Decimal("15")),
        PriceBand(min_qty=5000, discount_percent=Decimal("20")),
    ]


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def yield_command() -> CalculateYieldCommand:
    return CalculateYieldCommand()


@pytest.fixture
def price_command() -> EvaluatePriceCommand:
    return EvaluatePriceCommand()


@pytest.fixture
def job_command() -> CalculateJobCommand:
    return CalculateJobCommand()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON job configuration fixtures."""
    return FIXTURES_PATH
