"""Quantity-tiered price evaluation.

Bands are matched in the order given and the first band whose range
contains the quantity wins. A band either fixes the unit price or applies a
percentage discount to a base unit price supplied by the caller. Amounts are
``Decimal`` throughout so that ``total / quantity == unit`` holds exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Sequence

from ..exceptions import (
    BandConfigurationError,
    InvalidQuantityError,
    MissingBasePriceError,
    NoMatchingBandError,
    PricingError,
)
from ..value_objects import PriceBand, PriceResult, TierHint

logger = logging.getLogger(__name__)

_HUNDRED = Decimal(100)


def find_band(bands: Iterable[PriceBand], quantity: int) -> PriceBand | None:
    """Return the first active band containing ``quantity``."""
    for band in bands:
        if band.is_active and band.contains(quantity):
            return band
    return None


def evaluate(
    bands: Sequence[PriceBand],
    quantity: int,
    base_unit_price: Decimal | None = None,
) -> PriceResult:
    """Price ``quantity`` items using the first matching band.

    Args:
        bands: Price bands in evaluation order.
        quantity: Number of items, at least 1.
        base_unit_price: Unit price that discount bands are applied to.

    Returns:
        PriceResult with the total and the exact per-item price.

    Raises:
        InvalidQuantityError: If quantity is below 1.
        NoMatchingBandError: If no active band covers the quantity.
        MissingBasePriceError: If a discount band matches without a base price.
        PricingError: If the matching band carries neither price nor discount.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(quantity)

    band = find_band(bands, quantity)
    if band is None:
        raise NoMatchingBandError(quantity)

    if band.unit_price is not None:
        total = band.unit_price * quantity
    elif band.discount_percent is not None:
        if base_unit_price is None:
            raise MissingBasePriceError(band.min_qty)
        base = Decimal(str(base_unit_price))
        total = base * quantity * (1 - band.discount_percent / _HUNDRED)
    else:
        raise PricingError(
            f"Band starting at {band.min_qty} has neither a unit price nor a discount"
        )

    logger.debug("Quantity %d priced by band starting at %d: %s", quantity, band.min_qty, total)
    return PriceResult(
        total_price=total,
        unit_price=total / quantity,
        quantity=quantity,
        band=band,
    )


def next_tier(bands: Sequence[PriceBand], quantity: int) -> TierHint | None:
    """Find the nearest active band that starts above ``quantity``.

    For a discount band the hint also carries the extra discount over the
    band currently matched (or over no discount at all).
    """
    candidates = [b for b in bands if b.is_active and b.min_qty > quantity]
    if not candidates:
        return None
    upcoming = min(candidates, key=lambda b: b.min_qty)

    additional_discount = None
    if upcoming.discount_percent is not None:
        current = find_band(bands, quantity)
        current_discount = Decimal(0)
        if current is not None and current.discount_percent is not None:
            current_discount = current.discount_percent
        additional_discount = upcoming.discount_percent - current_discount

    return TierHint(
        band=upcoming,
        next_min_qty=upcoming.min_qty,
        additional_quantity=upcoming.min_qty - max(0, quantity),
        additional_discount=additional_discount,
    )


def check_bands(bands: Sequence[PriceBand]) -> list[str]:
    """Describe ordering and pricing problems in ``bands``.

    Only active bands are checked. Returns an empty list when the bands are
    sorted by ``min_qty``, non-overlapping, and each carries exactly one of
    unit price or discount.
    """
    problems: list[str] = []
    active = [b for b in bands if b.is_active]
    for index, band in enumerate(active):
        has_price = band.unit_price is not None
        has_discount = band.discount_percent is not None
        if has_price == has_discount:
            problems.append(
                f"band {index} ({_describe(band)}) must set exactly one of "
                "unit price or discount percent"
            )
        if index == 0:
            continue
        previous = active[index - 1]
        if band.min_qty < previous.min_qty:
            problems.append(
                f"band {index} ({_describe(band)}) is not sorted by minimum quantity"
            )
        elif previous.max_qty is None or band.min_qty <= previous.max_qty:
            problems.append(
                f"band {index} ({_describe(band)}) overlaps band {index - 1} "
                f"({_describe(previous)})"
            )
    return problems


def coverage_gaps(bands: Sequence[PriceBand]) -> list[tuple[int, int]]:
    """Return (first, last) quantity ranges that no active band prices.

    Covers the range from quantity 1 up to the first band and the ranges
    between sorted bands. Quantities above an upper-bounded last band are
    not reported.
    """
    gaps: list[tuple[int, int]] = []
    active = sorted((b for b in bands if b.is_active), key=lambda b: b.min_qty)
    if active and active[0].min_qty > 1:
        gaps.append((1, active[0].min_qty - 1))
    for previous, band in zip(active, active[1:]):
        if previous.max_qty is not None and band.min_qty > previous.max_qty + 1:
            gaps.append((previous.max_qty + 1, band.min_qty - 1))
    return gaps


@dataclass(frozen=True)
class PriceSchedule:
    """Validated, sorted and non-overlapping set of price bands.

    Build instances through ``from_bands`` so that ordering problems surface
    at construction instead of as silent first-match ambiguity.
    """

    bands: tuple[PriceBand, ...] = field(default_factory=tuple)

    @classmethod
    def from_bands(cls, bands: Iterable[PriceBand]) -> PriceSchedule:
        """Create a schedule, rejecting invalid band sets.

        Raises:
            BandConfigurationError: If bands are unsorted, overlap, or do not
                carry exactly one of unit price and discount.
        """
        bands = tuple(bands)
        problems = check_bands(bands)
        if problems:
            raise BandConfigurationError(problems)
        return cls(bands=bands)

    def evaluate(self, quantity: int, base_unit_price: Decimal | None = None) -> PriceResult:
        return evaluate(self.bands, quantity, base_unit_price)

    def next_tier(self, quantity: int) -> TierHint | None:
        return next_tier(self.bands, quantity)

    @property
    def is_open_ended(self) -> bool:
        """True if the last active band has no upper bound."""
        active = [b for b in self.bands if b.is_active]
        return bool(active) and active[-1].is_open_ended


def _describe(band: PriceBand) -> str:
    upper = "+" if band.max_qty is None else f"-{band.max_qty}"
    return f"{band.min_qty}{upper}"
