"""FastAPI dependency injection for calculation commands."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from printsheet.application.commands import (
    CalculateJobCommand,
    CalculateYieldCommand,
    EvaluatePriceCommand,
)


@lru_cache(maxsize=1)
def get_yield_command() -> CalculateYieldCommand:
    """Get cached CalculateYieldCommand instance."""
    return CalculateYieldCommand()


@lru_cache(maxsize=1)
def get_price_command() -> EvaluatePriceCommand:
    """Get cached EvaluatePriceCommand instance."""
    return EvaluatePriceCommand()


def get_job_command(
    yield_command: Annotated[CalculateYieldCommand, Depends(get_yield_command)],
    price_command: Annotated[EvaluatePriceCommand, Depends(get_price_command)],
) -> CalculateJobCommand:
    """Dependency for CalculateJobCommand."""
    return CalculateJobCommand(yield_command, price_command)


# Type aliases for cleaner endpoint signatures
YieldCommandDep = Annotated[CalculateYieldCommand, Depends(get_yield_command)]
PriceCommandDep = Annotated[EvaluatePriceCommand, Depends(get_price_command)]
JobCommandDep = Annotated[CalculateJobCommand, Depends(get_job_command)]
