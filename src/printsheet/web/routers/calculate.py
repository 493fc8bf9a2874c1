"""Full job calculation from a configuration."""

from fastapi import APIRouter

from printsheet.application.config import config_to_inputs, load_config_from_dict
from printsheet.web.dependencies import JobCommandDep
from printsheet.web.routers.layout import yield_output_to_schema
from printsheet.web.routers.pricing import price_output_to_schema
from printsheet.web.schemas.requests import CalculateRequest
from printsheet.web.schemas.responses import CalculateResponseSchema

router = APIRouter(prefix="/calculate", tags=["calculate"])


@router.post("", response_model=CalculateResponseSchema)
async def calculate_job(
    request: CalculateRequest,
    command: JobCommandDep,
) -> CalculateResponseSchema:
    """Calculate layout, sheets needed and price for a job configuration.

    Raises:
        ConfigError: If the configuration fails schema validation.
        CalculationError: If the layout or the price cannot be calculated.
    """
    config = load_config_from_dict(request.config)
    sheet_input, item_input, imposition_input, price_input = config_to_inputs(
        config, quantity=request.quantity
    )
    output = command.execute(sheet_input, item_input, imposition_input, price_input)

    layout = yield_output_to_schema(output.yield_output)
    price = None
    if output.price_output is not None:
        price = price_output_to_schema(output.price_output)
    return CalculateResponseSchema(layout=layout, price=price)
