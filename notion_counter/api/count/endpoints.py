"""Count endpoint: number of finished records in the configured database."""

import logging

from fastapi import APIRouter, Depends, Query, Response

from notion_counter.api.count.dependencies import get_counter, get_settings, is_truthy
from notion_counter.api.count.models import (
    CountResponse,
    InspectionResponse,
    PropertyInspectionResponse,
)
from notion_counter.counter import Counter
from notion_counter.utils.config import CounterSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/count", tags=["count"])


@router.get(
    "",
    response_model=CountResponse | InspectionResponse,
    response_model_exclude_none=True,
    summary="Count finished records",
    description=(
        "Counts the records whose status marks them as finished. "
        "With ?debug=1 returns the database properties instead."
    ),
)
def count_finished(
    response: Response,
    debug: str | None = Query(None, description="Return the schema instead of a count"),
    counter: Counter = Depends(get_counter),
    settings: CounterSettings = Depends(get_settings),
) -> CountResponse | InspectionResponse:
    """Count finished records, or describe the schema in debug mode."""
    if is_truthy(debug):
        logger.info("Schema inspection requested")
        inspection = counter.inspect()
        return InspectionResponse(
            database_title=inspection.database_title,
            properties={
                name: PropertyInspectionResponse(type=prop.type, options=prop.options)
                for name, prop in inspection.properties.items()
            },
            hint=inspection.hint,
        )

    result = counter.count()
    response.headers["Cache-Control"] = settings.cache_control
    return CountResponse(count=result.count, **result.selection.diagnostics())
