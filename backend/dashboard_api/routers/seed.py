"""Database seeding endpoint.

Endpoints
---------
GET  /    Wipe and repopulate users, customers, invoices and revenue.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from dashboard_api.models.seed import (
    SeedErrorResponse,
    SeedSuccessResponse,
    render_seed_result,
)
from dashboard_api.services.seeder import DatabaseSeeder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Seed"])


def _seeder(request: Request) -> DatabaseSeeder:
    return request.app.state.seeder


@router.get(
    "",
    response_model=SeedSuccessResponse,
    responses={500: {"model": SeedErrorResponse}},
    summary="Seed the database with placeholder data",
)
async def seed_database(request: Request) -> JSONResponse:
    """Run the seeder and translate its result into a 200 or 500 response."""
    result = await _seeder(request).seed()

    if not result.success:
        logger.error(
            "Seed request failed (%s): %s",
            result.error_kind.value if result.error_kind else "unknown",
            result.message,
        )
    status_code, body = render_seed_result(result)
    return JSONResponse(status_code=status_code, content=body)
