"""Pydantic models describing a seeding run and its HTTP payloads."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class SeedState(str, Enum):
    """Lifecycle of a single ``DatabaseSeeder.seed`` invocation."""

    IDLE = "idle"
    CONNECTING = "connecting"
    CLEARING = "clearing"
    SEEDING_USERS = "seeding_users"
    SEEDING_CUSTOMERS = "seeding_customers"
    SEEDING_INVOICES = "seeding_invoices"
    SEEDING_REVENUE = "seeding_revenue"
    CLOSING = "closing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    CONNECTIVITY = "connectivity"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    UNKNOWN = "unknown"


class SeedCounts(BaseModel):
    """Inserted document count per collection."""

    users: int = 0
    customers: int = 0
    invoices: int = 0
    revenue: int = 0


class SeedResult(BaseModel):
    """Outcome of one seeding run, successful or not."""

    success: bool
    counts: SeedCounts = Field(default_factory=SeedCounts)
    error_kind: ErrorKind | None = None
    message: str = ""
    suggestion: str = ""
    states: list[SeedState] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API response schemas
# ---------------------------------------------------------------------------

class SeedSuccessResponse(BaseModel):
    """Body returned with HTTP 200 from GET /seed."""

    success: Literal[True] = True
    message: str = "Database seeded successfully"
    counts: SeedCounts


class SeedErrorResponse(BaseModel):
    """Body returned with HTTP 500 from GET /seed."""

    success: Literal[False] = False
    error: str = "Failed to seed database"
    message: str
    suggestion: str


def render_seed_result(result: SeedResult) -> tuple[int, dict]:
    """Return the HTTP status code and JSON body for *result*.

    Shared by ``GET /seed`` and the ``seed_database`` script so both emit
    the same payload.
    """
    if result.success:
        body = SeedSuccessResponse(message=result.message, counts=result.counts)
        return 200, body.model_dump()
    body = SeedErrorResponse(message=result.message, suggestion=result.suggestion)
    return 500, body.model_dump()
