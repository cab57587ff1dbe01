"""Pydantic models for the dashboard placeholder dataset.

Covers:
- UserRecord / CustomerRecord / InvoiceRecord / RevenueRecord: source rows
- PlaceholderDataset: the read-only bundle handed to the seeder
"""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

InvoiceStatus = Literal["pending", "paid"]


# ---------------------------------------------------------------------------
# Source records
# ---------------------------------------------------------------------------

class UserRecord(BaseModel):
    """A dashboard login. ``password`` is plaintext until seeding hashes it."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    password: str = Field(..., min_length=1)


class CustomerRecord(BaseModel):
    """A billed customer; ``id`` is reused as the MongoDB ``_id``."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    image_url: str


class InvoiceRecord(BaseModel):
    """An invoice pointing at a customer by id. Amounts are in cents."""

    model_config = ConfigDict(frozen=True)

    customer_id: str
    amount: int = Field(..., ge=0)
    status: InvoiceStatus
    date: dt.date


class RevenueRecord(BaseModel):
    """Revenue for one calendar month."""

    model_config = ConfigDict(frozen=True)

    month: str
    revenue: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Dataset bundle
# ---------------------------------------------------------------------------

class PlaceholderDataset(BaseModel):
    """Immutable set of source arrays used to repopulate the database."""

    model_config = ConfigDict(frozen=True)

    users: tuple[UserRecord, ...] = ()
    customers: tuple[CustomerRecord, ...] = ()
    invoices: tuple[InvoiceRecord, ...] = ()
    revenue: tuple[RevenueRecord, ...] = ()
