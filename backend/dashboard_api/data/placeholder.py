"""Built-in placeholder dataset for the invoices dashboard.

Amounts are stored in cents. Customer ids are the same UUID strings the
invoices reference, so every invoice resolves.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache

from dashboard_api.models.dashboard import (
    CustomerRecord,
    InvoiceRecord,
    PlaceholderDataset,
    RevenueRecord,
    UserRecord,
)

USERS = (
    UserRecord(
        id="410544b2-4001-4271-9855-fec4b6a6442a",
        name="User",
        email="user@nextmail.com",
        password="123456",
    ),
)

CUSTOMERS = (
    CustomerRecord(
        id="d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        name="Evil Rabbit",
        email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    ),
    CustomerRecord(
        id="3958dc9e-712f-4377-85e9-fec4b6a6442a",
        name="Delba de Oliveira",
        email="delba@oliveira.com",
        image_url="/customers/delba-de-oliveira.png",
    ),
    CustomerRecord(
        id="3958dc9e-742f-4377-85e9-fec4b6a6442a",
        name="Lee Robinson",
        email="lee@robinson.com",
        image_url="/customers/lee-robinson.png",
    ),
    CustomerRecord(
        id="76d65c26-f784-44a2-ac19-586678f7c2f2",
        name="Michael Novotny",
        email="michael@novotny.com",
        image_url="/customers/michael-novotny.png",
    ),
    CustomerRecord(
        id="CC27C14A-0ACF-4F4A-A6C9-D45682C144B9",
        name="Amy Burns",
        email="amy@burns.com",
        image_url="/customers/amy-burns.png",
    ),
    CustomerRecord(
        id="13D07535-C59E-4157-A011-F8D2EF4E0CBB",
        name="Balazs Orban",
        email="balazs@orban.com",
        image_url="/customers/balazs-orban.png",
    ),
)

# (customer index, amount, status, date)
_INVOICE_ROWS = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

INVOICES = tuple(
    InvoiceRecord(customer_id=CUSTOMERS[idx].id, amount=amount, status=status, date=day)
    for idx, amount, status, day in _INVOICE_ROWS
)

REVENUE = tuple(
    RevenueRecord(month=month, revenue=amount)
    for month, amount in (
        ("Jan", 2000),
        ("Feb", 1800),
        ("Mar", 2200),
        ("Apr", 2500),
        ("May", 2300),
        ("Jun", 3200),
        ("Jul", 3500),
        ("Aug", 3700),
        ("Sep", 2500),
        ("Oct", 2800),
        ("Nov", 3000),
        ("Dec", 4800),
    )
)


@lru_cache
def get_placeholder_dataset() -> PlaceholderDataset:
    """Return the shared, read-only placeholder dataset."""
    return PlaceholderDataset(
        users=USERS,
        customers=CUSTOMERS,
        invoices=INVOICES,
        revenue=REVENUE,
    )
