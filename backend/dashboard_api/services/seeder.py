"""Database seeder for the invoices dashboard.

Orchestrates one seeding run:
1. Validate that a connection target is configured
2. Connect with bounded timeouts and ping the server
3. Clear the ``users``, ``customers``, ``invoices`` and ``revenue`` collections
4. Insert users (bcrypt-hashed), customers, invoices and revenue, in that order
5. Close the client on every path

Failures never escape :meth:`DatabaseSeeder.seed`; they are classified and
returned on the :class:`SeedResult`. Collections written before a failure
are left in place.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, time as dt_time, timezone
from typing import Any, Callable

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import InvalidURI

from dashboard_api.config import Settings
from dashboard_api.errors import (
    ReferentialIntegrityError,
    SeedConfigurationError,
    classify_error,
)
from dashboard_api.models.dashboard import PlaceholderDataset
from dashboard_api.models.seed import SeedCounts, SeedResult, SeedState
from dashboard_api.services.mongo_service import MongoService
from dashboard_api.services.password_hasher import PasswordHasher
from dashboard_api.utils.uri import mask_mongo_uri

logger = logging.getLogger(__name__)

DATABASE_NAME = "nextjs-dashboard-postgres"

USERS_COLLECTION = "users"
CUSTOMERS_COLLECTION = "customers"
INVOICES_COLLECTION = "invoices"
REVENUE_COLLECTION = "revenue"

SEED_COLLECTIONS = (
    USERS_COLLECTION,
    CUSTOMERS_COLLECTION,
    INVOICES_COLLECTION,
    REVENUE_COLLECTION,
)

ClientFactory = Callable[..., Any]


class DatabaseSeeder:
    """Wipe and repopulate the dashboard collections from a dataset.

    Parameters
    ----------
    settings:
        Connection target, timeouts, bcrypt cost and the revenue year tag.
    dataset:
        Read-only source records. Inject a synthetic dataset in tests.
    client_factory:
        Callable building the Motor client; defaults to ``AsyncIOMotorClient``.
    """

    def __init__(
        self,
        settings: Settings,
        dataset: PlaceholderDataset,
        client_factory: ClientFactory = AsyncIOMotorClient,
        hasher: PasswordHasher | None = None,
    ) -> None:
        self.settings = settings
        self.dataset = dataset
        self.client_factory = client_factory
        self.hasher = hasher or PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    async def seed(self) -> SeedResult:
        """Run one full seeding pass and report the outcome."""
        states: list[SeedState] = [SeedState.IDLE]
        counts = SeedCounts()
        client: Any = None
        failure: Exception | None = None

        def enter(state: SeedState) -> None:
            states.append(state)
            logger.debug("Seeder state -> %s", state.value)

        start = time.monotonic()
        logger.info("Starting database seeding...")

        try:
            uri = self._require_uri()

            enter(SeedState.CONNECTING)
            client = self._open_client(uri)
            await client.admin.command("ping")
            logger.info("MongoDB ping successful")

            mongo = MongoService(client[DATABASE_NAME])
            logger.info("Using database: %s", DATABASE_NAME)

            enter(SeedState.CLEARING)
            await mongo.clear_collections(SEED_COLLECTIONS)
            logger.info("Collections cleared")

            enter(SeedState.SEEDING_USERS)
            counts.users = await mongo.insert_many(
                USERS_COLLECTION, await self.build_user_documents()
            )
            logger.info("Inserted %d users", counts.users)

            enter(SeedState.SEEDING_CUSTOMERS)
            counts.customers = await mongo.insert_many(
                CUSTOMERS_COLLECTION, self.build_customer_documents()
            )
            logger.info("Inserted %d customers", counts.customers)

            enter(SeedState.SEEDING_INVOICES)
            counts.invoices = await mongo.insert_many(
                INVOICES_COLLECTION, self.build_invoice_documents()
            )
            logger.info("Inserted %d invoices", counts.invoices)

            enter(SeedState.SEEDING_REVENUE)
            counts.revenue = await mongo.insert_many(
                REVENUE_COLLECTION, self.build_revenue_documents()
            )
            logger.info("Inserted %d revenue records", counts.revenue)
        except Exception as exc:
            failure = exc
            logger.exception(
                "Error seeding database (state=%s)", states[-1].value
            )
        finally:
            enter(SeedState.CLOSING)
            if client is not None:
                try:
                    client.close()
                    logger.info("MongoDB connection closed")
                except Exception:
                    logger.exception("Error closing MongoDB connection")

        elapsed = time.monotonic() - start

        if failure is None:
            enter(SeedState.SUCCEEDED)
            logger.info("Database seeding completed in %.2fs", elapsed)
            return SeedResult(
                success=True,
                counts=counts,
                message="Database seeded successfully",
                states=states,
            )

        enter(SeedState.FAILED)
        classified = classify_error(failure)
        logger.warning(
            "Database seeding failed after %.2fs: %s error",
            elapsed,
            classified.kind.value,
        )
        return SeedResult(
            success=False,
            counts=counts,
            error_kind=classified.kind,
            message=classified.message,
            suggestion=classified.suggestion,
            states=states,
        )

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    def _require_uri(self) -> str:
        uri = (self.settings.MONGODB_URI or "").strip()
        logger.info("MONGODB_URI is set: %s", bool(uri))
        if not uri:
            raise SeedConfigurationError("MONGODB_URI is not defined")
        return uri

    def _open_client(self, uri: str) -> Any:
        logger.info("Connecting to MongoDB: %s", mask_mongo_uri(uri))
        try:
            return self.client_factory(
                uri,
                connectTimeoutMS=self.settings.MONGODB_CONNECT_TIMEOUT_MS,
                serverSelectionTimeoutMS=self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            )
        except ValueError as exc:
            # pymongo raises a bare ValueError for some malformed hosts (e.g. port range)
            raise InvalidURI(str(exc)) from exc

    # ------------------------------------------------------------------
    # Document builders
    # ------------------------------------------------------------------

    async def build_user_documents(self) -> list[dict[str, Any]]:
        """Users keep their supplied id as ``_id``; passwords are bcrypt-hashed."""
        users = self.dataset.users
        hashed = await self.hasher.hash_many([u.password for u in users])
        now = datetime.now(timezone.utc)
        return [
            {
                "_id": user.id,
                "name": user.name,
                "email": user.email,
                "password": password,
                "createdAt": now,
                "updatedAt": now,
            }
            for user, password in zip(users, hashed)
        ]

    def build_customer_documents(self) -> list[dict[str, Any]]:
        now = datetime.now(timezone.utc)
        return [
            {
                "_id": customer.id,
                "name": customer.name,
                "email": customer.email,
                "image_url": customer.image_url,
                "createdAt": now,
                "updatedAt": now,
            }
            for customer in self.dataset.customers
        ]

    def build_invoice_documents(self) -> list[dict[str, Any]]:
        """Resolve every invoice against the in-memory customer list.

        Raises :class:`ReferentialIntegrityError` on the first invoice whose
        ``customer_id`` is unknown. No ``_id`` is set so MongoDB generates one.
        """
        customer_ids = {c.id for c in self.dataset.customers}
        now = datetime.now(timezone.utc)
        docs: list[dict[str, Any]] = []
        for index, invoice in enumerate(self.dataset.invoices):
            if invoice.customer_id not in customer_ids:
                raise ReferentialIntegrityError(index, invoice.customer_id)
            docs.append(
                {
                    "customer_id": invoice.customer_id,
                    "amount": invoice.amount,
                    "status": invoice.status,
                    "date": datetime.combine(
                        invoice.date, dt_time.min, tzinfo=timezone.utc
                    ),
                    "createdAt": now,
                    "updatedAt": now,
                }
            )
        return docs

    def build_revenue_documents(self) -> list[dict[str, Any]]:
        now = datetime.now(timezone.utc)
        return [
            {
                "month": rev.month,
                "revenue": rev.revenue,
                "year": self.settings.REVENUE_YEAR,
                "createdAt": now,
                "updatedAt": now,
            }
            for rev in self.dataset.revenue
        ]
