"""Seeding exceptions and their mapping to user-facing error payloads.

Every failure inside a seeding run is reduced to an :class:`ErrorKind` plus a
message and a remediation hint via :func:`classify_error`.
"""

from __future__ import annotations

from dataclasses import dataclass

from pymongo.errors import ConfigurationError, ConnectionFailure

from dashboard_api.models.seed import ErrorKind


class SeedError(Exception):
    """Base class for errors raised deliberately by the seeder."""


class SeedConfigurationError(SeedError):
    """A required setting (the connection target) is missing."""


class ReferentialIntegrityError(SeedError):
    """An invoice references a customer that is not in the dataset."""

    def __init__(self, index: int, customer_id: str) -> None:
        self.index = index
        self.customer_id = customer_id
        super().__init__(
            f"Customer not found for invoice at index {index} "
            f"(customer_id={customer_id!r})"
        )


@dataclass(frozen=True)
class ClassifiedError:
    kind: ErrorKind
    message: str
    suggestion: str


_SUGGESTIONS: dict[ErrorKind, str] = {
    ErrorKind.CONFIGURATION: (
        "Set MONGODB_URI in the environment or in the .env file, "
        "then retry the request."
    ),
    ErrorKind.CONNECTIVITY: (
        "Please check: 1) MongoDB is running, 2) MONGODB_URI points at a "
        "reachable server, 3) Network connection"
    ),
    ErrorKind.REFERENTIAL_INTEGRITY: (
        "Every invoice customer_id must match a customer id in the "
        "placeholder dataset. Fix the dataset and seed again."
    ),
    ErrorKind.UNKNOWN: "Check the server logs for the full traceback.",
}


def classify_error(exc: BaseException) -> ClassifiedError:
    """Map *exc* to an error kind with a message and a suggestion."""
    if isinstance(exc, SeedConfigurationError):
        kind = ErrorKind.CONFIGURATION
        message = f"Environment variable error: {exc}. Please check your .env file."
    elif isinstance(exc, (ConnectionFailure, ConfigurationError)):
        kind = ErrorKind.CONNECTIVITY
        message = f"MongoDB connection error: {exc}"
    elif isinstance(exc, ReferentialIntegrityError):
        kind = ErrorKind.REFERENTIAL_INTEGRITY
        message = f"Referential integrity error: {exc}"
    else:
        kind = ErrorKind.UNKNOWN
        message = str(exc) or type(exc).__name__
    return ClassifiedError(kind=kind, message=message, suggestion=_SUGGESTIONS[kind])
