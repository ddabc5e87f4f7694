"""
Error taxonomy and database error normalization.

Every error a client can see is an AppError subclass carrying its HTTP
status. main.py renders them all as {"status": "error", "message": ...}.

    ValidationError  -> 400  malformed id, empty update, unknown owner,
                             missing required field
    ConflictError    -> 409  duplicate unique key
    NotFoundError    -> 404  missing row on read/update/delete
    UnknownError     -> 500  any other database failure
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)

# SQLSTATE codes (PostgreSQL); SQLite is matched on its message text
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class ConflictError(AppError):
    status_code = 409


class NotFoundError(AppError):
    status_code = 404


class UnknownError(AppError):
    status_code = 500


def _integrity_kind(exc: IntegrityError) -> Optional[str]:
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == UNIQUE_VIOLATION:
        return "unique"
    if code == FOREIGN_KEY_VIOLATION:
        return "foreign_key"
    if code == NOT_NULL_VIOLATION:
        return "not_null"

    text = str(orig).upper()
    if "UNIQUE" in text:
        return "unique"
    if "FOREIGN KEY" in text:
        return "foreign_key"
    if "NOT NULL" in text:
        return "not_null"
    return None


def normalize_db_error(exc: SQLAlchemyError, entity: str = "Record") -> AppError:
    """
    Translate an SQLAlchemy exception into a domain error.

    Unique violations become ConflictError; foreign key and NOT NULL
    violations become ValidationError. Anything else is logged with its
    traceback and surfaced as a generic UnknownError.
    """
    if isinstance(exc, IntegrityError):
        kind = _integrity_kind(exc)
        if kind == "unique":
            return ConflictError(f"{entity} already exists!")
        if kind == "foreign_key":
            return ValidationError("Referenced user does not exist")
        if kind == "not_null":
            return ValidationError("Missing required field")

    logger.error("Database error on %s: %s", entity, exc, exc_info=exc)
    return UnknownError("Internal server error")
