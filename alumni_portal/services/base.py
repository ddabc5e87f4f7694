"""
Shared plumbing for resource services.

Each service owns one Repository and wraps its ORM calls in
_db_errors(), which rolls back the session and converts SQLAlchemy
exceptions into AppError subclasses.
"""

import logging
import math
from contextlib import contextmanager
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from alumni_portal.core.exceptions import AppError, ValidationError, normalize_db_error
from alumni_portal.db.repository import ITEMS_PER_PAGE, Repository
from alumni_portal.schemas.schemas import ListEnvelope, PageMeta

logger = logging.getLogger(__name__)


def build_meta(total: int, page: int) -> PageMeta:
    return PageMeta(
        total_items=total,
        total_pages=math.ceil(total / ITEMS_PER_PAGE),
        current_page=page,
        items_per_page=ITEMS_PER_PAGE,
    )


class BaseService:
    model = None
    entity = "Record"

    def __init__(self, db: Session):
        self.db = db
        self.repo = Repository(db, self.model)

    @contextmanager
    def _db_errors(self):
        try:
            yield
        except AppError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            error = normalize_db_error(exc, self.entity)
            logger.warning("%s operation failed: %s", self.entity, error.message)
            raise error from exc

    def _list(self, stmt, page: int, read_model, options=()) -> ListEnvelope:
        with self._db_errors():
            rows, total = self.repo.page(stmt, page, options)
            items: List = [read_model.model_validate(row) for row in rows]
        return ListEnvelope[read_model](items=items, meta=build_meta(total, page))

    @staticmethod
    def _changes(data) -> dict:
        """Fields explicitly sent in a partial update body."""
        fields = data.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationError("No fields to update")
        return fields
