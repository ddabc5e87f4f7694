"""
Thin repository over a SQLAlchemy session.

Missing rows come back as None from get/update/delete so services can
raise NotFoundError without inspecting driver error codes. Listing is a
page query followed by a separate COUNT; the two are not run in one
snapshot, so totals can lag the page under concurrent writes.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import Select, delete, func, inspect, select, update
from sqlalchemy.orm import Session

from alumni_portal.db.session import Base

ModelT = TypeVar("ModelT", bound=Base)

# Every listing endpoint uses the same fixed page size
ITEMS_PER_PAGE = 10


class Repository(Generic[ModelT]):

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model
        self.pk = inspect(model).primary_key[0]

    def select(self) -> Select:
        return select(self.model)

    def add(self, **fields: Any) -> ModelT:
        """INSERT and flush; server defaults come back via RETURNING."""
        obj = self.model(**fields)
        self.db.add(obj)
        self.db.flush()
        return obj

    def get(self, ident: int, options: Sequence = ()) -> Optional[ModelT]:
        return self.db.get(self.model, ident, options=list(options))

    def first(self, stmt: Select, options: Sequence = ()) -> Optional[ModelT]:
        return self.db.scalars(stmt.options(*options).limit(1)).first()

    def update(self, ident: int, fields: Dict[str, Any]) -> Optional[ModelT]:
        stmt = (
            update(self.model)
            .where(self.pk == ident)
            .values(**fields)
            .returning(self.model)
        )
        return self.db.scalars(stmt).one_or_none()

    def delete(self, ident: int) -> Optional[ModelT]:
        stmt = delete(self.model).where(self.pk == ident).returning(self.model)
        return self.db.scalars(stmt).one_or_none()

    def page(self, stmt: Select, page: int, options: Sequence = ()) -> Tuple[List[ModelT], int]:
        """Return one page of rows ordered by primary key, plus the total count."""
        rows = self.db.scalars(
            stmt.options(*options)
            .order_by(self.pk)
            .offset((page - 1) * ITEMS_PER_PAGE)
            .limit(ITEMS_PER_PAGE)
        ).unique().all()
        total = self.db.scalar(select(func.count()).select_from(stmt.subquery()))
        return list(rows), total or 0
