"""
Base repository for catalog tables.

Provides the idempotent upsert and the read helpers shared by every
catalog entity (products, posts, categories, brands, processes).
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_hub.core.exceptions import NotFoundError, PersistenceError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseCatalogRepository(Generic[T]):
    """
    Base repository providing common persistence operations.

    Subclasses must define:
        - model_class: The SQLAlchemy model class
        - conflict_key: Unique column used by ``upsert_many``

    Example:
        class CategoryRepository(BaseCatalogRepository[Category]):
            model_class = Category
            conflict_key = "id"
    """

    model_class: Type[T] = None
    conflict_key: str = "id"

    def __init__(self, db: Session):
        """
        Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        if self.model_class is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define model_class attribute"
            )

    @property
    def table_name(self) -> str:
        return self.model_class.__tablename__

    def _insert(self):
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            raise PersistenceError(f"Upsert is not supported on dialect '{dialect}'")
        return insert(self.model_class)

    def upsert_many(self, rows: List[Dict[str, Any]], conflict_key: Optional[str] = None) -> int:
        """
        Insert or replace rows keyed by a unique column.

        Rows sharing the conflict key with an existing record overwrite it, so
        calling this repeatedly with the same input leaves the same state.

        Args:
            rows: Column/value dicts; every row must carry the conflict key
            conflict_key: Unique column name (defaults to ``conflict_key``)

        Returns:
            Number of rows written (0 for an empty input, without touching the DB)
        """
        if not rows:
            return 0

        key = conflict_key or self.conflict_key
        stmt = self._insert()
        columns = {name for row in rows for name in row.keys()}
        update_set = {
            name: stmt.excluded[name]
            for name in columns
            if name != key
        }
        if "updated_at" in self.model_class.__table__.columns and "updated_at" not in update_set:
            update_set["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(index_elements=[key], set_=update_set)

        try:
            self.db.execute(stmt, rows)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Upsert into {self.table_name} failed: {e}")
            raise PersistenceError(f"Failed to upsert {self.table_name}: {e}") from e

        logger.debug(f"Upserted {len(rows)} rows into {self.table_name} on '{key}'")
        return len(rows)

    def _order_by(self):
        return self.model_class.created_at.desc()

    def _base_query(self):
        return self.db.query(self.model_class)

    def find_paginated(self, page: int = 0, page_size: int = 20) -> List[T]:
        """
        Get one page of rows.

        Args:
            page: Zero-based page index
            page_size: Number of rows per page

        Returns:
            List of records
        """
        return (
            self._base_query()
            .order_by(self._order_by())
            .offset(page * page_size)
            .limit(page_size)
            .all()
        )

    def find_by_id(self, record_id: Any) -> Optional[T]:
        return self.db.query(self.model_class).filter(
            self.model_class.id == record_id
        ).first()

    def count(self) -> int:
        return self._base_query().count()

    def update(self, record_id: Any, **fields) -> T:
        """
        Update a record with arbitrary fields.

        Raises:
            NotFoundError: No record with this id
            PersistenceError: The write failed
        """
        record = self.find_by_id(record_id)
        if record is None:
            raise NotFoundError(
                f"{self.model_class.__name__} not found. ID: {record_id}"
            )

        for key, value in fields.items():
            if hasattr(record, key):
                setattr(record, key, value)
        try:
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                f"Failed to update {self.model_class.__name__} {record_id}: {e}"
            ) from e
        return record
