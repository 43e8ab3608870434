import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.errors import PersistenceError

log = logging.getLogger(__name__)


class TableRepository:
    """
    List/create access to one table. Subclasses set `model` and the client-facing
    messages used when the database fails.
    """

    model = None
    fetch_error = "Database error fetching records"
    add_error = "Database error adding record"

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def guarded(self, message: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            log.exception(message)
            raise PersistenceError(message) from exc

    def _pk(self):
        return self.model.__mapper__.primary_key[0]

    def list_all(self) -> List:
        with self.guarded(self.fetch_error):
            return self.db.query(self.model).order_by(self._pk()).all()

    def get(self, pk: int) -> Optional[object]:
        with self.guarded(self.fetch_error):
            return self.db.get(self.model, pk)

    def create(self, **values):
        with self.guarded(self.add_error):
            obj = self.model(**values)
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return obj

    def first_by(self, **filters):
        with self.guarded(self.fetch_error):
            return self.db.query(self.model).filter_by(**filters).first()

    def get_or_create(self, defaults: Optional[dict] = None, **filters):
        """Return (row, created) for the row matching `filters`."""
        obj = self.first_by(**filters)
        if obj:
            return obj, False
        return self.create(**filters, **(defaults or {})), True
