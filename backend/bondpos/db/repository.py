"""Repository abstraction over the database session.

Business logic talks to ``Repository``; ``SqlRepository`` implements it on
a SQLAlchemy session owned by a ``Store``. Every mutation runs inside the
store's unit of work, so it commits on its own or joins an enclosing one.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select

from bondpos.core.exceptions import NotFoundError
from bondpos.db.base import Base

if TYPE_CHECKING:
    from bondpos.db.store import Store

T = TypeVar("T", bound=Base)


class Repository(ABC, Generic[T]):
    """CRUD contract for one entity family."""

    entity_name: str = "Record"

    @abstractmethod
    def list(self) -> List[T]:
        """All rows in insertion order."""

    @abstractmethod
    def get(self, record_id: str) -> Optional[T]:
        """Row by ID, or None."""

    @abstractmethod
    def add(self, record: T) -> T:
        """Insert a new row."""

    @abstractmethod
    def update(self, record_id: str, **changes) -> Optional[T]:
        """Shallow partial merge; None when the ID is unknown."""

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove a row; False when the ID is unknown."""

    @abstractmethod
    def filter(self, *criteria) -> List[T]:
        """Rows matching SQL criteria, in insertion order."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def require(self, record_id: str) -> T:
        """Row by ID, raising NotFoundError when absent."""
        row = self.get(record_id)
        if row is None:
            raise NotFoundError(self.entity_name, record_id)
        return row

    def patch(self, record_id: str, **changes) -> T:
        """Like ``update`` but raises NotFoundError when the ID is unknown."""
        row = self.update(record_id, **changes)
        if row is None:
            raise NotFoundError(self.entity_name, record_id)
        return row

    def remove(self, record_id: str) -> None:
        """Like ``delete`` but raises NotFoundError when the ID is unknown."""
        if not self.delete(record_id):
            raise NotFoundError(self.entity_name, record_id)


class SqlRepository(Repository[T]):
    """Repository for one mapped model on the store's session."""

    def __init__(self, store: "Store", model: Type[T], entity_name: str):
        self.store = store
        self.model = model
        self.entity_name = entity_name

    @property
    def session(self):
        return self.store.session

    def list(self) -> List[T]:
        return self.filter()

    def get(self, record_id: str) -> Optional[T]:
        with self.store.lock:
            return self.session.scalars(
                select(self.model).where(self.model.id == record_id)
            ).first()

    def filter(self, *criteria) -> List[T]:
        with self.store.lock:
            query = select(self.model)
            if criteria:
                query = query.where(*criteria)
            return list(self.session.scalars(query.order_by(self.model.pk)))

    def add(self, record: T) -> T:
        with self.store.unit_of_work():
            self.session.add(record)
            self.session.flush()
            return record

    def update(self, record_id: str, **changes) -> Optional[T]:
        changes.pop("id", None)
        changes.pop("pk", None)
        with self.store.unit_of_work():
            row = self.get(record_id)
            if row is None:
                return None
            for key, value in changes.items():
                setattr(row, key, value)
            self.session.flush()
            return row

    def delete(self, record_id: str) -> bool:
        with self.store.unit_of_work():
            row = self.get(record_id)
            if row is None:
                return False
            self.session.delete(row)
            self.session.flush()
            return True

    def delete_where(self, *criteria) -> int:
        """Bulk delete; returns the number of rows removed."""
        with self.store.unit_of_work():
            result = self.session.execute(delete(self.model).where(*criteria))
            return result.rowcount

    def __len__(self) -> int:
        with self.store.lock:
            return self.session.scalar(select(func.count()).select_from(self.model))
