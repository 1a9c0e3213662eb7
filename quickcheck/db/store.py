"""Storage seam between the business rules and the database.

Services only talk to a ``Store``. The default engine is an in-process SQLite
database; pointing ``DATABASE_URL`` elsewhere swaps the backend without
touching any service.
"""

from typing import Any, Iterable, TypeVar

from sqlalchemy import update as sql_update
from sqlalchemy.orm import Session

from quickcheck.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class Store:
    def __init__(self, db: Session):
        self.db = db

    def get(self, model: type[ModelT], row_id: str) -> ModelT | None:
        return self.db.get(model, row_id)

    def find(self, model: type[ModelT], *criteria, order_by: Iterable[Any] = ()) -> list[ModelT]:
        query = self.db.query(model)
        if criteria:
            query = query.filter(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        return query.all()

    def find_one(self, model: type[ModelT], *criteria, order_by: Iterable[Any] = ()) -> ModelT | None:
        query = self.db.query(model).filter(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        return query.first()

    def insert(self, row: ModelT) -> ModelT:
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def update(self, row: ModelT, **changes: Any) -> ModelT:
        for key, value in changes.items():
            setattr(row, key, value)
        self.db.commit()
        self.db.refresh(row)
        return row

    def update_where(self, model: type[ModelT], criteria: Iterable[Any], changes: dict[str, Any]) -> int:
        """Apply ``changes`` to rows matching ``criteria`` in one statement.

        Returns the number of rows changed. Callers use it as a
        compare-and-set: a zero count means another writer got there first.
        """
        result = self.db.execute(
            sql_update(model)
            .where(*criteria)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount

    def refresh(self, row: ModelT) -> ModelT:
        self.db.refresh(row)
        return row
