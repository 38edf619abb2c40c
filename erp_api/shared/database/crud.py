from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import update
from sqlalchemy.orm import Session

from erp_api.config.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class CRUDRepository(Generic[ModelT]):
    """
    get / list / create / update / delete for one model.

    Methods flush but never commit: the calling service owns the transaction.
    Updates are column-targeted UPDATE statements so they only touch the
    columns that were sent.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get(self, record_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, record_id)

    def list(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def create(self, data: Dict[str, Any]) -> ModelT:
        record = self.model(**data)
        self.db.add(record)
        self.db.flush()
        return record

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[ModelT]:
        if changes:
            result = self.db.execute(
                update(self.model)
                .where(self.model.id == record_id)
                .values(**changes)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
        return self.db.get(self.model, record_id, populate_existing=True)

    def delete(self, record_id: int) -> bool:
        record = self.get(record_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True
