from __future__ import annotations
"""Data access for soft-deletable records.

Entities are plain mapped classes; every read/write goes through a repository bound to
one SQLAlchemy session. Each mutating call commits before returning.
"""
import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar
from sqlalchemy import select

from backoffice.utils.serialization import utcnow

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CrudRepository(Generic[T]):
    model: Type[T]
    # fields never overwritten by update()
    immutable_fields: Iterable[str] = ('id', 'created_at', 'updated_at', 'deleted_at')

    def __init__(self, session, model: Optional[Type[T]] = None):
        self.session = session
        if model is not None:
            self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _active(self):
        return select(self.model).where(self.model.deleted_at.is_(None))

    def list_active(self) -> List[T]:
        """Every non-deleted row, newest id first."""
        return list(self.session.execute(self._active().order_by(self.model.id.desc())).scalars())

    def find(self, entity_id: int) -> Optional[T]:
        return self.session.execute(self._active().where(self.model.id == entity_id)).scalar_one_or_none()

    def build(self, data: Dict[str, Any]) -> T:
        now = utcnow()
        entity = self.model(**data)
        entity.created_at = now
        entity.updated_at = now
        return entity

    def create(self, data: Dict[str, Any]) -> T:
        entity = self.build(data)
        self.session.add(entity)
        self.session.commit()
        logger.info('%s created id=%s', self.entity_name, entity.id)
        return entity

    def update(self, entity: T, data: Dict[str, Any]) -> T:
        changed = []
        for field, value in data.items():
            if field in self.immutable_fields:
                continue
            if getattr(entity, field) != value:
                setattr(entity, field, value)
                changed.append(field)
        if changed:
            entity.updated_at = utcnow()
        self.session.commit()
        logger.info('%s updated id=%s fields=%s', self.entity_name, entity.id, ','.join(changed) or '-')
        return entity

    def soft_delete(self, entity: T) -> T:
        entity.deleted_at = utcnow()
        self.session.commit()
        logger.info('%s soft-deleted id=%s', self.entity_name, entity.id)
        return entity

__all__ = ['CrudRepository']
