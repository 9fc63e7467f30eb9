from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from sqlalchemy import select, delete

from backoffice.models.authz import User, Role, UserRole
from backoffice.repositories.base import CrudRepository
from backoffice.constants.roles import DEFAULT_ROLE

logger = logging.getLogger(__name__)


class UserRepository(CrudRepository[User]):
    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        return self.session.execute(self._active().where(User.email == email)).scalar_one_or_none()

    def _role(self, name: str) -> Role:
        role = self.session.execute(select(Role).where(Role.name == name)).scalar_one_or_none()
        if role is None:
            # created on demand when seeding has not run
            role = Role(name=name, is_system=True, description_i18n={'en': name})
            self.session.add(role)
            self.session.flush()
        return role

    def _set_role(self, user: User, role_name: str):
        role = self._role(role_name)
        self.session.execute(delete(UserRole).where(UserRole.user_id == user.id))
        self.session.add(UserRole(user_id=user.id, role_id=role.id))

    def create(self, data: Dict[str, Any]) -> User:
        data = dict(data)
        password = data.pop('password')
        role_name = data.pop('role', None) or DEFAULT_ROLE
        user = self.build(data)
        user.set_password(password)
        self.session.add(user)
        self.session.flush()
        self._set_role(user, role_name)
        self.session.commit()
        logger.info('User created id=%s role=%s', user.id, role_name)
        return user

    def update(self, user: User, data: Dict[str, Any]) -> User:
        data = dict(data)
        password = data.pop('password', None)
        role_name = data.pop('role', None)
        if password:
            user.set_password(password)
        if role_name:
            self._set_role(user, role_name)
        return super().update(user, data)

__all__ = ['UserRepository']
