from __future__ import annotations
"""Idempotent base data: the role catalogue plus one administrator.

Used by scripts/seed_database.py and by the test suite before every test.
"""
import logging
from typing import Dict
from sqlalchemy import select

from backoffice.constants.roles import ALL_ROLES, ROLE_ADMIN, ROLE_DESCRIPTIONS
from backoffice.models.authz import Role, User, UserRole
from backoffice.utils.serialization import utcnow

logger = logging.getLogger(__name__)


def ensure_roles(session) -> Dict[str, Role]:
    existing = {r.name: r for r in session.execute(select(Role)).scalars().all()}
    for name in ALL_ROLES:
        if name not in existing:
            role = Role(name=name, is_system=True, description_i18n=ROLE_DESCRIPTIONS.get(name, {'en': name}))
            session.add(role)
            existing[name] = role
            logger.info('seeded role %s', name)
    session.flush()
    return existing


def ensure_initial_admin(session, email: str, password: str, name: str = 'Admin', last_name: str = 'Administrator') -> User:
    roles = ensure_roles(session)
    user = session.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if not user:
        now = utcnow()
        user = User(name=name, last_name=last_name, email=email, password_hash='', created_at=now, updated_at=now)
        user.set_password(password)
        session.add(user)
        session.flush()
        logger.info('seeded admin user %s', email)
    admin_role = roles[ROLE_ADMIN]
    has_admin = session.execute(
        select(UserRole).where(UserRole.user_id == user.id, UserRole.role_id == admin_role.id)
    ).scalar_one_or_none()
    if not has_admin:
        session.add(UserRole(user_id=user.id, role_id=admin_role.id))
        session.flush()
    return user


def seed_database(session, admin_email: str, admin_password: str, commit: bool = True) -> User:
    admin = ensure_initial_admin(session, admin_email, admin_password)
    if commit:
        session.commit()
    return admin

__all__ = ['ensure_roles', 'ensure_initial_admin', 'seed_database']
