"""Test seeding utilities to reduce duplication.

These helpers centralize creation of users with roles and of catalog rows,
bypassing the HTTP layer so tests can focus on the endpoint under test.
"""
from typing import Optional
from backoffice import get_db
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.models.authz import User, Role, UserRole
from backoffice.models.catalog import Category, Subcategory
from backoffice.services.seeding import ensure_roles
from backoffice.utils.serialization import utcnow


def ensure_user(email: str, name: Optional[str] = None, password: str = 'password', last_name: str = 'Example') -> User:
    session = get_db()
    u = session.query(User).filter_by(email=email).one_or_none()
    if not u:
        now = utcnow()
        u = User(name=name or email.split('@')[0], last_name=last_name, email=email, password_hash='', created_at=now, updated_at=now)
        u.set_password(password)
        session.add(u); session.commit(); session.refresh(u)
    return u


def ensure_role(name: str) -> Role:
    return ensure_roles(get_db())[name]


def ensure_user_role_assignment(user: User, role: Role):
    session = get_db()
    if not session.query(UserRole).filter_by(user_id=user.id, role_id=role.id).one_or_none():
        session.add(UserRole(user_id=user.id, role_id=role.id)); session.commit()


def seed_user_with_role(email: str, role_name: str, password: str = 'password') -> User:
    user = ensure_user(email, password=password)
    ensure_user_role_assignment(user, ensure_role(role_name))
    return user


def admin_user() -> User:
    """The seeded administrator (see conftest)."""
    session = get_db()
    return session.query(User).join(UserRole, UserRole.user_id == User.id).join(Role, Role.id == UserRole.role_id)\
        .filter(Role.name == ROLE_ADMIN).order_by(User.id).first()


def create_category(name: str = 'Electronics', description: Optional[str] = None) -> Category:
    session = get_db()
    now = utcnow()
    c = Category(name=name, description=description, created_at=now, updated_at=now)
    session.add(c); session.commit(); session.refresh(c)
    return c


def create_subcategory(category: Category, name: str = 'Laptops') -> Subcategory:
    session = get_db()
    now = utcnow()
    s = Subcategory(category_id=category.id, name=name, created_at=now, updated_at=now)
    session.add(s); session.commit(); session.refresh(s)
    return s


__all__ = [
    'ensure_user', 'ensure_role', 'ensure_user_role_assignment', 'seed_user_with_role', 'admin_user',
    'create_category', 'create_subcategory',
]
