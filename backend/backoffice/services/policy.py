from __future__ import annotations
from typing import List, Set
from flask_jwt_extended import get_jwt, get_jwt_identity
from sqlalchemy import select
from backoffice.models.authz import Role, UserRole
from backoffice import get_db


def current_roles() -> Set[str]:
    claims = get_jwt()
    return set(claims.get('roles', []))


def has_any_role(*roles: str) -> bool:
    held = current_roles()
    return any(r in held for r in roles)


def current_user_id() -> int:
    # Identity stored as string (flask-jwt-extended v4 requirement)
    return int(get_jwt_identity())


def role_names_for(user_id: int, session=None) -> List[str]:
    """Sorted role names assigned to the user; embedded in the token at login."""
    session = session or get_db()
    rows = session.execute(
        select(Role.name).join(UserRole, UserRole.role_id == Role.id).where(UserRole.user_id == user_id)
    ).scalars().all()
    return sorted(rows)
