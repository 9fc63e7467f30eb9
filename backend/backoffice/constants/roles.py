"""Central role names to avoid typos in decorators, seeds and tests.
Never rename a role silently; tokens already issued carry these names in their `roles` claim.
"""
from __future__ import annotations
from typing import Dict

ROLE_ADMIN = 'ADMIN'
ROLE_USER = 'USER'

ALL_ROLES = (ROLE_ADMIN, ROLE_USER)

DEFAULT_ROLE = ROLE_USER

ROLE_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    ROLE_ADMIN: {'en': 'Administrator', 'es': 'Administrador'},
    ROLE_USER: {'en': 'User', 'es': 'Usuario'},
}
