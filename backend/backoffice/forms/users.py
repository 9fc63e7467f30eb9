from typing import List, Optional
from backoffice import get_db
from backoffice.constants.roles import ALL_ROLES
from backoffice.models.authz import User
from backoffice.utils.validation import Field, Required, Nullable, String, Email, Enum, Min, Max, Unique


def user_rules(ignore_id: Optional[int] = None) -> List[Field]:
    """Create rules when ignore_id is None; update rules skip the user's own email in the unique check."""
    return [
        Field('name', Required(), String(), Min(3), Max(128)),
        Field('last_name', Required(), String(), Min(3), Max(128)),
        Field('email', Required(), String(), Email(), Max(128), Unique(User, 'email', get_db, ignore_id=ignore_id)),
        Field('password', Required(), String(), Min(8)),
        Field('role', Nullable(), String(), Enum(ALL_ROLES)),
    ]


LOGIN_RULES = [
    Field('email', Required(), String(), Email()),
    Field('password', Required(), String()),
]
