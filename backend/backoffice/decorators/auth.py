from functools import wraps
from flask import abort
from flask_jwt_extended import verify_jwt_in_request
from backoffice.services.policy import has_any_role
from backoffice.i18n.translator import trans


def require_roles(*roles: str):
    """Pass when the bearer token's `roles` claim holds any of ``roles``; else 403."""
    def outer(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            if not has_any_role(*roles):
                abort(403, description=trans('auth.forbidden_role'))
            return fn(*args, **kwargs)
        return wrapper
    return outer
