from __future__ import annotations
"""Route-parameter to entity resolution.

    @rr_bp.get('/<int:repair_request_id>')
    @require_roles(ROLE_ADMIN)
    @bind_model(RepairRequestRepository, 'repair_request_id', 'repair_request')
    def show(repair_request): ...

The lookup runs after the role gate and before the handler body; a missing or
soft-deleted row aborts with 404 so handlers only ever see live entities.
"""
from functools import wraps
from typing import Callable
from flask import abort

from backoffice import get_db
from backoffice.i18n.translator import trans


def bind_model(repository_factory: Callable, param: str, target: str):
    def outer(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            entity_id = kwargs.pop(param)
            entity = repository_factory(get_db()).find(entity_id)
            if entity is None:
                abort(404, description=trans('messages.not_found'))
            kwargs[target] = entity
            return fn(*args, **kwargs)
        return wrapper
    return outer
