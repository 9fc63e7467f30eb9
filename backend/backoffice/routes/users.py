from __future__ import annotations
from flask import Blueprint, request
from backoffice.decorators.auth import require_roles
from backoffice.decorators.binding import bind_model
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.forms.users import user_rules
from backoffice.i18n.translator import trans
from backoffice.models.authz import User
from backoffice.repositories.users import UserRepository
from backoffice.services.policy import role_names_for
from backoffice.utils.responses import success
from backoffice.utils.serialization import iso_timestamp
from backoffice.utils.validation import validate
from backoffice import get_db

users_bp = Blueprint('users', __name__)


def user_json(u: User, session=None):
    # password_hash is never serialized
    return {
        'id': u.id,
        'name': u.name,
        'last_name': u.last_name,
        'email': u.email,
        'is_active': u.is_active,
        'locale': u.locale,
        'roles': role_names_for(u.id, session),
        'created_at': iso_timestamp(u.created_at),
        'updated_at': iso_timestamp(u.updated_at),
    }


@users_bp.get('/')
@require_roles(ROLE_ADMIN)
def index():
    session = get_db()
    users = [user_json(u, session) for u in UserRepository(session).list_active()]
    return success(trans('messages.user.retrieved_list'), {'users': users})


@users_bp.post('/')
@require_roles(ROLE_ADMIN)
def store():
    session = get_db()
    data = validate(request.get_json(silent=True), user_rules())
    user = UserRepository(session).create(data)
    return success(trans('messages.user.created'), {'user': user_json(user, session)})


@users_bp.get('/<int:user_id>')
@require_roles(ROLE_ADMIN)
@bind_model(UserRepository, 'user_id', 'user')
def show(user: User):
    return success(trans('messages.user.retrieved'), {'user': user_json(user)})


@users_bp.route('/<int:user_id>', methods=['PUT', 'PATCH'])
@require_roles(ROLE_ADMIN)
@bind_model(UserRepository, 'user_id', 'user')
def update(user: User):
    session = get_db()
    data = validate(request.get_json(silent=True), user_rules(ignore_id=user.id), partial=True)
    user = UserRepository(session).update(user, data)
    return success(trans('messages.user.updated'), {'user': user_json(user, session)})


@users_bp.delete('/<int:user_id>')
@require_roles(ROLE_ADMIN)
@bind_model(UserRepository, 'user_id', 'user')
def destroy(user: User):
    UserRepository(get_db()).soft_delete(user)
    return success(trans('messages.user.deleted'))
