from __future__ import annotations
from flask import Blueprint, request
from backoffice.decorators.auth import require_roles
from backoffice.decorators.binding import bind_model
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.forms.support_request import SUPPORT_REQUEST_RULES
from backoffice.i18n.translator import trans
from backoffice.models.support_request import SupportRequest
from backoffice.repositories.catalog import SupportRequestRepository
from backoffice.services.policy import current_user_id
from backoffice.utils.responses import success
from backoffice.utils.serialization import iso_date, iso_timestamp
from backoffice.utils.validation import validate
from backoffice import get_db

sr_bp = Blueprint('support_requests', __name__)


@sr_bp.get('/')
@require_roles(ROLE_ADMIN)
def index():
    support_requests = [_support_request_json(s) for s in SupportRequestRepository(get_db()).list_active()]
    return success(trans('messages.support_request.retrieved_list'), {'supportRequests': support_requests})


@sr_bp.post('/')
@require_roles(ROLE_ADMIN)
def store():
    data = validate(request.get_json(silent=True), SUPPORT_REQUEST_RULES)
    data['user_id'] = current_user_id()
    support_request = SupportRequestRepository(get_db()).create(data)
    return success(trans('messages.support_request.created'), {'supportRequest': _support_request_json(support_request)})


@sr_bp.get('/<int:support_request_id>')
@require_roles(ROLE_ADMIN)
@bind_model(SupportRequestRepository, 'support_request_id', 'support_request')
def show(support_request: SupportRequest):
    return success(trans('messages.support_request.retrieved'), {'supportRequest': _support_request_json(support_request)})


@sr_bp.route('/<int:support_request_id>', methods=['PUT', 'PATCH'])
@require_roles(ROLE_ADMIN)
@bind_model(SupportRequestRepository, 'support_request_id', 'support_request')
def update(support_request: SupportRequest):
    data = validate(request.get_json(silent=True), SUPPORT_REQUEST_RULES, partial=True)
    support_request = SupportRequestRepository(get_db()).update(support_request, data)
    return success(trans('messages.support_request.updated'), {'supportRequest': _support_request_json(support_request)})


@sr_bp.delete('/<int:support_request_id>')
@require_roles(ROLE_ADMIN)
@bind_model(SupportRequestRepository, 'support_request_id', 'support_request')
def destroy(support_request: SupportRequest):
    SupportRequestRepository(get_db()).soft_delete(support_request)
    return success(trans('messages.support_request.deleted'))


def _support_request_json(s: SupportRequest):
    return {
        'id': s.id,
        'user_id': s.user_id,
        'date': iso_date(s.date),
        'location': s.location,
        'detail': s.detail,
        'created_at': iso_timestamp(s.created_at),
        'updated_at': iso_timestamp(s.updated_at),
    }
