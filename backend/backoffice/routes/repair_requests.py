from __future__ import annotations
from flask import Blueprint, request, current_app
from backoffice.decorators.auth import require_roles
from backoffice.decorators.binding import bind_model
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.forms.repair_request import CREATE_REPAIR_REQUEST, UPDATE_REPAIR_REQUEST
from backoffice.i18n.translator import trans
from backoffice.models.repair_request import RepairRequest
from backoffice.repositories.repair_request import RepairRequestRepository
from backoffice.utils.responses import success
from backoffice.utils.serialization import iso_date, iso_timestamp, money
from backoffice.utils.validation import validate
from backoffice import get_db

rr_bp = Blueprint('repair_requests', __name__)


def _repository():
    return RepairRequestRepository(get_db(), max_attempts=current_app.config['RECEIPT_NUMBER_MAX_ATTEMPTS'])


@rr_bp.get('/')
@require_roles(ROLE_ADMIN)
def index():
    repair_requests = [_repair_request_json(r) for r in _repository().list_active()]
    return success(trans('messages.repair_request.retrieved_list'), {'repairRequests': repair_requests})


@rr_bp.post('/')
@require_roles(ROLE_ADMIN)
def store():
    data = validate(request.get_json(silent=True), CREATE_REPAIR_REQUEST)
    repair_request = _repository().create(data)
    # 200, not 201, like every other success envelope
    return success(trans('messages.repair_request.created'), {'repairRequest': _repair_request_json(repair_request)})


@rr_bp.get('/<int:repair_request_id>')
@require_roles(ROLE_ADMIN)
@bind_model(RepairRequestRepository, 'repair_request_id', 'repair_request')
def show(repair_request: RepairRequest):
    return success(trans('messages.repair_request.retrieved'), {'repairRequest': _repair_request_json(repair_request)})


@rr_bp.route('/<int:repair_request_id>', methods=['PUT', 'PATCH'])
@require_roles(ROLE_ADMIN)
@bind_model(RepairRequestRepository, 'repair_request_id', 'repair_request')
def update(repair_request: RepairRequest):
    data = validate(request.get_json(silent=True), UPDATE_REPAIR_REQUEST, partial=True)
    repair_request = _repository().update(repair_request, data)
    return success(trans('messages.repair_request.updated'), {'repairRequest': _repair_request_json(repair_request)})


@rr_bp.delete('/<int:repair_request_id>')
@require_roles(ROLE_ADMIN)
@bind_model(RepairRequestRepository, 'repair_request_id', 'repair_request')
def destroy(repair_request: RepairRequest):
    _repository().soft_delete(repair_request)
    return success(trans('messages.repair_request.deleted'))


def _repair_request_json(r: RepairRequest):
    return {
        'id': r.id,
        'receipt_number': r.receipt_number,
        'customer_name': r.customer_name,
        'customer_phone': r.customer_phone,
        'customer_email': r.customer_email,
        'article_name': r.article_name,
        'article_type': r.article_type,
        'article_brand': r.article_brand,
        'article_model': r.article_model,
        'article_serialnumber': r.article_serialnumber,
        'article_accesories': r.article_accesories,
        'article_problem': r.article_problem,
        'repair_status': r.repair_status,
        'repair_details': r.repair_details,
        'repair_price': money(r.repair_price),
        'received_at': iso_date(r.received_at),
        'repaired_at': iso_date(r.repaired_at),
        'created_at': iso_timestamp(r.created_at),
        'updated_at': iso_timestamp(r.updated_at),
    }
