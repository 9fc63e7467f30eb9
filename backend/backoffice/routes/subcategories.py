from __future__ import annotations
from flask import Blueprint, request
from backoffice.decorators.auth import require_roles
from backoffice.decorators.binding import bind_model
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.forms.catalog import SUBCATEGORY_RULES
from backoffice.i18n.translator import trans
from backoffice.models.catalog import Subcategory
from backoffice.repositories.catalog import SubcategoryRepository
from backoffice.utils.responses import success
from backoffice.utils.serialization import iso_timestamp
from backoffice.utils.validation import validate
from backoffice import get_db

subcat_bp = Blueprint('subcategories', __name__)


def _subcategory_json(s: Subcategory):
    return {
        'id': s.id,
        'category_id': s.category_id,
        'name': s.name,
        'description': s.description,
        'created_at': iso_timestamp(s.created_at),
        'updated_at': iso_timestamp(s.updated_at),
    }


@subcat_bp.get('/')
@require_roles(ROLE_ADMIN)
def index():
    subcategories = [_subcategory_json(s) for s in SubcategoryRepository(get_db()).list_active()]
    return success(trans('messages.subcategory.retrieved_list'), {'subcategories': subcategories})


@subcat_bp.post('/')
@require_roles(ROLE_ADMIN)
def store():
    data = validate(request.get_json(silent=True), SUBCATEGORY_RULES)
    subcategory = SubcategoryRepository(get_db()).create(data)
    return success(trans('messages.subcategory.created'), {'subcategory': _subcategory_json(subcategory)})


@subcat_bp.get('/<int:subcategory_id>')
@require_roles(ROLE_ADMIN)
@bind_model(SubcategoryRepository, 'subcategory_id', 'subcategory')
def show(subcategory: Subcategory):
    return success(trans('messages.subcategory.retrieved'), {'subcategory': _subcategory_json(subcategory)})


@subcat_bp.route('/<int:subcategory_id>', methods=['PUT', 'PATCH'])
@require_roles(ROLE_ADMIN)
@bind_model(SubcategoryRepository, 'subcategory_id', 'subcategory')
def update(subcategory: Subcategory):
    data = validate(request.get_json(silent=True), SUBCATEGORY_RULES, partial=True)
    subcategory = SubcategoryRepository(get_db()).update(subcategory, data)
    return success(trans('messages.subcategory.updated'), {'subcategory': _subcategory_json(subcategory)})


@subcat_bp.delete('/<int:subcategory_id>')
@require_roles(ROLE_ADMIN)
@bind_model(SubcategoryRepository, 'subcategory_id', 'subcategory')
def destroy(subcategory: Subcategory):
    SubcategoryRepository(get_db()).soft_delete(subcategory)
    return success(trans('messages.subcategory.deleted'))
