from __future__ import annotations
from flask import Blueprint, request
from backoffice.decorators.auth import require_roles
from backoffice.decorators.binding import bind_model
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.forms.catalog import CATEGORY_RULES
from backoffice.i18n.translator import trans
from backoffice.models.catalog import Category
from backoffice.repositories.catalog import CategoryRepository
from backoffice.utils.responses import success
from backoffice.utils.serialization import iso_timestamp
from backoffice.utils.validation import validate
from backoffice import get_db

cat_bp = Blueprint('categories', __name__)


def _category_json(c: Category):
    return {
        'id': c.id,
        'name': c.name,
        'description': c.description,
        'created_at': iso_timestamp(c.created_at),
        'updated_at': iso_timestamp(c.updated_at),
    }


@cat_bp.get('/')
@require_roles(ROLE_ADMIN)
def index():
    categories = [_category_json(c) for c in CategoryRepository(get_db()).list_active()]
    return success(trans('messages.category.retrieved_list'), {'categories': categories})


@cat_bp.post('/')
@require_roles(ROLE_ADMIN)
def store():
    data = validate(request.get_json(silent=True), CATEGORY_RULES)
    category = CategoryRepository(get_db()).create(data)
    return success(trans('messages.category.created'), {'category': _category_json(category)})


@cat_bp.get('/<int:category_id>')
@require_roles(ROLE_ADMIN)
@bind_model(CategoryRepository, 'category_id', 'category')
def show(category: Category):
    return success(trans('messages.category.retrieved'), {'category': _category_json(category)})


@cat_bp.route('/<int:category_id>', methods=['PUT', 'PATCH'])
@require_roles(ROLE_ADMIN)
@bind_model(CategoryRepository, 'category_id', 'category')
def update(category: Category):
    data = validate(request.get_json(silent=True), CATEGORY_RULES, partial=True)
    category = CategoryRepository(get_db()).update(category, data)
    return success(trans('messages.category.updated'), {'category': _category_json(category)})


@cat_bp.delete('/<int:category_id>')
@require_roles(ROLE_ADMIN)
@bind_model(CategoryRepository, 'category_id', 'category')
def destroy(category: Category):
    CategoryRepository(get_db()).soft_delete(category)
    return success(trans('messages.category.deleted'))
