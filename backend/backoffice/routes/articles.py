from __future__ import annotations
from flask import Blueprint, request
from backoffice.decorators.auth import require_roles
from backoffice.decorators.binding import bind_model
from backoffice.constants.roles import ROLE_ADMIN
from backoffice.forms.catalog import ARTICLE_RULES
from backoffice.i18n.translator import trans
from backoffice.models.catalog import Article
from backoffice.repositories.catalog import ArticleRepository
from backoffice.utils.responses import success
from backoffice.utils.serialization import iso_timestamp
from backoffice.utils.validation import validate
from backoffice import get_db

art_bp = Blueprint('articles', __name__)


def _article_json(a: Article):
    return {
        'id': a.id,
        'name': a.name,
        'description': a.description,
        'category_id': a.category_id,
        'subcategory_id': a.subcategory_id,
        'created_at': iso_timestamp(a.created_at),
        'updated_at': iso_timestamp(a.updated_at),
    }


@art_bp.get('/')
@require_roles(ROLE_ADMIN)
def index():
    articles = [_article_json(a) for a in ArticleRepository(get_db()).list_active()]
    return success(trans('messages.article.retrieved_list'), {'articles': articles})


@art_bp.post('/')
@require_roles(ROLE_ADMIN)
def store():
    data = validate(request.get_json(silent=True), ARTICLE_RULES)
    article = ArticleRepository(get_db()).create(data)
    return success(trans('messages.article.created'), {'article': _article_json(article)})


@art_bp.get('/<int:article_id>')
@require_roles(ROLE_ADMIN)
@bind_model(ArticleRepository, 'article_id', 'article')
def show(article: Article):
    return success(trans('messages.article.retrieved'), {'article': _article_json(article)})


@art_bp.route('/<int:article_id>', methods=['PUT', 'PATCH'])
@require_roles(ROLE_ADMIN)
@bind_model(ArticleRepository, 'article_id', 'article')
def update(article: Article):
    data = validate(request.get_json(silent=True), ARTICLE_RULES, partial=True)
    article = ArticleRepository(get_db()).update(article, data)
    return success(trans('messages.article.updated'), {'article': _article_json(article)})


@art_bp.delete('/<int:article_id>')
@require_roles(ROLE_ADMIN)
@bind_model(ArticleRepository, 'article_id', 'article')
def destroy(article: Article):
    ArticleRepository(get_db()).soft_delete(article)
    return success(trans('messages.article.deleted'))
