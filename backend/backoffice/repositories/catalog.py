from __future__ import annotations
from backoffice.models.catalog import Category, Subcategory, Article
from backoffice.models.support_request import SupportRequest
from backoffice.repositories.base import CrudRepository


class CategoryRepository(CrudRepository[Category]):
    model = Category


class SubcategoryRepository(CrudRepository[Subcategory]):
    model = Subcategory


class ArticleRepository(CrudRepository[Article]):
    model = Article


class SupportRequestRepository(CrudRepository[SupportRequest]):
    model = SupportRequest
    immutable_fields = CrudRepository.immutable_fields + ('user_id',)

__all__ = ['CategoryRepository', 'SubcategoryRepository', 'ArticleRepository', 'SupportRequestRepository']
