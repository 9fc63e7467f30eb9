from __future__ import annotations
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Text, ForeignKey
from .authz import Base
from .mixins import TimestampMixin, SoftDeleteMixin


class Category(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'categories'
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    subcategories = relationship('Subcategory', back_populates='category')
    articles = relationship('Article', back_populates='category')


class Subcategory(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'subcategories'
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[int] = mapped_column(ForeignKey('categories.id'), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category = relationship('Category', back_populates='subcategories')
    articles = relationship('Article', back_populates='subcategory')


class Article(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'articles'
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[int] = mapped_column(ForeignKey('categories.id'), nullable=False, index=True)
    subcategory_id: Mapped[Optional[int]] = mapped_column(ForeignKey('subcategories.id'), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category = relationship('Category', back_populates='articles')
    subcategory = relationship('Subcategory', back_populates='articles')

__all__ = ["Category", "Subcategory", "Article"]
