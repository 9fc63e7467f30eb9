from __future__ import annotations
import datetime as dt
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Text, Date, ForeignKey
from .authz import Base
from .mixins import TimestampMixin, SoftDeleteMixin


class SupportRequest(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'support_requests'
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('users.id'), nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    detail: Mapped[str] = mapped_column(Text, nullable=False)
    user = relationship('User', back_populates='support_requests')

__all__ = ["SupportRequest"]
