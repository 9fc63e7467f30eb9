from __future__ import annotations
from datetime import date
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text, Date, Numeric
from .authz import Base
from .mixins import TimestampMixin, SoftDeleteMixin

RECEIPT_PREFIX = 'RR-'
RECEIPT_DIGITS = 12


class RepairRequest(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = 'repair_requests'
    # Status constants (declaration order is the order listed in enum errors)
    STATUS_PENDING = 'PENDING'
    STATUS_IN_PROGRESS = 'IN_PROGRESS'
    STATUS_WAITING_PARTS = 'WAITING_PARTS'
    STATUS_DONE = 'DONE'
    STATUS_DELIVERED = 'DELIVERED'
    STATUS_CANCELLED = 'CANCELLED'
    ALL_STATUSES = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_WAITING_PARTS, STATUS_DONE, STATUS_DELIVERED, STATUS_CANCELLED)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    receipt_number: Mapped[str] = mapped_column(String(len(RECEIPT_PREFIX) + RECEIPT_DIGITS), unique=True, nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    customer_phone: Mapped[str] = mapped_column(String(64), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    article_name: Mapped[str] = mapped_column(String(255), nullable=False)
    article_type: Mapped[str] = mapped_column(String(255), nullable=False)
    article_brand: Mapped[str] = mapped_column(String(255), nullable=False)
    article_model: Mapped[str] = mapped_column(String(255), nullable=False)
    article_serialnumber: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    article_accesories: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    article_problem: Mapped[str] = mapped_column(Text, nullable=False)
    repair_status: Mapped[str] = mapped_column(String(32), nullable=False, default=STATUS_PENDING, index=True)
    repair_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    repair_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2, asdecimal=True), nullable=True)
    received_at: Mapped[date] = mapped_column(Date, nullable=False)
    repaired_at: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

# receipt_number: RR- + 12 digit zero padded sequence, assigned once by the repository.

__all__ = ["RepairRequest", "RECEIPT_PREFIX", "RECEIPT_DIGITS"]
