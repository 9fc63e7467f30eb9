from __future__ import annotations
import re
from sqlalchemy import func, select
from backoffice.models.repair_request import RepairRequest, RECEIPT_PREFIX, RECEIPT_DIGITS

RECEIPT_PATTERN = re.compile(rf'^{re.escape(RECEIPT_PREFIX)}\d{{{RECEIPT_DIGITS}}}$')


class ReceiptNumberUnavailable(RuntimeError):
    """Raised when every insert attempt collided on receipt_number."""


def format_receipt_number(sequence: int) -> str:
    if sequence < 1:
        raise ValueError('receipt sequence starts at 1')
    if sequence >= 10 ** RECEIPT_DIGITS:
        raise ValueError('receipt sequence exhausted')
    return f'{RECEIPT_PREFIX}{sequence:0{RECEIPT_DIGITS}d}'


def parse_receipt_number(receipt_number: str) -> int:
    if not RECEIPT_PATTERN.match(receipt_number or ''):
        raise ValueError(f'malformed receipt number {receipt_number!r}')
    return int(receipt_number[len(RECEIPT_PREFIX):])


def next_receipt_number(session) -> str:
    """Highest assigned number + 1.

    Soft-deleted rows are included so numbers are never reused. Fixed width
    zero padding keeps lexicographic MAX equal to numeric MAX.
    """
    latest = session.execute(select(func.max(RepairRequest.receipt_number))).scalar()
    sequence = parse_receipt_number(latest) + 1 if latest else 1
    return format_receipt_number(sequence)


def receipt_number_taken(session, receipt_number: str) -> bool:
    q = select(func.count()).select_from(RepairRequest).where(RepairRequest.receipt_number == receipt_number)
    return session.execute(q).scalar_one() > 0

__all__ = [
    'format_receipt_number', 'parse_receipt_number', 'next_receipt_number', 'receipt_number_taken',
    'ReceiptNumberUnavailable', 'RECEIPT_PATTERN',
]
