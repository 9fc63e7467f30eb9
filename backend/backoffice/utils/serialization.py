from __future__ import annotations
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional, Union

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S.%fZ'


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """UTC with microseconds: 2024-05-01T10:20:30.123456Z. Naive values are read as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def iso_date(d: Optional[Union[date, datetime]]) -> Optional[str]:
    if d is None:
        return None
    if isinstance(d, datetime):
        d = d.date()
    return d.isoformat()


def money(value: Optional[Union[Decimal, float, int, str]]) -> Optional[str]:
    if value is None:
        return None
    return f'{Decimal(str(value)):.2f}'

__all__ = ['utcnow', 'iso_timestamp', 'iso_date', 'money', 'TIMESTAMP_FORMAT']
