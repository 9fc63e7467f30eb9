from __future__ import annotations
"""Declarative field validation.

A rule set is an ordered list of ``Field`` objects, each holding an ordered chain of
rules. ``validate`` evaluates every field (never stopping at the first failing field),
collects every failing rule's localized message and raises ``ValidationFailed`` (422)
when anything failed. On success it returns only the declared fields that were present,
cast to their persistence type.

Example:

    RULES = [
        Field('customer_name', Required(), String(), Min(3)),
        Field('customer_phone', Required(), String(), Min(8), label='phone'),
        Field('repair_price', Nullable(), Numeric(), cast=to_decimal),
    ]
    data = validate(payload, RULES)                 # create
    data = validate(payload, RULES, partial=True)   # update: absent fields skipped
"""
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

import email_validator
from email_validator import validate_email, EmailNotValidError
from sqlalchemy import func, select
from werkzeug.exceptions import UnprocessableEntity

from backoffice.i18n.translator import trans, attribute_label


class ValidationFailed(UnprocessableEntity):
    """422 carrying the per-field error map rendered by the envelope handler."""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(description=trans('validation.failed'))
        self.errors = errors


# ASCII only: str.isdigit() also accepts '²' and other digits int() rejects
_INTEGER_RE = re.compile(r'-?[0-9]+')
# signed 64-bit range of an INTEGER primary key
_MIN_ID, _MAX_ID = -(2 ** 63), 2 ** 63 - 1

# addresses are checked for syntax only, so reserved names (localhost, .test, .local) are accepted
email_validator.SPECIAL_USE_DOMAIN_NAMES[:] = []


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace('Z', '+00:00')).date()
    except ValueError:
        return None


def to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        dec = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return dec if dec.is_finite() else None


# ---------------- Rules ---------------- #

class Rule:
    """Base rule: ``key`` names the catalog entry under ``validation.``."""
    key = ''

    def passes(self, value: Any, field: 'Field') -> bool:
        raise NotImplementedError

    def message_key(self, value: Any, field: 'Field') -> str:
        return self.key

    def params(self) -> Dict[str, Any]:
        return {}


class Required(Rule):
    key = 'required'

    def passes(self, value, field):
        return value is not None


class Nullable(Rule):
    key = 'nullable'

    def passes(self, value, field):
        return True


class String(Rule):
    key = 'string'

    def passes(self, value, field):
        return isinstance(value, str)


class Integer(Rule):
    key = 'integer'

    def passes(self, value, field):
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()) is not None


class Numeric(Rule):
    key = 'numeric'

    def passes(self, value, field):
        if isinstance(value, bool):
            return False
        if _is_number(value):
            return True
        return isinstance(value, str) and to_decimal(value) is not None


class Email(Rule):
    key = 'email'

    def passes(self, value, field):
        if not isinstance(value, str):
            return False
        try:
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            return False
        return True


class Date(Rule):
    key = 'date'

    def passes(self, value, field):
        return parse_date(value) is not None


class Enum(Rule):
    key = 'enum'

    def __init__(self, values: Sequence[str]):
        self.values = tuple(values)

    def passes(self, value, field):
        return isinstance(value, str) and value in self.values

    def params(self):
        return {'values': ', '.join(self.values)}


class _Size(Rule):
    """Shared size semantics: numeric value when the field is numeric, else length."""

    def __init__(self, bound: int):
        self.bound = bound

    @staticmethod
    def size_of(value: Any, field: 'Field'):
        if field.is_numeric:
            if _is_number(value):
                return value
            dec = to_decimal(value)
            if dec is not None:
                return dec
        if value is None:
            return 0
        if isinstance(value, str):
            return len(value)
        return len(str(value))

    def message_key(self, value, field):
        return f"{self.key}.{'numeric' if field.is_numeric else 'string'}"

    def params(self):
        return {self.key: self.bound}


class Min(_Size):
    key = 'min'

    def passes(self, value, field):
        return self.size_of(value, field) >= self.bound


class Max(_Size):
    key = 'max'

    def passes(self, value, field):
        return self.size_of(value, field) <= self.bound


class Exists(Rule):
    """Value must be the id of a row of ``model`` that is not soft-deleted."""
    key = 'exists'

    def __init__(self, model, session_factory: Callable[[], Any]):
        self.model = model
        self.session_factory = session_factory

    def passes(self, value, field):
        if isinstance(value, bool) or not Integer().passes(value, field):
            return False
        entity_id = int(value)
        if not _MIN_ID <= entity_id <= _MAX_ID:
            return False
        q = select(self.model.id).where(self.model.id == entity_id)
        if hasattr(self.model, 'deleted_at'):
            q = q.where(self.model.deleted_at.is_(None))
        return self.session_factory().execute(q).first() is not None


class Unique(Rule):
    """No other row (soft-deleted ones included) holds the value in ``column``."""
    key = 'unique'

    def __init__(self, model, column: str, session_factory: Callable[[], Any], ignore_id: Optional[int] = None):
        self.model = model
        self.column = column
        self.session_factory = session_factory
        self.ignore_id = ignore_id

    def passes(self, value, field):
        col = getattr(self.model, self.column)
        q = select(func.count()).select_from(self.model).where(col == value)
        if self.ignore_id is not None:
            q = q.where(self.model.id != self.ignore_id)
        return self.session_factory().execute(q).scalar_one() == 0


# ---------------- Fields ---------------- #

class Field:
    def __init__(self, name: str, *rules: Rule, label: Optional[str] = None, cast: Optional[Callable[[Any], Any]] = None):
        self.name = name
        self.rules = list(rules)
        self.label = label or name
        self.cast = cast

    @property
    def required(self) -> bool:
        return any(isinstance(r, Required) for r in self.rules)

    @property
    def nullable(self) -> bool:
        return any(isinstance(r, Nullable) for r in self.rules)

    @property
    def is_numeric(self) -> bool:
        return any(isinstance(r, (Numeric, Integer)) for r in self.rules)

    def value_rules(self) -> List[Rule]:
        return [r for r in self.rules if not isinstance(r, (Required, Nullable))]


def _message(rule: Rule, value: Any, field: Field) -> str:
    return trans(f'validation.{rule.message_key(value, field)}', attribute=attribute_label(field.label), **rule.params())


def collect_errors(payload: Dict[str, Any], fields: Iterable[Field], partial: bool = False) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for field in fields:
        present = field.name in payload
        if partial and not present:
            continue
        value = payload.get(field.name)
        if isinstance(value, str) and value == '':
            value = None
        if value is None:
            if field.required:
                errors[field.name] = [_message(Required(), value, field)]
                continue
            if field.nullable or not present:
                continue
        messages = [_message(rule, value, field) for rule in field.value_rules() if not rule.passes(value, field)]
        if messages:
            errors[field.name] = messages
    return errors


def validate(payload: Any, fields: Sequence[Field], partial: bool = False) -> Dict[str, Any]:
    """Return the validated subset of payload or raise ValidationFailed."""
    if not isinstance(payload, dict):
        payload = {}
    errors = collect_errors(payload, fields, partial=partial)
    if errors:
        raise ValidationFailed(errors)
    data: Dict[str, Any] = {}
    for field in fields:
        if field.name not in payload:
            continue
        value = payload[field.name]
        if isinstance(value, str) and value == '':
            value = None
        if value is not None and field.cast:
            value = field.cast(value)
        data[field.name] = value
    return data

__all__ = [
    'ValidationFailed', 'Field', 'Rule', 'Required', 'Nullable', 'String', 'Integer', 'Numeric',
    'Email', 'Date', 'Enum', 'Min', 'Max', 'Exists', 'Unique', 'validate', 'collect_errors',
    'parse_date', 'to_decimal',
]
