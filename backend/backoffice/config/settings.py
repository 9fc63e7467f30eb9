"""Environment driven settings.

Every key can be overridden by passing a dict to ``create_app``; tests rely on that.
"""
from __future__ import annotations
from typing import Any, Dict
import os

DEFAULT_API_BASE = '/api/v1'
DEFAULT_LOCALE = 'en'
DEFAULT_RECEIPT_ATTEMPTS = 5


def _split_csv(raw: str):
    return [part.strip() for part in raw.split(',') if part.strip()]


def load_settings() -> Dict[str, Any]:
    try:
        expires = int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES_MINUTES', '60'))
        attempts = int(os.getenv('RECEIPT_NUMBER_MAX_ATTEMPTS', str(DEFAULT_RECEIPT_ATTEMPTS)))
    except ValueError:
        raise ValueError('JWT_ACCESS_TOKEN_EXPIRES_MINUTES/RECEIPT_NUMBER_MAX_ATTEMPTS must be int')
    return {
        'JWT_SECRET_KEY': os.getenv('JWT_SECRET_KEY', 'dev-secret'),
        'JWT_ACCESS_TOKEN_EXPIRES_MINUTES': max(1, expires),
        'DATABASE_URL': os.getenv('DATABASE_URL', 'sqlite:///dev.db'),
        'API_BASE': normalize_api_base(os.getenv('API_BASE', DEFAULT_API_BASE)),
        'DEFAULT_LOCALE': os.getenv('DEFAULT_LOCALE', DEFAULT_LOCALE),
        'SUPPORTED_LOCALES': _split_csv(os.getenv('SUPPORTED_LOCALES', 'en,es')),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
        'RECEIPT_NUMBER_MAX_ATTEMPTS': max(1, attempts),
        'INITIAL_ADMIN_EMAIL': os.getenv('INITIAL_ADMIN_EMAIL', 'admin@example.com'),
        'INITIAL_ADMIN_PASSWORD': os.getenv('INITIAL_ADMIN_PASSWORD', 'password'),
    }


def normalize_api_base(raw: str) -> str:
    """'api/v1/' -> '/api/v1'; empty string mounts resources at the root."""
    raw = (raw or '').strip().strip('/')
    return f'/{raw}' if raw else ''

__all__ = ['load_settings', 'normalize_api_base', 'DEFAULT_API_BASE']
