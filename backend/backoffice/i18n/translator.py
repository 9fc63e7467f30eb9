from __future__ import annotations
"""Locale-aware message lookup.

Catalogs are nested dicts keyed by dotted paths ('validation.min.string').
Lookup order: requested locale -> FALLBACK_LOCALE -> the key itself.
Templates use ``{name}`` placeholders substituted from keyword params.
"""
from typing import Any, Dict, Optional
from flask import current_app, has_app_context, has_request_context, request

from backoffice.i18n import en, es

FALLBACK_LOCALE = 'en'

CATALOGS: Dict[str, Dict[str, Any]] = {
    'en': en.CATALOG,
    'es': es.CATALOG,
}


def _lookup(catalog: Dict[str, Any], key: str) -> Optional[str]:
    node: Any = catalog
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def current_locale() -> str:
    """Best Accept-Language match inside a request, else the configured default."""
    default = FALLBACK_LOCALE
    supported = list(CATALOGS)
    if has_app_context():
        default = current_app.config.get('DEFAULT_LOCALE', FALLBACK_LOCALE)
        supported = [loc for loc in current_app.config.get('SUPPORTED_LOCALES', supported) if loc in CATALOGS]
    if has_request_context() and supported:
        best = request.accept_languages.best_match(supported)
        if best:
            return best
    return default


def trans(key: str, locale: Optional[str] = None, **params: Any) -> str:
    locale = locale or current_locale()
    template = _lookup(CATALOGS.get(locale, {}), key)
    if template is None and locale != FALLBACK_LOCALE:
        template = _lookup(CATALOGS[FALLBACK_LOCALE], key)
    if template is None:
        return key
    if not params:
        return template
    return template.format_map(_SafeParams(params))


def attribute_label(label_key: str, locale: Optional[str] = None) -> str:
    """Localized field label; unknown labels read as the key with spaces."""
    full_key = f'validation.attributes.{label_key}'
    label = trans(full_key, locale)
    if label == full_key:
        return label_key.replace('_', ' ')
    return label


class _SafeParams(dict):
    # leaves unknown placeholders untouched instead of raising KeyError
    def __missing__(self, key):
        return '{' + key + '}'

__all__ = ['trans', 'attribute_label', 'current_locale', 'CATALOGS', 'FALLBACK_LOCALE']
