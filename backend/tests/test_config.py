import logging
from datetime import timedelta
import pytest
from backoffice.config.settings import load_settings, normalize_api_base
from backoffice.utils.log import configure_logging
from backoffice.utils.serialization import iso_timestamp, money
from datetime import datetime, timezone


@pytest.mark.parametrize('raw,expected', [
    ('/api/v1', '/api/v1'),
    ('api/v1/', '/api/v1'),
    ('', ''),
    ('/', ''),
])
def test_normalize_api_base(raw, expected):
    assert normalize_api_base(raw) == expected


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv('API_BASE', 'api/v2')
    monkeypatch.setenv('SUPPORTED_LOCALES', 'en, es ,')
    monkeypatch.setenv('RECEIPT_NUMBER_MAX_ATTEMPTS', '0')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    settings = load_settings()
    assert settings['API_BASE'] == '/api/v2'
    assert settings['SUPPORTED_LOCALES'] == ['en', 'es']
    assert settings['RECEIPT_NUMBER_MAX_ATTEMPTS'] == 1
    assert settings['LOG_LEVEL'] == 'DEBUG'


def test_bad_integer_setting(monkeypatch):
    monkeypatch.setenv('JWT_ACCESS_TOKEN_EXPIRES_MINUTES', 'soon')
    with pytest.raises(ValueError):
        load_settings()


def test_app_config_applied(app_instance):
    assert app_instance.config['API_BASE'] == '/api/v1'
    assert app_instance.config['JWT_ACCESS_TOKEN_EXPIRES'] == timedelta(minutes=60)


def test_configure_logging_does_not_stack_handlers(app_instance):
    configure_logging(app_instance)
    configure_logging(app_instance)
    handlers = [h for h in logging.getLogger('backoffice').handlers if h.get_name() == 'backoffice-stdout']
    assert len(handlers) == 1
    assert logging.getLogger('backoffice').level == logging.WARNING


def test_timestamp_and_money_formats():
    ts = datetime(2024, 5, 1, 10, 20, 30, 123456, tzinfo=timezone.utc)
    assert iso_timestamp(ts) == '2024-05-01T10:20:30.123456Z'
    assert iso_timestamp(ts.replace(tzinfo=None)) == '2024-05-01T10:20:30.123456Z'
    assert money('1500.5') == '1500.50'
    assert money(None) is None
