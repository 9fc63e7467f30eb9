import re
import pytest
from backoffice import get_db
from backoffice.constants.roles import ROLE_USER
from backoffice.i18n.translator import trans, attribute_label
from backoffice.models.repair_request import RepairRequest
from tests.test_utils_seed import seed_user_with_role
from tests.test_lifecycle_helpers import (
    admin_headers, jwt_headers, api, repair_request_payload, assert_envelope, assert_field_errors,
)

TIMESTAMP_RE = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z$')
STATUS_VALUES = 'PENDING, IN_PROGRESS, WAITING_PARTS, DONE, DELIVERED, CANCELLED'


def _post(client, payload, headers=None):
    return client.post(api('/repair-request'), json=payload, headers=headers or admin_headers())


def _msg(key, label, **params):
    return trans(f'validation.{key}', attribute=attribute_label(label), **params)


def test_admin_can_create_repair_request(client):
    payload = repair_request_payload()
    resp = _post(client, payload)
    body = assert_envelope(resp, 200, 'Repair request created successfully.')
    rr = body['data']['repairRequest']
    for key, value in payload.items():
        assert rr[key] == value, key
    assert rr['id'] == 1
    assert rr['receipt_number'] == 'RR-000000000001'
    assert TIMESTAMP_RE.match(rr['created_at'])
    assert rr['created_at'] == rr['updated_at']
    stored = get_db().get(RepairRequest, 1)
    assert stored.customer_email == 'juan.perez@example.com'
    assert str(stored.repair_price) == '1500.50'


def test_trailing_slash_path_is_accepted(client):
    resp = client.post(api('/repair-request/'), json=repair_request_payload(), headers=admin_headers())
    assert_envelope(resp, 200, 'Repair request created successfully.')


def test_receipt_number_format(client):
    rr = _post(client, repair_request_payload()).get_json()['data']['repairRequest']
    assert re.match(r'^RR-\d{12}$', rr['receipt_number'])


def test_numeric_price_is_rendered_with_two_decimals(client):
    rr = _post(client, repair_request_payload(repair_price=99.5)).get_json()['data']['repairRequest']
    assert rr['repair_price'] == '99.50'


def test_non_admin_cannot_create_repair_request(client):
    user = seed_user_with_role('example@example.com', ROLE_USER)
    resp = _post(client, repair_request_payload(), headers=jwt_headers(user.id, [ROLE_USER]))
    body = assert_envelope(resp, 403, 'User does not have the right roles.')
    assert body['errors'] == {}
    assert get_db().query(RepairRequest).count() == 0


def test_missing_token_is_unauthenticated(client):
    resp = client.post(api('/repair-request'), json=repair_request_payload())
    assert_envelope(resp, 401, 'Unauthenticated.')


def test_forbidden_caller_gets_403_before_validation(client):
    user = seed_user_with_role('plain@example.com', ROLE_USER)
    resp = _post(client, {}, headers=jwt_headers(user.id, [ROLE_USER]))
    assert resp.status_code == 403


@pytest.mark.parametrize('field,label', [
    ('customer_name', 'customer_name'),
    ('customer_phone', 'phone'),
    ('customer_email', 'email'),
    ('article_name', 'article_name'),
    ('article_type', 'article_type'),
    ('article_brand', 'article_brand'),
    ('article_model', 'article_model'),
    ('article_problem', 'article_problem'),
    ('repair_status', 'repair_status'),
])
def test_required_fields(client, field, label):
    payload = repair_request_payload()
    payload.pop(field)
    assert_field_errors(_post(client, payload), field, [_msg('required', label)])


def test_received_at_null_is_required(client):
    resp = _post(client, repair_request_payload(received_at=None))
    assert_field_errors(resp, 'received_at', ['The received date field is required.'])


def test_empty_string_counts_as_missing(client):
    resp = _post(client, repair_request_payload(customer_name=''))
    assert_field_errors(resp, 'customer_name', ['The customer name field is required.'])


@pytest.mark.parametrize('field,value,label', [
    ('customer_name', 12345678, 'customer_name'),
    ('customer_phone', 12345678, 'phone'),
    ('article_name', 12345678, 'article_name'),
    ('article_type', 12345678, 'article_type'),
    ('article_brand', 12345678, 'article_brand'),
    ('article_model', 12345678, 'article_model'),
    ('article_serialnumber', 123456, 'serialnumber'),
    ('article_accesories', 12345, 'accesories'),
    ('article_problem', 12345, 'article_problem'),
    ('repair_details', 12345, 'repair_details'),
])
def test_fields_must_be_strings(client, field, value, label):
    resp = _post(client, repair_request_payload(**{field: value}))
    assert_field_errors(resp, field, [_msg('string', label)])


@pytest.mark.parametrize('field,value,label,minimum', [
    ('customer_name', 'Ej', 'customer_name', 3),
    ('customer_phone', '1234567', 'phone', 8),
    ('article_name', 'Ej', 'article_name', 3),
    ('article_type', 'Ej', 'article_type', 3),
    ('article_brand', 'A', 'article_brand', 2),
    ('article_model', 'A', 'article_model', 2),
    ('article_serialnumber', 'SN123', 'serialnumber', 6),
    ('article_accesories', 'AB', 'accesories', 3),
    ('article_problem', 'AB', 'article_problem', 3),
    ('repair_details', 'AB', 'repair_details', 3),
])
def test_minimum_lengths(client, field, value, label, minimum):
    resp = _post(client, repair_request_payload(**{field: value}))
    assert_field_errors(resp, field, [_msg('min.string', label, min=minimum)])


def test_customer_phone_min_message_text(client):
    resp = _post(client, repair_request_payload(customer_phone='1234567'))
    assert_field_errors(resp, 'customer_phone', ['The phone field must be at least 8 characters.'])


def test_customer_email_must_be_valid(client):
    resp = _post(client, repair_request_payload(customer_email='not-an-email'))
    assert_field_errors(resp, 'customer_email', ['The email field must be a valid email address.'])


def test_repair_status_integer_reports_string_and_enum(client):
    resp = _post(client, repair_request_payload(repair_status=12345))
    assert_field_errors(resp, 'repair_status', [
        'The repair status field must be a string.',
        f'The selected repair status is invalid. Allowed values: {STATUS_VALUES}.',
    ])


def test_repair_status_must_be_known_value(client):
    resp = _post(client, repair_request_payload(repair_status='INVALID_STATUS'))
    assert_field_errors(resp, 'repair_status', [_msg('enum', 'repair_status', values=STATUS_VALUES)])


def test_repair_price_must_be_numeric(client):
    resp = _post(client, repair_request_payload(repair_price='invalid_price'))
    assert_field_errors(resp, 'repair_price', ['The repair price field must be a number.'])


def test_received_at_must_be_a_date(client):
    resp = _post(client, repair_request_payload(received_at='invalid_date'))
    assert_field_errors(resp, 'received_at', ['The received date field must be a valid date.'])


def test_repaired_at_must_be_a_date_when_present(client):
    resp = _post(client, repair_request_payload(repaired_at='31/31/2023'))
    assert_field_errors(resp, 'repaired_at', ['The repaired date field must be a valid date.'])


@pytest.mark.parametrize('field', [
    'article_serialnumber', 'article_accesories', 'repair_details', 'repair_price', 'repaired_at',
])
def test_nullable_fields_accept_null(client, field):
    resp = _post(client, repair_request_payload(**{field: None}))
    body = assert_envelope(resp, 200)
    assert body['data']['repairRequest'][field] is None


def test_all_failing_fields_are_reported_together(client):
    resp = _post(client, repair_request_payload(customer_name='Ej', customer_email='bad', repair_price='x'))
    body = assert_envelope(resp, 422, 'The given data was invalid.')
    assert set(body['errors']) == {'customer_name', 'customer_email', 'repair_price'}
    assert get_db().query(RepairRequest).count() == 0


def test_empty_body_reports_every_required_field(client):
    resp = client.post(api('/repair-request'), data='not json', headers=admin_headers())
    body = assert_envelope(resp, 422)
    assert 'customer_name' in body['errors']
    assert 'received_at' in body['errors']
    assert 'repair_price' not in body['errors']


def test_client_supplied_receipt_number_is_ignored(client):
    resp = _post(client, repair_request_payload(receipt_number='RR-999999999999'))
    assert resp.get_json()['data']['repairRequest']['receipt_number'] == 'RR-000000000001'
