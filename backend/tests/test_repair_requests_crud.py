from backoffice import get_db
from backoffice.constants.roles import ROLE_USER
from backoffice.models.repair_request import RepairRequest
from tests.test_utils_seed import seed_user_with_role
from tests.test_lifecycle_helpers import (
    admin_headers, jwt_headers, api, repair_request_payload, assert_envelope, assert_field_errors,
)


def _create(client, headers, **overrides):
    resp = client.post(api('/repair-request'), json=repair_request_payload(**overrides), headers=headers)
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()['data']['repairRequest']


def test_index_lists_newest_first_and_hides_deleted(client):
    headers = admin_headers()
    first = _create(client, headers, customer_name='First Customer')
    second = _create(client, headers, customer_name='Second Customer')
    third = _create(client, headers, customer_name='Third Customer')
    client.delete(api(f"/repair-request/{second['id']}"), headers=headers)

    resp = client.get(api('/repair-request'), headers=headers)
    body = assert_envelope(resp, 200, 'Repair requests retrieved successfully.')
    ids = [r['id'] for r in body['data']['repairRequests']]
    assert ids == [third['id'], first['id']]


def test_index_empty(client):
    body = assert_envelope(client.get(api('/repair-request'), headers=admin_headers()), 200)
    assert body['data'] == {'repairRequests': []}


def test_show_returns_record(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.get(api(f"/repair-request/{created['id']}"), headers=headers)
    body = assert_envelope(resp, 200, 'Repair request retrieved successfully.')
    assert body['data']['repairRequest'] == created


def test_show_unknown_id_is_404(client):
    resp = client.get(api('/repair-request/999'), headers=admin_headers())
    body = assert_envelope(resp, 404, 'The requested resource was not found.')
    assert body['errors'] == {}


def test_show_deleted_is_404(client):
    headers = admin_headers()
    created = _create(client, headers)
    client.delete(api(f"/repair-request/{created['id']}"), headers=headers)
    resp = client.get(api(f"/repair-request/{created['id']}"), headers=headers)
    assert resp.status_code == 404


def test_update_changes_only_given_fields(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.put(api(f"/repair-request/{created['id']}"), json={
        'repair_status': 'DONE', 'repaired_at': '2023-10-05', 'repair_price': 1750,
    }, headers=headers)
    body = assert_envelope(resp, 200, 'Repair request updated successfully.')
    rr = body['data']['repairRequest']
    assert rr['repair_status'] == 'DONE'
    assert rr['repaired_at'] == '2023-10-05'
    assert rr['repair_price'] == '1750.00'
    assert rr['customer_name'] == created['customer_name']
    assert rr['receipt_number'] == created['receipt_number']
    assert rr['created_at'] == created['created_at']
    assert rr['updated_at'] >= created['updated_at']


def test_patch_is_accepted(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.patch(api(f"/repair-request/{created['id']}"), json={'customer_name': 'Maria Lopez'}, headers=headers)
    assert resp.get_json()['data']['repairRequest']['customer_name'] == 'Maria Lopez'


def test_update_cannot_change_receipt_number(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.put(api(f"/repair-request/{created['id']}"), json={'receipt_number': 'RR-000000000999'}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()['data']['repairRequest']['receipt_number'] == created['receipt_number']


def test_update_validates_present_fields(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.put(api(f"/repair-request/{created['id']}"), json={'repair_status': 'BROKEN'}, headers=headers)
    body = assert_field_errors(resp, 'repair_status', [
        'The selected repair status is invalid. Allowed values: PENDING, IN_PROGRESS, WAITING_PARTS, DONE, DELIVERED, CANCELLED.',
    ])
    assert list(body['errors']) == ['repair_status']
    assert get_db().get(RepairRequest, created['id']).repair_status == 'PENDING'


def test_update_cannot_null_required_field(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.put(api(f"/repair-request/{created['id']}"), json={'customer_name': None}, headers=headers)
    assert_field_errors(resp, 'customer_name', ['The customer name field is required.'])


def test_update_unknown_id_is_404(client):
    resp = client.put(api('/repair-request/42'), json={'customer_name': 'Nobody Here'}, headers=admin_headers())
    assert resp.status_code == 404


def test_destroy_soft_deletes(client):
    headers = admin_headers()
    created = _create(client, headers)
    resp = client.delete(api(f"/repair-request/{created['id']}"), headers=headers)
    body = assert_envelope(resp, 200, 'Repair request deleted successfully.')
    assert 'data' not in body
    row = get_db().get(RepairRequest, created['id'])
    assert row is not None and row.deleted_at is not None
    again = client.delete(api(f"/repair-request/{created['id']}"), headers=headers)
    assert again.status_code == 404


def test_non_admin_gets_403_even_for_unknown_ids(client):
    headers = admin_headers()
    created = _create(client, headers)
    user = seed_user_with_role('viewer@example.com', ROLE_USER)
    user_headers = jwt_headers(user.id, [ROLE_USER])
    assert client.get(api('/repair-request'), headers=user_headers).status_code == 403
    assert client.get(api(f"/repair-request/{created['id']}"), headers=user_headers).status_code == 403
    assert client.get(api('/repair-request/999'), headers=user_headers).status_code == 403
    assert client.put(api('/repair-request/999'), json={}, headers=user_headers).status_code == 403
    assert client.delete(api(f"/repair-request/{created['id']}"), headers=user_headers).status_code == 403
    assert get_db().get(RepairRequest, created['id']).deleted_at is None
