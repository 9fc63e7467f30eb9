"""Rule sets for repair requests.

Labels differ from field names where the catalog shares a label with other resources
(customer_phone -> 'phone', article_serialnumber -> 'serialnumber', ...).
"""
from backoffice.models.repair_request import RepairRequest
from backoffice.utils.validation import (
    Field, Required, Nullable, String, Email, Numeric, Date, Enum, Min, parse_date, to_decimal,
)

REPAIR_REQUEST_RULES = [
    Field('customer_name', Required(), String(), Min(3)),
    Field('customer_phone', Required(), String(), Min(8), label='phone'),
    Field('customer_email', Required(), String(), Email(), label='email'),
    Field('article_name', Required(), String(), Min(3)),
    Field('article_type', Required(), String(), Min(3)),
    Field('article_brand', Required(), String(), Min(2)),
    Field('article_model', Required(), String(), Min(2)),
    Field('article_serialnumber', Nullable(), String(), Min(6), label='serialnumber'),
    Field('article_accesories', Nullable(), String(), Min(3), label='accesories'),
    Field('article_problem', Required(), String(), Min(3)),
    Field('repair_status', Required(), String(), Enum(RepairRequest.ALL_STATUSES)),
    Field('repair_details', Nullable(), String(), Min(3)),
    Field('repair_price', Nullable(), Numeric(), cast=to_decimal),
    Field('received_at', Required(), Date(), cast=parse_date),
    Field('repaired_at', Nullable(), Date(), cast=parse_date),
]

# Updates evaluate the same chains with partial=True (absent fields are left untouched).
CREATE_REPAIR_REQUEST = REPAIR_REQUEST_RULES
UPDATE_REPAIR_REQUEST = REPAIR_REQUEST_RULES
