from backoffice.utils.validation import Field, Required, String, Date, Min, Max, parse_date

# user_id is taken from the token, never from the payload
SUPPORT_REQUEST_RULES = [
    Field('date', Required(), Date(), cast=parse_date),
    Field('location', Required(), String(), Min(3), Max(255)),
    Field('detail', Required(), String(), Min(3)),
]
