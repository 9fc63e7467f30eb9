"""English message catalog."""

CATALOG = {
    'validation': {
        'failed': 'The given data was invalid.',
        'required': 'The {attribute} field is required.',
        'string': 'The {attribute} field must be a string.',
        'integer': 'The {attribute} field must be an integer.',
        'numeric': 'The {attribute} field must be a number.',
        'email': 'The {attribute} field must be a valid email address.',
        'date': 'The {attribute} field must be a valid date.',
        'enum': 'The selected {attribute} is invalid. Allowed values: {values}.',
        'exists': 'The selected {attribute} is invalid.',
        'unique': 'The {attribute} has already been taken.',
        'min': {
            'string': 'The {attribute} field must be at least {min} characters.',
            'numeric': 'The {attribute} field must be at least {min}.',
        },
        'max': {
            'string': 'The {attribute} field must not be greater than {max} characters.',
            'numeric': 'The {attribute} field must not be greater than {max}.',
        },
        'attributes': {
            'customer_name': 'customer name',
            'phone': 'phone',
            'email': 'email',
            'article_name': 'article name',
            'article_type': 'article type',
            'article_brand': 'article brand',
            'article_model': 'article model',
            'serialnumber': 'serial number',
            'accesories': 'accessories',
            'article_problem': 'article problem',
            'repair_status': 'repair status',
            'repair_details': 'repair details',
            'repair_price': 'repair price',
            'received_at': 'received date',
            'repaired_at': 'repaired date',
            'name': 'name',
            'last_name': 'last name',
            'password': 'password',
            'role': 'role',
            'description': 'description',
            'category_id': 'category',
            'subcategory_id': 'subcategory',
            'date': 'date',
            'location': 'location',
            'detail': 'detail',
        },
    },
    'messages': {
        'not_found': 'The requested resource was not found.',
        'repair_request': {
            'retrieved_list': 'Repair requests retrieved successfully.',
            'created': 'Repair request created successfully.',
            'retrieved': 'Repair request retrieved successfully.',
            'updated': 'Repair request updated successfully.',
            'deleted': 'Repair request deleted successfully.',
        },
        'category': {
            'retrieved_list': 'Categories retrieved successfully.',
            'created': 'Category created successfully.',
            'retrieved': 'Category retrieved successfully.',
            'updated': 'Category updated successfully.',
            'deleted': 'Category deleted successfully.',
        },
        'subcategory': {
            'retrieved_list': 'Subcategories retrieved successfully.',
            'created': 'Subcategory created successfully.',
            'retrieved': 'Subcategory retrieved successfully.',
            'updated': 'Subcategory updated successfully.',
            'deleted': 'Subcategory deleted successfully.',
        },
        'article': {
            'retrieved_list': 'Articles retrieved successfully.',
            'created': 'Article created successfully.',
            'retrieved': 'Article retrieved successfully.',
            'updated': 'Article updated successfully.',
            'deleted': 'Article deleted successfully.',
        },
        'support_request': {
            'retrieved_list': 'Support requests retrieved successfully.',
            'created': 'Support request created successfully.',
            'retrieved': 'Support request retrieved successfully.',
            'updated': 'Support request updated successfully.',
            'deleted': 'Support request deleted successfully.',
        },
        'user': {
            'retrieved_list': 'Users retrieved successfully.',
            'created': 'User created successfully.',
            'retrieved': 'User retrieved successfully.',
            'updated': 'User updated successfully.',
            'deleted': 'User deleted successfully.',
        },
    },
    'auth': {
        'logged_in': 'Logged in successfully.',
        'me': 'Authenticated user retrieved successfully.',
        'invalid_credentials': 'These credentials do not match our records.',
        'unauthenticated': 'Unauthenticated.',
        'token_invalid': 'The provided token is invalid.',
        'token_expired': 'The provided token has expired.',
        'forbidden_role': 'User does not have the right roles.',
    },
    'errors': {
        'server': 'Server error.',
    },
}
