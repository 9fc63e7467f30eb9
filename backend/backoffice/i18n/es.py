"""Spanish message catalog."""

CATALOG = {
    'validation': {
        'failed': 'Los datos proporcionados no son válidos.',
        'required': 'El campo {attribute} es obligatorio.',
        'string': 'El campo {attribute} debe ser una cadena de caracteres.',
        'integer': 'El campo {attribute} debe ser un número entero.',
        'numeric': 'El campo {attribute} debe ser un número.',
        'email': 'El campo {attribute} debe ser una dirección de correo válida.',
        'date': 'El campo {attribute} debe ser una fecha válida.',
        'enum': 'El {attribute} seleccionado no es válido. Valores permitidos: {values}.',
        'exists': 'El {attribute} seleccionado no es válido.',
        'unique': 'El campo {attribute} ya ha sido registrado.',
        'min': {
            'string': 'El campo {attribute} debe contener al menos {min} caracteres.',
            'numeric': 'El campo {attribute} debe ser al menos {min}.',
        },
        'max': {
            'string': 'El campo {attribute} no debe contener más de {max} caracteres.',
            'numeric': 'El campo {attribute} no debe ser mayor que {max}.',
        },
        'attributes': {
            'customer_name': 'nombre del cliente',
            'phone': 'teléfono',
            'email': 'correo electrónico',
            'article_name': 'nombre del artículo',
            'article_type': 'tipo de artículo',
            'article_brand': 'marca del artículo',
            'article_model': 'modelo del artículo',
            'serialnumber': 'número de serie',
            'accesories': 'accesorios',
            'article_problem': 'problema del artículo',
            'repair_status': 'estado de la reparación',
            'repair_details': 'detalles de la reparación',
            'repair_price': 'precio de la reparación',
            'received_at': 'fecha de recepción',
            'repaired_at': 'fecha de reparación',
            'name': 'nombre',
            'last_name': 'apellido',
            'password': 'contraseña',
            'role': 'rol',
            'description': 'descripción',
            'category_id': 'categoría',
            'subcategory_id': 'subcategoría',
            'date': 'fecha',
            'location': 'ubicación',
            'detail': 'detalle',
        },
    },
    'messages': {
        'not_found': 'El recurso solicitado no existe.',
        'repair_request': {
            'retrieved_list': 'Solicitudes de reparación obtenidas correctamente.',
            'created': 'Solicitud de reparación creada correctamente.',
            'retrieved': 'Solicitud de reparación obtenida correctamente.',
            'updated': 'Solicitud de reparación actualizada correctamente.',
            'deleted': 'Solicitud de reparación eliminada correctamente.',
        },
        'category': {
            'retrieved_list': 'Categorías obtenidas correctamente.',
            'created': 'Categoría creada correctamente.',
            'retrieved': 'Categoría obtenida correctamente.',
            'updated': 'Categoría actualizada correctamente.',
            'deleted': 'Categoría eliminada correctamente.',
        },
        'subcategory': {
            'retrieved_list': 'Subcategorías obtenidas correctamente.',
            'created': 'Subcategoría creada correctamente.',
            'retrieved': 'Subcategoría obtenida correctamente.',
            'updated': 'Subcategoría actualizada correctamente.',
            'deleted': 'Subcategoría eliminada correctamente.',
        },
        'article': {
            'retrieved_list': 'Artículos obtenidos correctamente.',
            'created': 'Artículo creado correctamente.',
            'retrieved': 'Artículo obtenido correctamente.',
            'updated': 'Artículo actualizado correctamente.',
            'deleted': 'Artículo eliminado correctamente.',
        },
        'support_request': {
            'retrieved_list': 'Solicitudes de soporte obtenidas correctamente.',
            'created': 'Solicitud de soporte creada correctamente.',
            'retrieved': 'Solicitud de soporte obtenida correctamente.',
            'updated': 'Solicitud de soporte actualizada correctamente.',
            'deleted': 'Solicitud de soporte eliminada correctamente.',
        },
        'user': {
            'retrieved_list': 'Usuarios obtenidos correctamente.',
            'created': 'Usuario creado correctamente.',
            'retrieved': 'Usuario obtenido correctamente.',
            'updated': 'Usuario actualizado correctamente.',
            'deleted': 'Usuario eliminado correctamente.',
        },
    },
    'auth': {
        'logged_in': 'Sesión iniciada correctamente.',
        'me': 'Usuario autenticado obtenido correctamente.',
        'invalid_credentials': 'Estas credenciales no coinciden con nuestros registros.',
        'unauthenticated': 'No autenticado.',
        'token_invalid': 'El token proporcionado no es válido.',
        'token_expired': 'El token proporcionado ha expirado.',
        'forbidden_role': 'El usuario no tiene los roles adecuados.',
    },
    # errors.* falls back to en
}
