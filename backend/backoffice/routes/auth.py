from flask import Blueprint, request, abort
from flask_jwt_extended import create_access_token, current_user, jwt_required
from backoffice import get_db
from backoffice.forms.users import LOGIN_RULES
from backoffice.i18n.translator import trans
from backoffice.repositories.users import UserRepository
from backoffice.routes.users import user_json
from backoffice.services.policy import role_names_for
from backoffice.utils.responses import success
from backoffice.utils.validation import validate

auth_bp = Blueprint('auth', __name__)


@auth_bp.post('/login')
def login():
    data = validate(request.get_json(silent=True), LOGIN_RULES)
    session = get_db()
    user = UserRepository(session).find_by_email(data['email'])
    if not user or not user.is_active or not user.verify_password(data['password']):
        abort(401, description=trans('auth.invalid_credentials'))
    claims = {
        'roles': role_names_for(user.id, session),
        'locale': user.locale,
    }
    # JWT identity must be a string (flask-jwt-extended v4 requirement)
    token = create_access_token(identity=str(user.id), additional_claims=claims)
    return success(trans('auth.logged_in'), {'access_token': token, 'token_type': 'bearer'})


@auth_bp.get('/me')
@jwt_required()
def me():
    return success(trans('auth.me'), {'user': user_json(current_user, get_db())})
