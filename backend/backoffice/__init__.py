from flask import Flask
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, scoped_session
from dotenv import load_dotenv
from datetime import timedelta
from typing import Optional, Dict, Any

load_dotenv()

db_engine = None
SessionLocal = None
jwt = JWTManager()


def create_app(config: Optional[Dict[str, Any]] = None):
    global db_engine, SessionLocal
    from .config.settings import load_settings, normalize_api_base
    from .utils.log import configure_logging

    app = Flask(__name__)
    app.config.update(load_settings())

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)
    app.config['API_BASE'] = normalize_api_base(app.config['API_BASE'])
    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(minutes=app.config['JWT_ACCESS_TOKEN_EXPIRES_MINUTES'])
    configure_logging(app)

    # Database
    db_url = app.config['DATABASE_URL']
    if db_url.endswith(':memory:'):
        # Ensure a single shared in-memory SQLite database across all sessions
        db_engine = create_engine(
            db_url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_engine = create_engine(db_url, echo=False, future=True)
    SessionLocal = scoped_session(sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False))

    jwt.init_app(app)
    _register_jwt_callbacks()

    from .routes.auth import auth_bp
    from .routes.repair_requests import rr_bp
    from .routes.categories import cat_bp
    from .routes.subcategories import subcat_bp
    from .routes.articles import art_bp
    from .routes.support_requests import sr_bp
    from .routes.users import users_bp
    # '/api/v1/repair-request' and '/api/v1/repair-request/' both resolve without a redirect
    app.url_map.strict_slashes = False
    base = app.config['API_BASE']
    app.register_blueprint(auth_bp, url_prefix=f'{base}/auth')
    app.register_blueprint(rr_bp, url_prefix=f'{base}/repair-request')
    app.register_blueprint(cat_bp, url_prefix=f'{base}/category')
    app.register_blueprint(subcat_bp, url_prefix=f'{base}/subcategory')
    app.register_blueprint(art_bp, url_prefix=f'{base}/article')
    app.register_blueprint(sr_bp, url_prefix=f'{base}/support-request')
    app.register_blueprint(users_bp, url_prefix=f'{base}/user')

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    @app.teardown_appcontext
    def remove_session(exc=None):  # type: ignore
        if SessionLocal is not None:
            SessionLocal.remove()

    from .utils.responses import error_response
    from .i18n.translator import trans

    # Unified error handlers producing the standard envelope
    @app.errorhandler(HTTPException)
    def handle_http_errors(e):  # type: ignore
        return error_response(e.code, e.description, getattr(e, 'errors', None))

    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        app.logger.exception('Unhandled exception')
        return error_response(500, trans('errors.server'))

    return app


def _register_jwt_callbacks():
    from .utils.responses import error_response
    from .i18n.translator import trans

    @jwt.unauthorized_loader
    def missing_token(reason):  # type: ignore
        return error_response(401, trans('auth.unauthenticated'))

    @jwt.invalid_token_loader
    def invalid_token(reason):  # type: ignore
        return error_response(401, trans('auth.token_invalid'))

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):  # type: ignore
        return error_response(401, trans('auth.token_expired'))

    # every authenticated request must still map to an active, non-deleted user
    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_data):  # type: ignore
        from .repositories.users import UserRepository
        try:
            user_id = int(jwt_data['sub'])
        except (KeyError, TypeError, ValueError):
            return None
        user = UserRepository(get_db()).find(user_id)
        if user is None or not user.is_active:
            return None
        return user

    @jwt.user_lookup_error_loader
    def user_not_found(jwt_header, jwt_data):  # type: ignore
        return error_response(401, trans('auth.unauthenticated'))


def get_db():
    return SessionLocal()
