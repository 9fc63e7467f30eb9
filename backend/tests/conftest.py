import os, sys, pytest
# Ensure backend directory is on path so 'backoffice' and 'tests' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
import backoffice
from backoffice import create_app, get_db
from backoffice.models.authz import Base
# Import all model modules to ensure tables are registered before create_all
import backoffice.models.repair_request  # noqa: F401
import backoffice.models.catalog  # noqa: F401
import backoffice.models.support_request  # noqa: F401
from backoffice.services.seeding import seed_database

TEST_CONFIG = {
    'DATABASE_URL': 'sqlite+pysqlite:///:memory:',
    'JWT_SECRET_KEY': 'test-secret-key-with-at-least-32-bytes!',
    'INITIAL_ADMIN_EMAIL': 'admin@example.com',
    'INITIAL_ADMIN_PASSWORD': 'password',
    'DEFAULT_LOCALE': 'en',
    'SUPPORTED_LOCALES': ['en', 'es'],
    'LOG_LEVEL': 'WARNING',
}


@pytest.fixture(scope='session')
def app_instance():
    app = create_app(TEST_CONFIG)
    yield app


@pytest.fixture(autouse=True)
def app_context(app_instance):
    """Fresh schema + seed (roles and the admin user) before every test."""
    with app_instance.app_context():
        backoffice.SessionLocal.remove()
        engine = get_db().get_bind()
        Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
        seed_database(get_db(), TEST_CONFIG['INITIAL_ADMIN_EMAIL'], TEST_CONFIG['INITIAL_ADMIN_PASSWORD'])
        yield app_instance
        backoffice.SessionLocal.remove()


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
