import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.core.config import Settings
from app.tests.fixtures.submissions import *


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient for the intake API."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def test_settings():
    """Fixture providing settings with test credentials, independent of the environment."""
    config = Settings()
    config.SUPABASE_URL = "https://project.supabase.co"
    config.SUPABASE_SERVICE_ROLE_KEY = "service-role-key"
    config.RESEND_API_KEY = "re_test_key"
    config.RESEND_API_URL = "https://api.resend.com"
    config.EMAIL_SENDER = "hello@secureprimedex.com"
    config.EMAIL_SENDER_IS_DEFAULT = False
    config.EMAIL_SENDER_NAME = "SecurePrimedex"
    config.COMPANY_NAME = "SecurePrimedex"
    return config
