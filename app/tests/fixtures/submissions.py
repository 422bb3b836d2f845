import pytest
from unittest.mock import AsyncMock


@pytest.fixture(scope="function")
def mock_insert_data(mocker):
    """Fixture to patch and provide a mock for supabase_service.insert_data."""
    mock = mocker.patch(
        "app.services.submission_service.supabase_service.insert_data"
    )
    return mock


@pytest.fixture(scope="function")
def mock_send_email(mocker):
    """Fixture to patch and provide a mock for mail_service.send_email."""
    mock = mocker.patch(
        "app.services.submission_service.mail_service.send_email",
        new_callable=AsyncMock,
    )
    mock.return_value = "4ef9a417-02e9-4d39-ad75-9611e0fcc33c"
    return mock


@pytest.fixture(scope="function")
def mock_slack_alert(mocker):
    """Fixture to patch and provide a mock for the Slack operator alert."""
    mock = mocker.patch("app.services.submission_service.send_slack_alert")
    return mock


@pytest.fixture(scope="function")
def strict_validation(mocker):
    """Fixture enforcing client tier rules on the server for one test."""
    from app.services.validation_service import ValidationService

    mocker.patch(
        "app.services.submission_service.submission_service.validator",
        ValidationService(strict=True),
    )
