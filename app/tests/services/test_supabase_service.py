import pytest
from unittest.mock import MagicMock
from app.core.exceptions import PersistenceError
from app.services.supabase_service import SupabaseException, SupabaseService
from app.tests.constants.submissions import SubmissionTestConstants, stored


class TestSupabaseService:

    def test_insert_data_returns_inserted_rows(self, test_settings):
        service = SupabaseService(test_settings)
        row = stored(
            SubmissionTestConstants.CONTACT_ROW.value,
            SubmissionTestConstants.MOCK_CONTACT_ID.value,
        )
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.return_value.model_dump.return_value = {
            "data": [row],
            "count": None,
        }
        service._client = client

        result = service.insert_data("contacts", SubmissionTestConstants.CONTACT_ROW.value)

        assert result == [row]
        client.table.assert_called_once_with("contacts")
        client.table.return_value.insert.assert_called_once_with(
            SubmissionTestConstants.CONTACT_ROW.value
        )

    def test_insert_data_wraps_client_errors(self, test_settings):
        service = SupabaseService(test_settings)
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.side_effect = RuntimeError(
            "duplicate key value violates unique constraint"
        )
        service._client = client

        with pytest.raises(SupabaseException) as exc:
            service.insert_data("contacts", SubmissionTestConstants.CONTACT_ROW.value)

        assert isinstance(exc.value, PersistenceError)
        assert "duplicate key" not in exc.value.message

    def test_missing_configuration(self, test_settings):
        test_settings.SUPABASE_URL = None
        service = SupabaseService(test_settings)

        with pytest.raises(SupabaseException):
            service.insert_data("contacts", SubmissionTestConstants.CONTACT_ROW.value)

    def test_malformed_configuration(self, test_settings, mocker):
        mocker.patch(
            "app.services.supabase_service.create_client",
            side_effect=ValueError("Invalid URL"),
        )
        test_settings.SUPABASE_URL = "project.supabase.co"
        service = SupabaseService(test_settings)

        with pytest.raises(SupabaseException) as exc:
            service.insert_data("contacts", SubmissionTestConstants.CONTACT_ROW.value)

        assert exc.value.message == "Supabase configuration invalid"
        assert service._client is None

    def test_client_created_once(self, test_settings, mocker):
        mock_create_client = mocker.patch("app.services.supabase_service.create_client")
        service = SupabaseService(test_settings)

        assert service.supabase_client is service.supabase_client
        mock_create_client.assert_called_once_with(
            "https://project.supabase.co", "service-role-key"
        )
