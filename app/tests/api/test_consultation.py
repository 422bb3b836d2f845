import pytest
from app.core.config import settings
from app.tests.constants.submissions import SubmissionTestConstants, stored

CONSULTATION_URL = f"{settings.API_V1_STR}/submit-consultation"


@pytest.mark.asyncio
class TestConsultationEndpoint:
    async def test_submit_consultation_success(self, client, mock_insert_data, mock_send_email):
        stored_row = stored(
            SubmissionTestConstants.CONSULTATION_ROW.value,
            SubmissionTestConstants.MOCK_CONSULTATION_ID.value,
        )
        mock_insert_data.return_value = [stored_row]

        response = client.post(
            CONSULTATION_URL, json=SubmissionTestConstants.CONSULTATION_PAYLOAD.value
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Consultation request submitted successfully",
            "data": [stored_row],
        }
        mock_insert_data.assert_called_once_with(
            "consultations", SubmissionTestConstants.CONSULTATION_ROW.value
        )

        kwargs = mock_send_email.call_args.kwargs
        assert kwargs["subject"] == "Thank you for requesting a consultation with SecurePrimedex"
        assert kwargs["context"]["is_consultation"] is True
        assert kwargs["context"]["details"] == {
            "Service": "seo",
            "Consultation Type": "video-call",
            "Preferred Date": "2025-06-10",
            "Preferred Time": "14:00",
            "Company": "Analytical Engines Ltd",
        }

    async def test_submit_consultation_invalid_email(self, client, mock_insert_data, mock_send_email):
        payload = {
            "full_name": "A",
            "email": "bad-email",
            "phone": "555",
            "service": "seo",
            "consultation_type": "video-call",
        }

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid email format"
        assert response.json()["errors"] == {"email": "Invalid email format"}
        mock_insert_data.assert_not_called()
        mock_send_email.assert_not_called()

    async def test_missing_fields_take_precedence_over_email(self, client, mock_insert_data):
        payload = {"full_name": "A", "email": "bad-email", "service": "seo"}

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: phone, consultation_type"
        assert set(response.json()["errors"]) == {"email", "phone", "consultation_type"}
        mock_insert_data.assert_not_called()

    async def test_consultation_type_required_for_consultations(self, client, mock_insert_data):
        payload = {**SubmissionTestConstants.CONSULTATION_PAYLOAD.value}
        del payload["consultation_type"]

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: consultation_type"
        mock_insert_data.assert_not_called()

    async def test_inquiry_through_consultation_endpoint(self, client, mock_insert_data, mock_send_email):
        """An inquiry needs a description instead of a consultation type."""
        mock_insert_data.return_value = [{"id": 12}]
        payload = {
            **SubmissionTestConstants.CONSULTATION_PAYLOAD.value,
            "form_type": "inquiry",
            "consultation_type": "",
            "project_description": "Rebuild our online store",
        }

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 200
        assert response.json()["message"] == "Project inquiry submitted successfully"

        table, row = mock_insert_data.call_args.args
        assert table == "consultations"
        assert row["form_type"] == "inquiry"
        assert row["consultation_type"] == "project_inquiry"
        assert row["project_description"] == "Rebuild our online store"

        kwargs = mock_send_email.call_args.kwargs
        assert kwargs["subject"] == "Thank you for your project inquiry with SecurePrimedex"
        assert kwargs["context"]["is_consultation"] is False
        assert "Consultation Type" not in kwargs["context"]["details"]

    async def test_inquiry_requires_project_description(self, client, mock_insert_data):
        payload = {
            **SubmissionTestConstants.CONSULTATION_PAYLOAD.value,
            "form_type": "inquiry",
        }

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: project_description"
        mock_insert_data.assert_not_called()

    async def test_unknown_form_type_rejected(self, client, mock_insert_data):
        payload = {**SubmissionTestConstants.CONSULTATION_PAYLOAD.value, "form_type": "newsletter"}

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Form type must be one of: consultation, inquiry"
        mock_insert_data.assert_not_called()

    async def test_store_failure(self, client, mock_insert_data, mock_send_email, mock_slack_alert):
        from app.services.supabase_service import SupabaseException

        mock_insert_data.side_effect = SupabaseException()

        response = client.post(
            CONSULTATION_URL, json=SubmissionTestConstants.CONSULTATION_PAYLOAD.value
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to submit consultation request"}
        mock_send_email.assert_not_called()

    async def test_preflight(self, client, mock_insert_data):
        response = client.options(CONSULTATION_URL)

        assert response.status_code == 200
        assert response.content == b""
        mock_insert_data.assert_not_called()

    async def test_strict_mode_requires_schedule(
        self, client, mock_insert_data, mock_send_email, strict_validation
    ):
        payload = {
            **SubmissionTestConstants.CONSULTATION_PAYLOAD.value,
            "company": " ",
            "preferred_date": "",
            "preferred_time": "",
        }

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Missing required fields: company, preferred_date, preferred_time"
        )
        mock_insert_data.assert_not_called()

    async def test_strict_mode_inquiry_requires_budget_and_timeline(
        self, client, mock_insert_data, mock_send_email, strict_validation
    ):
        payload = {
            **SubmissionTestConstants.CONSULTATION_PAYLOAD.value,
            "form_type": "inquiry",
            "preferred_date": "",
            "preferred_time": "",
            "project_description": "Rebuild our online store",
        }

        response = client.post(CONSULTATION_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Missing required fields: project_budget, project_timeline"
        )
        mock_insert_data.assert_not_called()
