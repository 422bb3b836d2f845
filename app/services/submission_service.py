"""Submission pipeline shared by every lead-capture form.

One request runs parse, validate, persist, notify and respond. The
confirmation email is scheduled as a background task after the row is
stored, so its outcome never changes the response.
"""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import BackgroundTasks
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings, settings
from app.core.exceptions import NotificationError, PersistenceError, UnexpectedError, ValidationError
from app.models.submission import SubmissionResponse
from app.services.base_database_service import BaseDatabaseService
from app.services.form_definitions import FormDefinition
from app.services.mail_service import MailService, mail_service
from app.services.supabase_service import supabase_service
from app.services.validation_service import ValidationService
from app.utils.slack import send_slack_alert

logger = logging.getLogger(__name__)


class SubmissionService:
    """Validated insert then notify, parameterized by a form definition."""

    def __init__(
        self,
        config: Settings,
        database: BaseDatabaseService,
        mailer: MailService,
        validator: Optional[ValidationService] = None,
    ):
        self.config = config
        self.database = database
        self.mailer = mailer
        self.validator = validator or ValidationService(strict=config.STRICT_FORM_VALIDATION)

    @staticmethod
    def parse_payload(body: bytes) -> Dict[str, Any]:
        """Decode a request body into a flat JSON object.

        Raises:
            UnexpectedError: If the body is not valid JSON or not an object
        """
        try:
            payload = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            logger.error(f"Could not decode submission body: {str(e)}")
            raise UnexpectedError() from e
        if not isinstance(payload, dict):
            logger.error(f"Submission body is a {type(payload).__name__}, expected an object")
            raise UnexpectedError()
        return payload

    async def submit(
        self,
        form: FormDefinition,
        payload: Dict[str, Any],
        background_tasks: BackgroundTasks,
    ) -> SubmissionResponse:
        """
        Run one submission through the pipeline.

        Args:
            form: Definition of the form family being submitted
            payload: Decoded request body
            background_tasks: Task list executed after the response is sent

        Returns:
            SubmissionResponse echoing the inserted row

        Raises:
            ValidationError: If a required field is missing or a rule fails
            PersistenceError: If the store insert fails
        """
        result = self.validator.validate(form.schema, payload)
        if not result.accepted:
            raise ValidationError(result.message, errors=result.errors)

        row = form.build_row(result.record).model_dump()

        try:
            data = await run_in_threadpool(self.database.insert_data, form.table, row)
        except PersistenceError as e:
            logger.error(f"Error inserting {form.name} data: {str(e)}")
            # Background tasks are dropped with an error response, so alert inline.
            await run_in_threadpool(
                send_slack_alert,
                f"Failed to store a {form.name} submission in `{form.table}`: {str(e)}",
                title="⚠️ Submission Storage Error",
            )
            raise PersistenceError(form.failure_message) from e

        row_id = data[0].get("id") if data else None
        logger.info(f"Stored {form.name} submission in {form.table} with id {row_id}")
        background_tasks.add_task(self.notify_submitter, form, row)

        return SubmissionResponse(
            success=True,
            message=form.success_message_for(row),
            data=data,
        )

    async def notify_submitter(self, form: FormDefinition, row: Dict[str, Any]) -> Optional[str]:
        """Send the confirmation email. Failures are logged and never raised.

        Returns:
            The provider message id, or None if the email was not sent
        """
        recipient = form.recipient(row)
        try:
            message_id = await self.mailer.send_email(
                recipient=recipient,
                subject=form.subject_for(row, self.config.COMPANY_NAME),
                template_name=form.template_name,
                context=form.email_context(row),
            )
        except NotificationError as e:
            logger.error(f"Error sending thank you email for {form.name}: {str(e)}")
            return None
        except Exception:
            logger.exception(f"Unexpected error sending thank you email for {form.name}")
            return None
        return message_id


submission_service = SubmissionService(settings, supabase_service, mail_service)
