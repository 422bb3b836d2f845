"""
MailService Module

This module provides transactional email sending through the Resend HTTP API,
with HTML bodies rendered from Jinja2 templates.
"""

import os
import datetime
import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape
from app.core.config import Settings, settings
from app.core.exceptions import NotificationError
from typing import Dict, Any, List

import logging

logger = logging.getLogger(__name__)

# Set up Jinja2 environment with proper auto-escaping and template inheritance
template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(['html', 'xml']),
    enable_async=True
)


class MailService:
    """Mail service with template rendering capabilities."""

    def __init__(self, config: Settings = settings):
        self.config = config
        if config.EMAIL_SENDER_IS_DEFAULT:
            logger.info(
                f"FROM_MY_DOMAIN_EMAIL not found, using Resend's default email: {config.EMAIL_SENDER}"
            )

    @property
    def sender(self) -> str:
        """Sender in the 'Sender Name <email@example.com>' form."""
        if not self.config.EMAIL_SENDER_NAME:
            return self.config.EMAIL_SENDER
        return f"{self.config.EMAIL_SENDER_NAME} <{self.config.EMAIL_SENDER}>"

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Asynchronously render a Jinja template with the given context.

        Args:
            template_name: The name of the template file to render
            context: Dictionary of variables to pass to the template

        Returns:
            The rendered template as a string

        Raises:
            NotificationError: If the template cannot be loaded or rendered
        """
        try:
            template = jinja_env.get_template(template_name)
            return await template.render_async(**context)
        except Exception as e:
            logger.error(f"Error rendering template {template_name}: {str(e)}")
            raise NotificationError(f"Error rendering template: {str(e)}") from e

    async def send_email(
        self,
        recipient: str,
        subject: str,
        template_name: str,
        context: Dict[str, Any],
    ) -> str:
        """
        Send an email using a Jinja template.

        Args:
            recipient: Email address of the recipient
            subject: Email subject line
            template_name: Name of the HTML template to use
            context: Dictionary of variables to pass to the template

        Returns:
            The provider message id

        Raises:
            NotificationError: If rendering or delivery fails
        """
        full_context = {
            **context,
            "company_name": self.config.COMPANY_NAME,
            "current_year": datetime.datetime.now().year,
        }
        html_content = await self.render_template(template_name, full_context)

        message_id = await self.send_mail(
            recipients=[recipient],
            title=subject,
            body=html_content,
        )
        logger.info(f"Email sent successfully: {message_id}")
        return message_id

    async def send_mail(self, recipients: List[str], title: str, body: str) -> str:
        """
        Sends an HTML email through the Resend API.

        Args:
            recipients (list): List of recipient email addresses.
            title (str): Subject line of the email.
            body (str): HTML body of the email.

        Returns:
            str: The Resend message id.

        Raises:
            NotificationError: If the API key is missing, the request fails,
                or Resend rejects the message.
        """
        if not self.config.RESEND_API_KEY:
            raise NotificationError("RESEND_API_KEY is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.config.EMAIL_TIMEOUT_SECONDS) as client:
                response = await client.post(
                    f"{self.config.RESEND_API_URL}/emails",
                    headers={
                        "Authorization": f"Bearer {self.config.RESEND_API_KEY}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "from": self.sender,
                        "to": recipients,
                        "subject": title,
                        "html": body,
                    },
                )
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach Resend with error: {str(e)}")
            raise NotificationError(f"Failed to reach email provider: {str(e)}") from e

        if response.status_code not in (200, 201):
            logger.error(f"Resend rejected email: {response.status_code} - {response.text}")
            raise NotificationError(f"Email provider returned {response.status_code}")

        return response.json().get("id", "undefined")


mail_service = MailService()
