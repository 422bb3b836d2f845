"""Configuration settings for the intake API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_EMAIL_SENDER = "onboarding@resend.dev"


class Settings:
    """Application settings.

    Attributes:
        API_V1_STR: API version path prefix
        PROJECT_NAME: Name of the project
        COMPANY_NAME: Agency name used in outgoing emails
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        SUPABASE_URL: Supabase project URL
        SUPABASE_SERVICE_ROLE_KEY: Privileged key used for inserts
        RESEND_API_KEY: API key for the Resend email API
        EMAIL_SENDER: From address, falls back to the Resend default sender
        STRICT_FORM_VALIDATION: Enforce length and terms rules on the server
    """
    def __init__(self):
        self.API_V1_STR = "/api/v1"
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "SecurePrimedex Intake API")
        self.COMPANY_NAME = os.getenv("COMPANY_NAME", "SecurePrimedex")
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Supabase Settings
        self.SUPABASE_URL = os.getenv("SUPABASE_URL")
        self.SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

        # Email Settings
        self.RESEND_API_KEY = os.getenv("RESEND_API_KEY")
        self.RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com")
        self.EMAIL_SENDER = os.getenv("FROM_MY_DOMAIN_EMAIL") or DEFAULT_EMAIL_SENDER
        self.EMAIL_SENDER_IS_DEFAULT = self.EMAIL_SENDER == DEFAULT_EMAIL_SENDER
        self.EMAIL_SENDER_NAME = os.getenv("EMAIL_SENDER_NAME", self.COMPANY_NAME)
        self.EMAIL_TIMEOUT_SECONDS = float(os.getenv("EMAIL_TIMEOUT_SECONDS", 10))

        # Form Settings
        self.STRICT_FORM_VALIDATION = (
            os.getenv("STRICT_FORM_VALIDATION", "False").lower() == "true"
        )

        # CORS headers returned on every response, including preflight
        self.CORS_HEADERS = {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
        }

        # Slack Settings
        self.SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
        self.SLACK_ALERT_CHANNEL = os.getenv("SLACK_ALERT_CHANNEL", "#secureprimedex-alerts")


settings = Settings()
