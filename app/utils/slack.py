from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from app.core.config import settings

import logging

logger = logging.getLogger(__name__)


def send_slack_alert(message: str, title: str = None) -> bool:
    """Post an operator alert to Slack with an optional title.

    Alerts are skipped when no bot token is configured. Delivery failures are
    logged and never raised.

    Returns:
        True if Slack accepted the alert
    """
    if not settings.SLACK_BOT_TOKEN:
        logger.debug(f"Slack alerting disabled, dropping alert: {message}")
        return False

    try:
        client = WebClient(token=settings.SLACK_BOT_TOKEN)
        formatted_message = f"*{title}*\n{message}" if title else message

        client.chat_postMessage(
            channel=settings.SLACK_ALERT_CHANNEL,
            text=formatted_message,
            mrkdwn=True
        )
        logger.info(f"Slack alert sent: {message}")
        return True
    except SlackApiError as e:
        logger.error(f"Slack alert failed: {e.response['error']}")
    except Exception as e:
        logger.error(f"Error sending Slack alert: {str(e)}")
    return False
