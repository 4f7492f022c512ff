"""
Optional Slack notifications for script outcomes
"""

import logging
from typing import Dict, Optional
import requests

logger = logging.getLogger(__name__)


def send_slack_message(webhook: Optional[str], message: str, fields: Optional[Dict[str, str]] = None) -> bool:
    """
    Post a message to a Slack webhook

    Failures are logged and reported through the return value; they never
    propagate to the caller.
    """
    if not webhook:
        return False

    payload = {"text": message}
    if fields:
        payload["attachments"] = [
            {
                "fields": [
                    {"title": title, "value": value, "short": True}
                    for title, value in fields.items()
                ]
            }
        ]

    try:
        response = requests.post(webhook, json=payload, timeout=10)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to send Slack notification: {e}")
        return False
    return True
