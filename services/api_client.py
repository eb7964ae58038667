# services/api_client.py
"""HTTP webhook client for emergency alerts"""

import requests
from typing import Any, Dict, Optional
import logging

import config
from services.alert_service import AlertSink, LoggingAlertSink, build_alert_payload

logger = logging.getLogger(__name__)


def post_emergency_alert(
    url: str,
    payload: Dict[str, Any],
    timeout: Optional[float] = None,
    max_retries: int = 2
) -> bool:
    """
    Deliver an emergency alert to an external webhook.

    Args:
        url: Webhook endpoint
        payload: Alert body, see build_alert_payload
        timeout: Per-attempt timeout in seconds
        max_retries: Number of attempts before giving up

    Returns:
        True if any attempt was accepted
    """
    timeout = timeout or config.ALERT_WEBHOOK_TIMEOUT

    for attempt in range(max_retries):
        try:
            response = requests.post(url, json=payload, timeout=timeout)

            if response.status_code in [200, 201, 202, 204]:
                logger.info(f"Emergency alert delivered for {payload.get('driverName')}")
                return True

            logger.error(f"Alert webhook error (attempt {attempt + 1}): {response.status_code}")

        except requests.exceptions.Timeout:
            logger.error(f"Alert webhook timeout (attempt {attempt + 1})")

        except requests.exceptions.RequestException as e:
            logger.error(f"Alert webhook request failed (attempt {attempt + 1}): {e}")

    logger.error("Emergency alert delivery failed after all attempts")
    return False


class WebhookAlertSink(AlertSink):
    """POSTs alerts to an HTTP endpoint, logging them if delivery fails"""

    name = "webhook"

    def __init__(self, url: str, timeout: Optional[float] = None, max_retries: int = 2):
        self.url = url
        self.timeout = timeout
        self.max_retries = max_retries
        self.fallback = LoggingAlertSink()

    def notify(self, driver_name, contact_name=None, contact_phone=None):
        payload = build_alert_payload(driver_name, contact_name, contact_phone)
        if not post_emergency_alert(self.url, payload, self.timeout, self.max_retries):
            self.fallback.notify(driver_name, contact_name, contact_phone)

    def health_check(self) -> Dict[str, Any]:
        return {"sink": self.name, "status": "configured", "url": self.url}
