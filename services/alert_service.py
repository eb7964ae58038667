# services/alert_service.py
"""Emergency notification sinks"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

import config

logger = logging.getLogger(__name__)


def build_alert_payload(
    driver_name: str,
    contact_name: Optional[str],
    contact_phone: Optional[str],
) -> Dict[str, Any]:
    """Wire format shared by all sinks"""
    return {
        "type": "emergency",
        "driverName": driver_name,
        "contactName": contact_name,
        "contactPhone": contact_phone,
        "timestamp": datetime.now().isoformat(),
    }


class AlertSink:
    """
    Fire-and-forget channel for emergency alerts.

    notify() must never raise; sinks log their own failures.
    """

    name = "base"

    def initialize(self) -> None:
        pass

    def close(self) -> None:
        pass

    def notify(
        self,
        driver_name: str,
        contact_name: Optional[str] = None,
        contact_phone: Optional[str] = None,
    ) -> None:
        raise NotImplementedError

    def health_check(self) -> Dict[str, Any]:
        return {"sink": self.name, "status": "healthy"}


class LoggingAlertSink(AlertSink):
    """Writes alerts to the application log"""

    name = "log"

    def notify(self, driver_name, contact_name=None, contact_phone=None):
        logger.warning(f"🚨 EMERGENCY ALERT FOR DRIVER: {driver_name}")
        if contact_name or contact_phone:
            logger.warning(f"📞 CONTACTING: {contact_name} at {contact_phone}")
        else:
            logger.warning(f"No emergency contact on file for {driver_name}")


def build_alert_sink(kind: Optional[str] = None) -> AlertSink:
    """Create the sink selected by ALERT_SINK"""
    kind = (kind or config.ALERT_SINK).lower()

    if kind == "redis":
        from services.redis_service import RedisAlertSink
        return RedisAlertSink()

    if kind == "webhook":
        from services.api_client import WebhookAlertSink
        if not config.ALERT_WEBHOOK_URL:
            logger.warning("ALERT_WEBHOOK_URL not set - falling back to log sink")
            return LoggingAlertSink()
        return WebhookAlertSink(config.ALERT_WEBHOOK_URL)

    if kind != "log":
        logger.warning(f"Unknown alert sink '{kind}' - using log sink")
    return LoggingAlertSink()
