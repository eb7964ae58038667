# services/redis_service.py
"""Redis pub/sub publisher for emergency alerts"""

import json
import logging
import os
from typing import Any, Dict, Optional

import redis

import config
from services.alert_service import AlertSink, LoggingAlertSink, build_alert_payload

logger = logging.getLogger(__name__)


class RedisConfig:
    """Redis configuration handler"""

    def __init__(self):
        self.redis_host = os.environ.get("REDIS_HOST", "localhost")
        self.redis_port = int(os.environ.get("REDIS_PORT", 6379))
        self.redis_password = os.environ.get("REDIS_PASSWORD", None)
        self.redis_db = int(os.environ.get("REDIS_DB", 0))
        self.redis_ssl = os.environ.get("REDIS_SSL", "false").lower() == "true"
        self.max_pool_connections = int(os.environ.get("REDIS_MAX_CONNECTIONS", 10))

    def get_connection_params(self) -> Dict[str, Any]:
        """Get Redis connection parameters"""
        params = {
            "host": self.redis_host,
            "port": self.redis_port,
            "db": self.redis_db,
            "decode_responses": True,
            "socket_connect_timeout": 5,
            "socket_timeout": 5,
            "retry_on_timeout": True,
            "health_check_interval": 30,
        }

        if self.redis_password:
            params["password"] = self.redis_password

        if self.redis_ssl:
            params["connection_class"] = redis.SSLConnection
            params["ssl_cert_reqs"] = "required"

        return params


class RedisAlertSink(AlertSink):
    """Publishes alerts on a Redis channel, logging them when Redis is down"""

    name = "redis"

    def __init__(
        self,
        channel: Optional[str] = None,
        redis_config: Optional[RedisConfig] = None,
        client: Optional[redis.Redis] = None,
    ):
        self.channel = channel or config.ALERT_CHANNEL
        self.config = redis_config or RedisConfig()
        self.pool = None
        self.redis_client = client
        self.fallback = LoggingAlertSink()
        self._initialized = client is not None

    def initialize(self) -> None:
        """Initialize Redis connection pool"""
        if self._initialized:
            return

        try:
            self.pool = redis.ConnectionPool(
                **self.config.get_connection_params(),
                max_connections=self.config.max_pool_connections
            )
            self.redis_client = redis.Redis(connection_pool=self.pool)

            # Test connection
            self.redis_client.ping()
            logger.info(f"✅ Redis connected at {self.config.redis_host}:{self.config.redis_port}")

        except redis.RedisError as e:
            logger.error(f"❌ Failed to connect to Redis: {e}")
            logger.warning("⚠️ Emergency alerts will only be logged")
            self.redis_client = None

        self._initialized = True

    def close(self) -> None:
        """Close Redis connections"""
        if self.redis_client:
            self.redis_client.close()
            if self.pool:
                self.pool.disconnect()
            logger.info("Redis connections closed")

    def notify(self, driver_name, contact_name=None, contact_phone=None):
        if not self._initialized:
            self.initialize()

        if not self.redis_client:
            self.fallback.notify(driver_name, contact_name, contact_phone)
            return

        payload = build_alert_payload(driver_name, contact_name, contact_phone)
        try:
            receivers = self.redis_client.publish(self.channel, json.dumps(payload))
            logger.info(f"📣 Emergency alert for {driver_name} published to {receivers} subscriber(s)")
        except redis.RedisError as e:
            logger.error(f"Failed to publish emergency alert for {driver_name}: {e}")
            self.fallback.notify(driver_name, contact_name, contact_phone)

    def health_check(self) -> Dict[str, Any]:
        """Check Redis connection health"""
        if not self.redis_client:
            return {
                "sink": self.name,
                "status": "disconnected",
                "redis_available": False
            }

        try:
            self.redis_client.ping()
            return {
                "sink": self.name,
                "status": "healthy",
                "redis_available": True,
                "channel": self.channel,
            }

        except redis.RedisError as e:
            return {
                "sink": self.name,
                "status": "error",
                "redis_available": False,
                "error": str(e)
            }
