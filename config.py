# config.py
"""Application configuration read from the environment"""

import os


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


# Server
PORT = int(os.environ.get("PORT", 8080))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Assistant behaviour
DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "hi")
VOICE_RESPONSES_ENABLED = _env_flag("VOICE_RESPONSES_ENABLED", "true")
QUERY_TIMEOUT = float(os.environ.get("QUERY_TIMEOUT", 10))
EMERGENCY_RESPONSE_TIMEOUT = float(os.environ.get("EMERGENCY_RESPONSE_TIMEOUT", 30))
SEED_SAMPLE_DATA = _env_flag("SEED_SAMPLE_DATA", "true")

# Emergency alerts: "log", "redis" or "webhook"
ALERT_SINK = os.environ.get("ALERT_SINK", "log").lower()
ALERT_CHANNEL = os.environ.get("ALERT_CHANNEL", "porter_saathi:emergency_alerts")
ALERT_WEBHOOK_URL = os.environ.get("ALERT_WEBHOOK_URL", "")
ALERT_WEBHOOK_TIMEOUT = float(os.environ.get("ALERT_WEBHOOK_TIMEOUT", 10))
