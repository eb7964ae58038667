# saathi_agent/graph/intents.py
"""Keyword rules mapping a driver's query to an intent"""

from enum import Enum
from typing import FrozenSet, Tuple


class Intent(str, Enum):
    GREETING = "greeting"
    THANKS = "thanks"
    HELP = "help"
    EARNINGS = "earnings"
    PENALTY = "penalty"
    CHALLAN = "challan"
    DIGILOCKER = "digilocker"
    BUSINESS = "business"
    EMERGENCY = "emergency"
    INSURANCE = "insurance"
    UNKNOWN = "unknown"


# Evaluated top to bottom, first match wins.
# "help" appears under both HELP and EMERGENCY; HELP is earlier, so a query
# containing "help" never reaches EMERGENCY.
INTENT_RULES: Tuple[Tuple[Intent, FrozenSet[str]], ...] = (
    (Intent.GREETING, frozenset({"namaste", "hello", "hi"})),
    (Intent.THANKS, frozenset({"thank", "dhanyavad"})),
    (Intent.HELP, frozenset({"help", "madad"})),
    (Intent.EARNINGS, frozenset({"kamaya", "earn", "earning"})),
    (Intent.PENALTY, frozenset({"penalty", "fine", "dand"})),
    (Intent.CHALLAN, frozenset({"challan", "ticket"})),
    (Intent.DIGILOCKER, frozenset({"digilocker", "document"})),
    (Intent.BUSINESS, frozenset({"business", "vyapar"})),
    (Intent.EMERGENCY, frozenset({"emergency", "sahayata", "help"})),
    (Intent.INSURANCE, frozenset({"insurance", "bima"})),
)


def classify_intent(query: str) -> Intent:
    """Plain substring matching on the lowercased query"""
    q = (query or "").lower()

    for intent, keywords in INTENT_RULES:
        if any(keyword in q for keyword in keywords):
            return intent

    return Intent.UNKNOWN
