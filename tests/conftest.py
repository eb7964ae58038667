from datetime import date

import pytest

from saathi_agent.engine import QueryEngine
from services.alert_service import AlertSink
from services.driver_store import DriverStore, seed_sample_drivers
from services.knowledge_base import KnowledgeBase

TODAY = date(2026, 10, 19)


class RecordingAlertSink(AlertSink):
    name = "recording"

    def __init__(self):
        self.calls = []

    def notify(self, driver_name, contact_name=None, contact_phone=None):
        self.calls.append((driver_name, contact_name, contact_phone))


@pytest.fixture
def store():
    store = DriverStore()
    seed_sample_drivers(store, TODAY)
    return store


@pytest.fixture
def alert_sink():
    return RecordingAlertSink()


@pytest.fixture
def knowledge_base():
    return KnowledgeBase()


@pytest.fixture
def engine(store, knowledge_base, alert_sink):
    return QueryEngine(store, knowledge_base, alert_sink, clock=lambda: TODAY)
