# saathi_agent/engine.py
"""Query engine: the single entry point into the assistant"""

import logging
from datetime import date
from typing import Callable, Optional

import config
from models.api_models import AssistantRequest, AssistantResponse, ResponseKind
from models.driver_models import Driver
from saathi_agent.graph import responses
from saathi_agent.graph.builder import create_graph
from services.alert_service import AlertSink, LoggingAlertSink
from services.driver_store import DriverStore
from services.knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)


class QueryEngine:
    """
    Answers driver queries against an injected store.

    process_query() never raises: unknown drivers, unmatched queries and
    missing ledger rows all produce a normal reply, and anything unexpected is
    logged and turned into an apology.
    """

    def __init__(
        self,
        store: DriverStore,
        knowledge_base: Optional[KnowledgeBase] = None,
        alert_sink: Optional[AlertSink] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.store = store
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.alert_sink = alert_sink or LoggingAlertSink()
        self.clock = clock
        self.graph = create_graph(self.store, self.knowledge_base, self.alert_sink)

    def process_query(self, request: AssistantRequest) -> AssistantResponse:
        initial_state = {
            "driver_id": request.driver_id or "",
            "query": request.query or "",
            "language": request.language or config.DEFAULT_LANGUAGE,
            "today": self.clock(),
        }

        try:
            result = self.graph.invoke(initial_state)
        except Exception as e:
            logger.error(f"Error processing query for {request.driver_id}: {e}", exc_info=True)
            return AssistantResponse(response=responses.PROCESSING_ERROR, type=ResponseKind.TEXT)

        response = result.get("response") if isinstance(result, dict) else None
        if response is None:
            logger.warning(f"Graph returned no response for {request.driver_id}")
            return AssistantResponse(response=responses.PROCESSING_ERROR, type=ResponseKind.TEXT)

        return response

    def get_driver(self, driver_id: str) -> Optional[Driver]:
        """Driver profile for display, or None"""
        return self.store.get(driver_id)
