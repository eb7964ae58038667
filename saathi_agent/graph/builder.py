# saathi_agent/graph/builder.py
"""LangGraph workflow: resolve driver -> classify -> intent handler"""

from datetime import date
from typing import TypedDict, Optional

from langgraph.graph import StateGraph, END

from models.api_models import AssistantResponse
from models.driver_models import Driver
from saathi_agent.graph import nodes
from saathi_agent.graph.intents import Intent
from services.alert_service import AlertSink
from services.driver_store import DriverStore
from services.knowledge_base import KnowledgeBase


class GraphState(TypedDict, total=False):
    """State of a single query run"""
    driver_id: str
    query: str
    language: str
    today: date  # fixed once per run
    driver: Optional[Driver]
    intent: Intent
    response: Optional[AssistantResponse]


def route_after_resolve(state: GraphState) -> str:
    """Unknown drivers skip classification entirely"""
    if state.get("driver") is None:
        return END
    return "classify"


def route_by_intent(state: GraphState) -> str:
    return state.get("intent", Intent.UNKNOWN).value


def create_graph(store: DriverStore, knowledge_base: KnowledgeBase, alert_sink: AlertSink):
    """Create the assistant workflow bound to its collaborators"""
    workflow = StateGraph(GraphState)

    workflow.add_node("resolve_driver", nodes.make_resolve_node(store))
    workflow.add_node("classify", nodes.classify_node)

    # One node per intent, named after the intent
    for intent in Intent:
        workflow.add_node(intent.value, nodes.make_handler_node(intent, knowledge_base, alert_sink))
        workflow.add_edge(intent.value, END)

    workflow.set_entry_point("resolve_driver")

    workflow.add_conditional_edges(
        "resolve_driver",
        route_after_resolve,
        {"classify": "classify", END: END}
    )

    workflow.add_conditional_edges(
        "classify",
        route_by_intent,
        {intent.value: intent.value for intent in Intent}
    )

    return workflow.compile()

