# saathi_agent/graph/nodes.py
"""Graph nodes: driver lookup, intent classification and one handler per intent"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

from models.api_models import AssistantResponse, ResponseKind
from models.driver_models import Driver
from saathi_agent.graph import responses
from saathi_agent.graph.intents import Intent, classify_intent
from services.alert_service import AlertSink
from services.driver_store import DriverStore
from services.knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)


@dataclass
class HandlerContext:
    """Everything a handler may read for one query"""
    driver: Driver
    today: date
    knowledge_base: KnowledgeBase
    alert_sink: AlertSink


def _text(message: str, suggestions: Optional[Dict[str, str]] = None) -> AssistantResponse:
    return AssistantResponse(
        response=message,
        type=ResponseKind.TEXT,
        suggestions=dict(suggestions or {}),
    )


def _guide_suggestions(steps: List[str]) -> Dict[str, str]:
    return {
        f"step_{number}": responses.STEP.format(number=number, text=text)
        for number, text in enumerate(steps, start=1)
    }


# ============== HANDLERS ==============
def handle_greeting(ctx: HandlerContext) -> AssistantResponse:
    return _text(ctx.knowledge_base.phrase("greeting"))


def handle_thanks(ctx: HandlerContext) -> AssistantResponse:
    return _text(ctx.knowledge_base.phrase("thanks"))


def handle_help(ctx: HandlerContext) -> AssistantResponse:
    return _text(ctx.knowledge_base.phrase("help"), responses.HELP_SUGGESTIONS)


def handle_earnings(ctx: HandlerContext) -> AssistantResponse:
    earnings = ctx.driver.earnings_on(ctx.today)

    if earnings is None:
        message = responses.NO_EARNINGS_TODAY
    else:
        message = responses.EARNINGS_TODAY.format(
            trips=earnings.completed_trips,
            total=earnings.total_earnings,
            expenses=earnings.expenses,
            net=earnings.net_earnings,
        )

    return _text(message, responses.EARNINGS_SUGGESTIONS)


def handle_penalty(ctx: HandlerContext) -> AssistantResponse:
    earnings = ctx.driver.earnings_on(ctx.today)

    if earnings is None or not earnings.penalties:
        return _text(responses.NO_PENALTY)

    reasons = " ".join(f"{reason}." for reason in earnings.penalties.values())
    return _text(responses.PENALTIES_TODAY.format(count=len(earnings.penalties), reasons=reasons))


def handle_challan(ctx: HandlerContext) -> AssistantResponse:
    steps = ctx.knowledge_base.guide("contest_challan")
    return _text(responses.CHALLAN_INTRO, _guide_suggestions(steps))


def handle_digilocker(ctx: HandlerContext) -> AssistantResponse:
    steps = ctx.knowledge_base.guide("digilocker_upload")
    return _text(responses.DIGILOCKER_INTRO, _guide_suggestions(steps))


def handle_insurance(ctx: HandlerContext) -> AssistantResponse:
    steps = ctx.knowledge_base.guide("apply_insurance")
    return _text(responses.INSURANCE_INTRO, _guide_suggestions(steps))


def handle_business(ctx: HandlerContext) -> AssistantResponse:
    """Compare today's net earnings with the same weekday last week"""
    today = ctx.driver.earnings_on(ctx.today)
    week_ago = ctx.driver.earnings_on(ctx.today - timedelta(days=7))

    if today is None or week_ago is None:
        return _text(responses.BUSINESS_NO_DATA)

    if week_ago.net_earnings == 0:
        return _text(responses.BUSINESS_NO_BASELINE.format(today=today.net_earnings))

    growth_percent = (today.net_earnings - week_ago.net_earnings) / week_ago.net_earnings * 100

    if growth_percent >= 0:
        growth = responses.GROWTH_UP.format(percent=growth_percent)
    else:
        growth = responses.GROWTH_DOWN.format(percent=-growth_percent)

    return _text(responses.BUSINESS_COMPARISON.format(
        growth=growth,
        today=today.net_earnings,
        week_ago=week_ago.net_earnings,
    ))


def handle_emergency(ctx: HandlerContext) -> AssistantResponse:
    driver = ctx.driver
    contact = driver.emergency_contact

    try:
        ctx.alert_sink.notify(
            driver.name,
            contact.name if contact else None,
            contact.phone if contact else None,
        )
    except Exception as e:
        logger.error(f"Emergency notification failed for {driver.id}: {e}")

    return _text(responses.EMERGENCY_SENT)


def handle_unknown(ctx: HandlerContext) -> AssistantResponse:
    return _text(responses.UNKNOWN_QUERY, responses.UNKNOWN_SUGGESTIONS)


HANDLERS: Dict[Intent, Callable[[HandlerContext], AssistantResponse]] = {
    Intent.GREETING: handle_greeting,
    Intent.THANKS: handle_thanks,
    Intent.HELP: handle_help,
    Intent.EARNINGS: handle_earnings,
    Intent.PENALTY: handle_penalty,
    Intent.CHALLAN: handle_challan,
    Intent.DIGILOCKER: handle_digilocker,
    Intent.BUSINESS: handle_business,
    Intent.EMERGENCY: handle_emergency,
    Intent.INSURANCE: handle_insurance,
    Intent.UNKNOWN: handle_unknown,
}


# ============== NODES ==============
def make_resolve_node(driver_store: DriverStore) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """Node loading the driver; unknown ids end the run with the not-found reply"""

    def resolve_driver_node(state: Dict[str, Any]) -> Dict[str, Any]:
        driver = driver_store.get(state.get("driver_id", ""))

        if driver is None:
            logger.info(f"Driver {state.get('driver_id')} not found")
            return {
                **state,
                "driver": None,
                "response": _text(responses.DRIVER_NOT_FOUND),
            }

        return {**state, "driver": driver}

    return resolve_driver_node


def classify_node(state: Dict[str, Any]) -> Dict[str, Any]:
    intent = classify_intent(state.get("query", ""))
    logger.debug(f"Query classified as {intent.value}")
    return {**state, "intent": intent}


def make_handler_node(
    intent: Intent,
    knowledge_base: KnowledgeBase,
    alert_sink: AlertSink,
) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """Wrap the handler for one intent as a graph node"""
    handler = HANDLERS[intent]

    def handler_node(state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = HandlerContext(
            driver=state["driver"],
            today=state["today"],
            knowledge_base=knowledge_base,
            alert_sink=alert_sink,
        )
        return {**state, "response": handler(ctx)}

    handler_node.__name__ = f"{intent.value}_node"
    return handler_node
