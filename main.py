# main.py
"""Porter Saathi assistant API"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import List

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

import config
from models.api_models import AssistantRequest, AssistantResponse, EmergencyAlert
from models.driver_models import DailyEarnings, Driver
from saathi_agent.engine import QueryEngine
from saathi_agent.graph import responses
from services.alert_service import build_alert_sink
from services.driver_store import DriverStore, seed_sample_drivers
from services.knowledge_base import KnowledgeBase

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Shared collaborators, one instance per process
driver_store = DriverStore()
if config.SEED_SAMPLE_DATA:
    seed_sample_drivers(driver_store)

knowledge_base = KnowledgeBase()
alert_sink = build_alert_sink()
engine = QueryEngine(driver_store, knowledge_base, alert_sink)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect and release the emergency alert sink"""
    loop = asyncio.get_event_loop()

    # Redis ping may block for the socket timeout
    await loop.run_in_executor(None, alert_sink.initialize)
    logger.info(f"Alert sink ready: {alert_sink.health_check()}")

    yield

    await loop.run_in_executor(None, alert_sink.close)


app = FastAPI(title="Porter Saathi", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(message: str) -> JSONResponse:
    body = AssistantResponse(response=message)
    return JSONResponse(status_code=500, content=body.model_dump(mode="json", by_alias=True))


async def run_query(request: AssistantRequest, timeout: float) -> AssistantResponse:
    """Run the synchronous engine in the thread pool"""
    loop = asyncio.get_event_loop()
    return await asyncio.wait_for(
        loop.run_in_executor(None, engine.process_query, request),
        timeout=timeout
    )


@app.post("/api/query", response_model=AssistantResponse)
async def process_query(request: AssistantRequest):
    """Answer a driver's query"""
    try:
        return await run_query(request, config.QUERY_TIMEOUT)
    except asyncio.TimeoutError:
        logger.error(f"Query timeout for {request.driver_id}")
        return _error_response(responses.PROCESSING_ERROR)
    except Exception as e:
        logger.error(f"Error processing query: {e}")
        return _error_response(responses.PROCESSING_ERROR)


@app.get("/api/driver/{driver_id}", response_model=Driver)
async def get_driver(driver_id: str):
    driver = engine.get_driver(driver_id)
    if driver is None:
        raise HTTPException(status_code=404, detail=f"Driver {driver_id} not found")
    return driver


@app.get("/api/drivers", response_model=List[str])
async def list_drivers():
    return driver_store.list_ids()


@app.put("/api/driver", response_model=Driver)
async def put_driver(driver: Driver):
    """Insert or replace a driver profile"""
    driver_store.put(driver)
    return driver


@app.put("/api/driver/{driver_id}/earnings/{day}", response_model=DailyEarnings)
async def set_earnings(driver_id: str, day: date, earnings: DailyEarnings):
    """Write one day of a driver's ledger"""
    if not driver_store.set_earnings(driver_id, day, earnings):
        raise HTTPException(status_code=404, detail=f"Driver {driver_id} not found")
    return earnings


@app.post("/api/emergency/{driver_id}", response_model=AssistantResponse)
async def trigger_emergency(driver_id: str):
    """One-tap emergency button"""
    # Not "emergency help needed": any query containing "help" resolves to the help reply
    request = AssistantRequest(driver_id=driver_id, query="emergency")
    try:
        return await run_query(request, config.EMERGENCY_RESPONSE_TIMEOUT)
    except Exception as e:
        logger.error(f"Emergency trigger failed for {driver_id}: {e}")
        return _error_response(responses.EMERGENCY_FAILED)


@app.get("/api/commands", response_model=List[str])
async def get_available_commands():
    """Example voice commands shown in the app"""
    return knowledge_base.voice_commands()


@app.get("/api/health")
async def health():
    """Health check with alert sink status"""
    return {
        "status": "Porter Saathi API is running",
        "alerts": alert_sink.health_check(),
        "drivers": len(driver_store),
        "timestamp": datetime.now().isoformat()
    }


@app.websocket("/ws/voice-command")
async def voice_command(websocket: WebSocket):
    """Real-time queries: JSON requests are answered, anything else is echoed"""
    await websocket.accept()
    try:
        while True:
            message = await websocket.receive_text()

            try:
                request = AssistantRequest.model_validate_json(message)
            except ValidationError:
                await websocket.send_text(f"Received: {message}")
                continue

            try:
                reply = await run_query(request, config.QUERY_TIMEOUT)
            except Exception as e:
                logger.error(f"Voice command failed: {e}")
                reply = AssistantResponse(response=responses.PROCESSING_ERROR)

            await websocket.send_json(reply.model_dump(mode="json", by_alias=True))

    except WebSocketDisconnect:
        logger.info("Voice command socket closed")


@app.websocket("/ws/emergency-alert")
async def emergency_alert(websocket: WebSocket):
    """Emergency events pushed by the app, forwarded to the alert sink"""
    await websocket.accept()
    try:
        while True:
            message = await websocket.receive_text()
            logger.warning(f"Emergency alert received: {message}")

            try:
                alert = EmergencyAlert.model_validate_json(message)
            except ValidationError:
                alert = None

            if alert is not None:
                driver = engine.get_driver(alert.driver_id)
                contact = driver.emergency_contact if driver else None
                loop = asyncio.get_event_loop()
                try:
                    await loop.run_in_executor(
                        None,
                        alert_sink.notify,
                        driver.name if driver else alert.driver_id,
                        contact.name if contact else None,
                        contact.phone if contact else None,
                    )
                except Exception as e:
                    logger.error(f"Emergency notification failed for {alert.driver_id}: {e}")

            await websocket.send_text(f"Emergency alert acknowledged: {message}")

    except WebSocketDisconnect:
        logger.info("Emergency alert socket closed")


@app.get("/")
async def home():
    """Simple status page"""
    return {
        "status": "running",
        "bot": "Porter Saathi",
        "version": "1.0",
        "drivers": len(driver_store),
        "default_language": config.DEFAULT_LANGUAGE,
        "voice_responses_enabled": config.VOICE_RESPONSES_ENABLED,
        "alert_sink": alert_sink.name,
        "endpoints": {
            "query": "/api/query (POST)",
            "driver": "/api/driver/{id} (GET)",
            "emergency": "/api/emergency/{driverId} (POST)",
            "commands": "/api/commands (GET)",
            "health": "/api/health (GET)",
            "voice": "/ws/voice-command (WebSocket)",
            "emergency_alerts": "/ws/emergency-alert (WebSocket)"
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
