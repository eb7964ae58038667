# models/api_models.py
"""Pydantic models for assistant requests and responses"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, Optional
from enum import Enum

import config


# ============== ENUMS ==============
class ResponseKind(str, Enum):
    TEXT = "text"
    AUDIO = "audio"


# ============== ASSISTANT API MODELS ==============
class AssistantRequest(BaseModel):
    """A single query from a driver"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Missing or null values fall through to the not-found / unknown replies
    driver_id: Optional[str] = Field(default="", alias="driverId")
    query: Optional[str] = ""
    language: Optional[str] = config.DEFAULT_LANGUAGE


class AssistantResponse(BaseModel):
    """Reply text plus suggested follow-up queries"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response: str
    type: ResponseKind = ResponseKind.TEXT
    audio_url: Optional[str] = Field(default=None, alias="audioUrl")

    # suggestion key -> follow-up query text
    suggestions: Dict[str, str] = Field(default_factory=dict)


# ============== EMERGENCY MODELS ==============
class EmergencyAlert(BaseModel):
    """Emergency event pushed by the driver app over the socket"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    driver_id: str = Field(alias="driverId")
    location: Optional[str] = None
    emergency_type: Optional[str] = Field(default=None, alias="emergencyType")
    timestamp: Optional[str] = None
