# models/driver_models.py
"""Pydantic models for driver profiles and the daily earnings ledger"""

from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Dict, Optional
from datetime import date


class Vehicle(BaseModel):
    """Vehicle owned by a driver"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str
    number: str
    insurance_expiry: Optional[str] = Field(default=None, alias="insuranceExpiry")
    registration_doc_id: Optional[str] = Field(default=None, alias="registrationDocId")


class EmergencyContact(BaseModel):
    """Person to notify when the driver raises an emergency"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    phone: str
    relationship: Optional[str] = None


class DailyEarnings(BaseModel):
    """One day of a driver's ledger"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_earnings: float = Field(default=0.0, ge=0, alias="totalEarnings")
    expenses: float = Field(default=0.0, ge=0)
    net_earnings: Optional[float] = Field(default=None, ge=0, alias="netEarnings")
    completed_trips: int = Field(default=0, ge=0, alias="completedTrips")

    # penalty/reward id -> reason
    penalties: Dict[str, str] = Field(default_factory=dict)
    rewards: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def fill_net_earnings(self) -> "DailyEarnings":
        """Derive net earnings when the producer did not set them"""
        if self.net_earnings is None:
            self.net_earnings = max(self.total_earnings - self.expenses, 0.0)
        return self


class Driver(BaseModel):
    """Driver profile with the date-indexed earnings ledger"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str
    phone: str
    language_preference: str = Field(default="hi", alias="languagePreference")
    vehicle: Optional[Vehicle] = None
    emergency_contact: Optional[EmergencyContact] = Field(default=None, alias="emergencyContact")

    # One record per calendar day
    earnings: Dict[date, DailyEarnings] = Field(default_factory=dict)

    def earnings_on(self, day: date) -> Optional[DailyEarnings]:
        """Ledger row for a calendar day, if any"""
        return self.earnings.get(day)
