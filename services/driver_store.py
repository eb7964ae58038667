# services/driver_store.py
"""Thread-safe in-memory driver record store"""

import logging
import threading
from datetime import date, timedelta
from typing import Dict, List, Optional

from models.driver_models import DailyEarnings, Driver, EmergencyContact, Vehicle

logger = logging.getLogger(__name__)


class DriverStore:
    """
    Driver profiles keyed by id.

    Reads hand out deep copies and writes happen under a lock, so a reader
    never sees a Driver or DailyEarnings that is half way through an update.
    """

    def __init__(self):
        self._drivers: Dict[str, Driver] = {}
        self._lock = threading.RLock()

    def get(self, driver_id: str) -> Optional[Driver]:
        """Return a snapshot of the driver, or None if unknown"""
        with self._lock:
            driver = self._drivers.get(driver_id)
            return driver.model_copy(deep=True) if driver else None

    def put(self, driver: Driver) -> None:
        """Insert or overwrite a driver by id"""
        with self._lock:
            self._drivers[driver.id] = driver.model_copy(deep=True)
        logger.debug(f"Stored driver {driver.id}")

    def set_earnings(self, driver_id: str, day: date, earnings: DailyEarnings) -> bool:
        """
        Write the ledger row for one calendar day, replacing any existing row.

        Unknown drivers are ignored: nothing is written and False is returned.
        """
        with self._lock:
            driver = self._drivers.get(driver_id)
            if driver is None:
                logger.warning(f"Ignoring earnings for unknown driver {driver_id}")
                return False
            driver.earnings[day] = earnings.model_copy(deep=True)
        logger.debug(f"Stored earnings for driver {driver_id} on {day.isoformat()}")
        return True

    def list_ids(self) -> List[str]:
        with self._lock:
            return sorted(self._drivers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._drivers)


def seed_sample_drivers(store: DriverStore, today: Optional[date] = None) -> None:
    """Load the two demo drivers, with ledger rows relative to today"""
    today = today or date.today()

    rajesh = Driver(
        id="driver123",
        name="Rajesh Kumar",
        phone="9876543210",
        language_preference="hi",
        vehicle=Vehicle(type="Tata Ace", number="MH01AB1234", insurance_expiry="2024-12-31"),
        emergency_contact=EmergencyContact(name="Sunita Devi", phone="9123456789", relationship="Wife"),
    )
    store.put(rajesh)
    store.set_earnings(rajesh.id, today, DailyEarnings(
        total_earnings=2500,
        expenses=500,
        net_earnings=2000,
        completed_trips=8,
        penalties={"penalty1": "Late delivery by 30 minutes"},
        rewards={"reward1": "Customer appreciation bonus"},
    ))
    store.set_earnings(rajesh.id, today - timedelta(days=1), DailyEarnings(
        total_earnings=2200,
        expenses=450,
        net_earnings=1750,
        completed_trips=7,
    ))
    store.set_earnings(rajesh.id, today - timedelta(days=7), DailyEarnings(
        total_earnings=2100,
        expenses=400,
        net_earnings=1700,
        completed_trips=6,
    ))

    store.put(Driver(
        id="driver456",
        name="Mohan Singh",
        phone="8765432109",
        language_preference="hi",
        vehicle=Vehicle(type="Mahindra Bolero", number="DL02CD5678", insurance_expiry="2024-10-15"),
        emergency_contact=EmergencyContact(name="Ramesh Singh", phone="8987654321", relationship="Brother"),
    ))

    logger.info(f"Seeded {len(store)} sample drivers")
