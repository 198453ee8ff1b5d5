# shallnotcollide/simulation/data_models.py
"""
Defines the core data structures shared by the simulation components.
Aircraft is the only mutable record; everything handed across the engine
boundary (AircraftView, NewConflict) is frozen so it can be serialized
without holding the engine lock.
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Tuple

from ..constants.simulation import SimConstants

class FlightPhase(str, Enum):
    GROUND_TAXI = "TAXIING"
    TAKEOFF = "TAKING OFF"
    CLIMB = "CLIMBING"
    CRUISE = "CRUISING"
    DESCENT = "DESCENDING"
    LANDING = "LANDING"

@dataclass(frozen=True)
class Airport:
    """A named waypoint aircraft fly between."""
    name: str
    lat: float
    lon: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.lat, self.lon)

def make_callsign(aircraft_id: int) -> str:
    return SimConstants.CALLSIGN_PREFIX + str(aircraft_id).zfill(SimConstants.CALLSIGN_DIGITS)

def conflict_key(id_a: int, id_b: int) -> str:
    """Canonical key for an unordered aircraft pair, lower id first."""
    low, high = sorted((id_a, id_b))
    return f"{low}-{high}"

@dataclass
class Aircraft:
    """Kinematic and lifecycle state of one simulated aircraft."""
    id: int
    callsign: str
    lat: float
    lon: float
    destination: Airport
    altitude: float = SimConstants.ALTITUDE['GROUND_FLOOR']
    speed: float = 0.0
    heading: int = 0
    distance_traveled: float = 0.0
    phase: FlightPhase = FlightPhase.GROUND_TAXI
    target_altitude: float = SimConstants.ALTITUDE['INITIAL_TARGET']
    climb_rate: float = SimConstants.RATES['CLIMB_FPM']

    @property
    def position(self) -> Tuple[float, float]:
        return (self.lat, self.lon)

    def to_view(self) -> "AircraftView":
        return AircraftView(
            id=self.id,
            callsign=self.callsign,
            lat=self.lat,
            lon=self.lon,
            altitude=round(self.altitude),
            speed=round(self.speed),
            heading=self.heading,
            phase=self.phase.value,
            destination_name=self.destination.name,
        )

@dataclass(frozen=True)
class AircraftView:
    """Read-only export of one aircraft for external consumers."""
    id: int
    callsign: str
    lat: float
    lon: float
    altitude: int
    speed: int
    heading: int
    phase: str
    destination_name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class Conflict:
    """Loss of separation between two aircraft, as observed on one tick."""
    key: str
    aircraft1_id: int
    aircraft2_id: int
    aircraft1_callsign: str
    aircraft2_callsign: str
    distance_km: float
    altitude_difference: float
    opened_at_tick: int

    @property
    def message(self) -> str:
        return (f"CONFLICT: {self.aircraft1_callsign} and {self.aircraft2_callsign} - "
                f"{self.distance_km:.1f} km apart")

    def to_new_conflict(self) -> "NewConflict":
        return NewConflict(
            aircraft1_callsign=self.aircraft1_callsign,
            aircraft2_callsign=self.aircraft2_callsign,
            distance_km=round(self.distance_km, 1),
            message=self.message,
        )

@dataclass(frozen=True)
class NewConflict:
    """A conflict reported on the tick it first appeared."""
    aircraft1_callsign: str
    aircraft2_callsign: str
    distance_km: float
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
