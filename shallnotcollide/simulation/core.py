# shallnotcollide/simulation/core.py
import logging
import random
import threading
from typing import Dict, Iterable, List, Optional

from .airports import AirportRegistry
from .config import SimulationConfig
from .conflict import ConflictDetector
from .data_models import Aircraft, AircraftView, Airport, Conflict, FlightPhase, NewConflict, make_callsign
from .systems.navigation import PositionIntegrator
from .systems.phase import FlightPhaseEngine
from .utils.coordinates import distance_km

logger = logging.getLogger(__name__)

class SimulationEngine:
    """
    Owns the fleet and the active-conflict map and advances both one tick
    at a time.

    tick() and snapshot() serialize on a single lock. snapshot() returns
    frozen views, so readers work on the copy without touching the lock
    again while the next tick runs.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        registry: Optional[AirportRegistry] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or SimulationConfig()
        self.registry = registry or AirportRegistry()
        self.rng = rng or random.Random(self.config.seed)

        self.phase_engine = FlightPhaseEngine(self.rng, self.config.tick_seconds)
        self.integrator = PositionIntegrator(self.registry, self.rng, self.config.tick_seconds)
        self.detector = ConflictDetector()

        self._lock = threading.Lock()
        self._tick_count = 0
        self.aircraft: List[Aircraft] = [
            self._create_aircraft(aircraft_id)
            for aircraft_id in range(1, self.config.aircraft_count + 1)
        ]
        logger.info(f"SimulationEngine initialized with {len(self.aircraft)} aircraft "
                    f"across {len(self.registry)} airports.")

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def aircraft_count(self) -> int:
        return len(self.aircraft)

    @property
    def active_conflicts(self) -> Dict[str, Conflict]:
        with self._lock:
            return self.detector.active_conflicts

    def tick(self) -> List[NewConflict]:
        """Advances every aircraft, then returns the conflicts that opened on this tick."""
        with self._lock:
            self._tick_count += 1
            for plane in self.aircraft:
                dist = distance_km(plane.lat, plane.lon, plane.destination.lat, plane.destination.lon)
                self.phase_engine.update(plane, dist)
                self.integrator.advance(plane, dist)
            return self.detector.detect(self.aircraft, self._tick_count)

    def snapshot(self) -> List[AircraftView]:
        with self._lock:
            return [plane.to_view() for plane in self.aircraft]

    def _create_aircraft(self, aircraft_id: int) -> Aircraft:
        departure = self.registry.random_choice(self.rng)
        destination = self.registry.random_choice(self.rng)
        return Aircraft(
            id=aircraft_id,
            callsign=make_callsign(aircraft_id),
            lat=departure.lat,
            lon=departure.lon,
            destination=destination,
            phase=FlightPhase.GROUND_TAXI,
        )

def initialize(
    aircraft_count: int,
    seed: Optional[int] = None,
    airports: Optional[Iterable[Airport]] = None
) -> SimulationEngine:
    """Builds an engine with aircraft_count aircraft parked at random airports."""
    config = SimulationConfig(aircraft_count=aircraft_count, seed=seed)
    registry = AirportRegistry(airports) if airports is not None else AirportRegistry()
    return SimulationEngine(config=config, registry=registry)
