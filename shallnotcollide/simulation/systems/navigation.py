# shallnotcollide/simulation/systems/navigation.py

# Standard import
import logging
import random

# Local import
from ...constants.simulation import SimConstants
from ..airports import AirportRegistry
from ..data_models import Aircraft, FlightPhase
from ..utils.coordinates import bearing_deg, interpolate

logger = logging.getLogger(__name__)

class PositionIntegrator:
    """Moves aircraft toward their destination and re-routes them on arrival."""

    def __init__(self, registry: AirportRegistry, rng: random.Random,
                 tick_seconds: float = SimConstants.TICK_SECONDS):
        self.registry = registry
        self.rng = rng
        self.tick_seconds = tick_seconds
        self.const = SimConstants

    def advance(self, aircraft: Aircraft, distance_km: float) -> bool:
        """
        Advances one tick. Returns True if the aircraft arrived, in which case
        it is re-routed and does not move this tick.
        """
        if distance_km <= 0:
            # Destination under the aircraft; the move ratio is undefined
            arrived = True
        else:
            arrived = distance_km < self.const.ARRIVAL_RADIUS_KM
        if arrived:
            self._arrive(aircraft)
        else:
            self._move(aircraft, distance_km)

        aircraft.heading = bearing_deg(aircraft.lat, aircraft.lon,
                                       aircraft.destination.lat, aircraft.destination.lon)
        return arrived

    def step_distance_km(self, speed_kmh: float) -> float:
        return speed_kmh / 3600 * self.tick_seconds

    def _move(self, aircraft: Aircraft, distance_km: float) -> None:
        step = self.step_distance_km(aircraft.speed)
        move_ratio = step / distance_km
        if move_ratio < 1:
            aircraft.lat, aircraft.lon = interpolate(aircraft.lat, aircraft.lon,
                                                     aircraft.destination.lat, aircraft.destination.lon,
                                                     move_ratio)
            aircraft.distance_traveled += step

    def _arrive(self, aircraft: Aircraft) -> None:
        previous = aircraft.destination
        aircraft.destination = self.registry.random_choice(self.rng)
        aircraft.distance_traveled = 0.0
        aircraft.altitude = self.const.ALTITUDE['GROUND_FLOOR']
        aircraft.phase = FlightPhase.GROUND_TAXI
        aircraft.speed = self.const.SPEEDS[FlightPhase.GROUND_TAXI.value]
        logger.debug(f"{aircraft.callsign} arrived at {previous.name}, next leg to {aircraft.destination.name}")
