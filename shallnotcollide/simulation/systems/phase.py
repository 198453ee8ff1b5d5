# shallnotcollide/simulation/systems/phase.py

# Standard import
import random
from typing import Callable, Tuple

# Local import
from ...constants.simulation import SimConstants
from ..data_models import Aircraft, FlightPhase

PhaseRule = Callable[[Aircraft, float], bool]

class FlightPhaseEngine:
    """
    Per-aircraft lifecycle state machine. Drives phase, speed and altitude
    once per tick from the aircraft's own state and its distance to
    destination.

    Phase transitions are an ordered rule list rather than a switch on the
    current phase: the final-approach rule has to be checked first no matter
    what the aircraft is doing, so an aircraft mid-climb that finds itself
    near its destination is still pulled into descent.
    """

    def __init__(self, rng: random.Random, tick_seconds: float = SimConstants.TICK_SECONDS):
        self.rng = rng
        self.tick_seconds = tick_seconds
        self.const = SimConstants
        self.rules: Tuple[PhaseRule, ...] = (
            self._final_approach,
            self._begin_takeoff,
            self._begin_climb,
            self._level_off,
        )

    def climb_step_ft(self, aircraft: Aircraft) -> float:
        return aircraft.climb_rate / 60 * self.tick_seconds

    @property
    def descent_step_ft(self) -> float:
        return self.const.RATES['DESCENT_FPM'] / 60 * self.tick_seconds

    def update(self, aircraft: Aircraft, distance_km: float) -> None:
        self.update_phase(aircraft, distance_km)
        self.update_speed(aircraft)
        self.update_altitude(aircraft)

    def update_phase(self, aircraft: Aircraft, distance_km: float) -> None:
        """Applies the first rule that fires; no rule firing keeps the phase."""
        for rule in self.rules:
            if rule(aircraft, distance_km):
                return

    def update_speed(self, aircraft: Aircraft) -> None:
        target = self.target_speed(aircraft)
        step = self.const.ACCELERATION_KMH_PER_TICK
        if aircraft.speed < target:
            aircraft.speed = min(aircraft.speed + step, target)
        elif aircraft.speed > target:
            aircraft.speed = max(aircraft.speed - step, target)

    def update_altitude(self, aircraft: Aircraft) -> None:
        floor = self.const.ALTITUDE['GROUND_FLOOR']
        phase = aircraft.phase

        if phase in (FlightPhase.GROUND_TAXI, FlightPhase.LANDING):
            aircraft.altitude = floor
        elif phase == FlightPhase.TAKEOFF:
            aircraft.altitude += self.climb_step_ft(aircraft) * self.const.RATES['TAKEOFF_CLIMB_FACTOR']
        elif phase == FlightPhase.CLIMB:
            if aircraft.altitude < aircraft.target_altitude:
                aircraft.altitude += self.climb_step_ft(aircraft)
        elif phase == FlightPhase.CRUISE:
            aircraft.altitude += (self.rng.random() - 0.5) * self.const.ALTITUDE['CRUISE_JITTER']
        elif phase == FlightPhase.DESCENT:
            if aircraft.altitude > aircraft.target_altitude:
                aircraft.altitude -= self.descent_step_ft

        aircraft.altitude = max(aircraft.altitude, floor)

    def target_speed(self, aircraft: Aircraft) -> float:
        # A taxiing aircraft only survives the rule list when it has a leg
        # beyond approach range ahead of it, so it is on its departure roll.
        if aircraft.phase == FlightPhase.GROUND_TAXI:
            return self.const.SPEEDS[FlightPhase.TAKEOFF.value]
        return self.const.SPEEDS[aircraft.phase.value]

    # --- Transition rules, in priority order ---

    def _final_approach(self, aircraft: Aircraft, distance_km: float) -> bool:
        if distance_km >= self.const.APPROACH_RADIUS_KM:
            return False
        if aircraft.altitude > self.const.ALTITUDE['ROTATION']:
            aircraft.phase = FlightPhase.DESCENT
            aircraft.target_altitude = self.const.ALTITUDE['DESCENT_TARGET']
        else:
            aircraft.phase = FlightPhase.LANDING
        return True

    def _begin_takeoff(self, aircraft: Aircraft, distance_km: float) -> bool:
        if aircraft.phase == FlightPhase.GROUND_TAXI and aircraft.speed > self.const.TAKEOFF_ROLL_SPEED:
            aircraft.phase = FlightPhase.TAKEOFF
            return True
        return False

    def _begin_climb(self, aircraft: Aircraft, distance_km: float) -> bool:
        if aircraft.phase == FlightPhase.TAKEOFF and aircraft.altitude > self.const.ALTITUDE['ROTATION']:
            aircraft.phase = FlightPhase.CLIMB
            aircraft.target_altitude = (self.const.ALTITUDE['CRUISE_MIN']
                                        + self.rng.random() * self.const.ALTITUDE['CRUISE_SPREAD'])
            return True
        return False

    def _level_off(self, aircraft: Aircraft, distance_km: float) -> bool:
        if (aircraft.phase == FlightPhase.CLIMB and
                aircraft.altitude >= aircraft.target_altitude - self.const.ALTITUDE['LEVEL_OFF_MARGIN']):
            aircraft.phase = FlightPhase.CRUISE
            return True
        return False
