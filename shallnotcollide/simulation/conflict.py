# shallnotcollide/simulation/conflict.py
import logging
from typing import Dict, List, Sequence

from ..constants.simulation import SimConstants
from .data_models import Aircraft, Conflict, NewConflict, conflict_key
from .utils.coordinates import distance_km

logger = logging.getLogger(__name__)

class ConflictDetector:
    """
    Pairwise loss-of-separation detector.

    The active-conflict map is rebuilt from scratch on every scan and then
    swapped in for the previous one. A conflict is new when its pair key was
    not in the previous map; conflicts that stop meeting the thresholds simply
    drop out of the rebuilt map. The scan is O(n^2) in the fleet size, which
    is the scaling limit of the simulation.
    """

    def __init__(self, horizontal_km: float = SimConstants.SEPARATION['HORIZONTAL_KM'],
                 vertical_ft: float = SimConstants.SEPARATION['VERTICAL_FT']):
        self.horizontal_km = horizontal_km
        self.vertical_ft = vertical_ft
        self._active: Dict[str, Conflict] = {}
        self._warned_fleet_size = False

    @property
    def active_conflicts(self) -> Dict[str, Conflict]:
        return dict(self._active)

    def is_conflict(self, horizontal_km: float, altitude_difference: float) -> bool:
        return horizontal_km < self.horizontal_km and altitude_difference < self.vertical_ft

    def detect(self, aircraft: Sequence[Aircraft], tick: int = 0) -> List[NewConflict]:
        """Scans every pair once and returns the conflicts that opened on this tick."""
        if len(aircraft) > SimConstants.PAIRWISE_SCAN_WARNING_SIZE and not self._warned_fleet_size:
            logger.warning(f"Pairwise conflict scan over {len(aircraft)} aircraft; expect slow ticks.")
            self._warned_fleet_size = True

        current: Dict[str, Conflict] = {}
        new_conflicts: List[NewConflict] = []

        for i in range(len(aircraft)):
            for j in range(i + 1, len(aircraft)):
                a, b = aircraft[i], aircraft[j]
                horizontal = distance_km(a.lat, a.lon, b.lat, b.lon)
                vertical = abs(a.altitude - b.altitude)
                if not self.is_conflict(horizontal, vertical):
                    continue

                first, second = (a, b) if a.id < b.id else (b, a)
                key = conflict_key(a.id, b.id)
                previous = self._active.get(key)
                conflict = Conflict(
                    key=key,
                    aircraft1_id=first.id,
                    aircraft2_id=second.id,
                    aircraft1_callsign=first.callsign,
                    aircraft2_callsign=second.callsign,
                    distance_km=horizontal,
                    altitude_difference=vertical,
                    opened_at_tick=previous.opened_at_tick if previous else tick,
                )
                current[key] = conflict

                if previous is None:
                    new_conflicts.append(conflict.to_new_conflict())
                    logger.info(f"New conflict: {conflict.message}")

        for key, conflict in self._active.items():
            if key not in current:
                self._on_resolved(conflict, tick)

        self._active = current
        return new_conflicts

    def reset(self) -> None:
        self._active = {}

    def _on_resolved(self, conflict: Conflict, tick: int) -> None:
        # Resolution is intentionally not reported to callers.
        logger.debug(f"Conflict {conflict.key} cleared after {tick - conflict.opened_at_tick} ticks")
