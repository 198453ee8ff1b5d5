# shallnotcollide/broadcast/core.py
import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional

from ..constants.connection import ServerConstants
from ..simulation.core import SimulationEngine
from ..simulation.data_models import NewConflict

logger = logging.getLogger(__name__)

@dataclass
class BroadcastCycle:
    """Messages produced by one tick of the broadcast loop."""
    tick: int
    tracks: Dict[str, Any]
    alerts: List[Dict[str, Any]] = field(default_factory=list)

class TrafficBroadcaster:
    """
    Drives the engine on behalf of the server and keeps the last tracks
    message and a bounded alert history for clients that poll.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        history: int = ServerConstants.ALERT_HISTORY,
        clock: Callable[[], float] = time.time
    ):
        self.engine = engine
        self.clock = clock
        self._lock = threading.Lock()
        self._alerts: Deque[Dict[str, Any]] = deque(maxlen=history)
        self._latest_tracks: Optional[Dict[str, Any]] = None

    def tracks_message(self) -> Dict[str, Any]:
        return {
            "type": "tracks",
            "tracks": [view.to_dict() for view in self.engine.snapshot()],
        }

    def alert_message(self, conflict: NewConflict) -> Dict[str, Any]:
        return {
            "type": "alert",
            "message": conflict.message,
            "aircraft": [conflict.aircraft1_callsign, conflict.aircraft2_callsign],
            "distance_km": conflict.distance_km,
            "timestamp": int(self.clock() * 1000),
        }

    def cycle(self) -> BroadcastCycle:
        """Ticks the engine once and publishes the resulting messages."""
        new_conflicts = self.engine.tick()
        tracks = self.tracks_message()
        alerts = [self.alert_message(conflict) for conflict in new_conflicts]

        with self._lock:
            self._latest_tracks = tracks
            self._alerts.extend(alerts)

        return BroadcastCycle(tick=self.engine.tick_count, tracks=tracks, alerts=alerts)

    def latest_tracks(self) -> Dict[str, Any]:
        """Last published tracks, or a fresh snapshot before the first cycle."""
        with self._lock:
            tracks = self._latest_tracks
        return tracks if tracks is not None else self.tracks_message()

    def alerts_since(self, timestamp_ms: int = 0) -> List[Dict[str, Any]]:
        with self._lock:
            return [alert for alert in self._alerts if alert["timestamp"] > timestamp_ms]
