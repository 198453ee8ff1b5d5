# shallnotcollide/simulation/config.py
from dataclasses import dataclass
from typing import Optional

from ..constants.simulation import SimConstants
from .exceptions import InvalidConfigurationError

@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    aircraft_count: int = SimConstants.DEFAULT_AIRCRAFT_COUNT
    tick_seconds: float = SimConstants.TICK_SECONDS
    seed: Optional[int] = None

    def __post_init__(self):
        # bool is an int subclass but never a meaningful fleet size
        if isinstance(self.aircraft_count, bool) or not isinstance(self.aircraft_count, int):
            raise InvalidConfigurationError("aircraft_count", self.aircraft_count,
                                            message="Aircraft count must be an integer")
        if self.aircraft_count <= 0:
            raise InvalidConfigurationError("aircraft_count", self.aircraft_count,
                                            message="Aircraft count must be positive")
        if self.tick_seconds <= 0:
            raise InvalidConfigurationError("tick_seconds", self.tick_seconds,
                                            message="Tick duration must be positive")
