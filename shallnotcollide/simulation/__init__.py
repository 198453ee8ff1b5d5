# shallnotcollide/simulation/__init__.py

"""
simulation - In-memory air traffic simulation with conflict detection
"""

# Local Imports
from .core import SimulationEngine, initialize
from .config import SimulationConfig
from .airports import AirportRegistry, TUNISIAN_AIRPORTS
from .conflict import ConflictDetector
from .data_models import Aircraft, AircraftView, Airport, Conflict, FlightPhase, NewConflict
from .exceptions import SimulationError, InvalidConfigurationError, UnknownAirportError

__all__ = [
    'SimulationEngine',
    'initialize',
    'SimulationConfig',
    'AirportRegistry',
    'TUNISIAN_AIRPORTS',
    'ConflictDetector',
    'Aircraft',
    'AircraftView',
    'Airport',
    'Conflict',
    'FlightPhase',
    'NewConflict',
    'SimulationError',
    'InvalidConfigurationError',
    'UnknownAirportError'
]
