# shallnotcollide/simulation/exceptions.py
"""
Simulation Exceptions
Error types raised while building or driving the traffic simulation
"""

class SimulationError(Exception):
    """Base class for all simulation errors"""
    pass

class InvalidConfigurationError(SimulationError):
    """Invalid simulation configuration detected"""
    def __init__(self, config_name, value=None, message="Invalid configuration"):
        self.config_name = config_name
        self.value = value
        super().__init__(f"{message}: {config_name}={value!r}")

class UnknownAirportError(SimulationError):
    """Requested airport is not part of the registry"""
    def __init__(self, name, message="Unknown airport"):
        self.name = name
        super().__init__(f"{message}: {name}")
