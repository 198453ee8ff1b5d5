# helpers/simulation.py
import logging
import os
import sys
import time

# --- Path Correction ---
HELPER_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(HELPER_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# --- Core Project Imports ---
from shallnotcollide.broadcast.core import TrafficBroadcaster
from shallnotcollide.constants.connection import ServerConstants
from shallnotcollide.simulation.core import SimulationEngine
from shallnotcollide.simulation.config import SimulationConfig

def env_int(name: str, default):
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        logging.warning(f"Ignoring non-integer {name}={value!r}; using {default}")
        return default

def build_broadcaster() -> TrafficBroadcaster:
    """Creates the engine and broadcaster from SNC_* environment settings."""
    config = SimulationConfig(
        aircraft_count=env_int('SNC_AIRCRAFT_COUNT', SimulationConfig.aircraft_count),
        seed=env_int('SNC_SEED', None)
    )
    return TrafficBroadcaster(SimulationEngine(config=config))

def run_cycle(state: dict) -> int:
    """One broadcast cycle; returns the number of new alerts."""
    result = state['broadcaster'].cycle()
    for alert in result.alerts:
        logging.info(f"New conflict alert: {alert['message']}")
    return len(result.alerts)

def simulation_worker(state: dict, interval: float = ServerConstants.BROADCAST_INTERVAL_SEC):
    logging.info(f"Simulation worker started, ticking every {interval}s.")
    while not state['stop_event'].is_set():
        try:
            run_cycle(state)
            state['stop_event'].wait(interval)
        except Exception as e:
            logging.error(f"FATAL ERROR in simulation_worker: {e}", exc_info=True)
            time.sleep(ServerConstants.WORKER_RETRY_SEC)
    logging.info("Simulation worker stopped.")
