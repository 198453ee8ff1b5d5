#!/usr/bin/env python3
"""
Simulation Systems Package
Per-aircraft lifecycle and movement updates applied on every tick
"""
from .phase import FlightPhaseEngine
from .navigation import PositionIntegrator

# Public API
__all__ = [
    'FlightPhaseEngine',
    'PositionIntegrator'
]
