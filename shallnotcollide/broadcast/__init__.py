"""
broadcast - Periodic tick driver and message builder for the traffic server
"""

from .core import TrafficBroadcaster, BroadcastCycle

__all__ = ['TrafficBroadcaster', 'BroadcastCycle']
