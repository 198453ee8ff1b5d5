"""
visualization - Interactive maps of the simulated traffic picture
"""

from .map import TrafficMapVisualizer

__all__ = ['TrafficMapVisualizer']
