# shallnotcollide/simulation/utils/__init__.py
from .coordinates import distance_km, bearing_deg, interpolate, distance, bearing

__all__ = ['distance_km', 'bearing_deg', 'interpolate', 'distance', 'bearing']
